"""
Core math modules для combinat

Факториальные функции над числовой башней и их арифметический интерфейс.
"""

# Tower Arithmetic
from src.combinat.math.arithmetic import (
    # Constants
    POLE,
    POLE_SYMBOL,
    # Exceptions
    InvalidArgument,
    # Types
    PoleSentinel,
    # Ring operations
    add,
    div,
    floor,
    invert,
    mul,
    sub,
    # Predicates
    is_native_integer,
    is_pole,
    is_zero,
    lift,
    # Validation
    validate_index_range,
    validate_native_integer,
    validate_non_negative_integer,
    validate_positive_integer,
)

# Factorials
from src.combinat.math.factorials import (
    DOUBLE_FACTORIAL_STEP,
    SUBFACTORIAL_FLOAT_EXACT_MAX_N,
    double_factorial,
    factorial,
    multifactorial,
    strided_product,
    subfactorial,
)

# Falling / Rising factorials
from src.combinat.math.pochhammer import (
    FALLING_FACTORIAL_VARIANTS,
    RISING_FACTORIAL_VARIANTS,
    ArgKind,
    classify,
    factorial_power,
    falling_factorial,
    pochhammer,
    rising_factorial,
)

# Stirling numbers
from src.combinat.math.stirling import (
    STIRLING_SECOND_KIND_MIN_K,
    stirling_first_kind,
    stirling_first_kind_unsigned,
    stirling_second_kind,
)

__all__ = [
    # Tower Arithmetic — Constants
    "POLE",
    "POLE_SYMBOL",
    # Tower Arithmetic — Exceptions
    "InvalidArgument",
    # Tower Arithmetic — Types
    "PoleSentinel",
    # Tower Arithmetic — Ring operations
    "add",
    "div",
    "floor",
    "invert",
    "mul",
    "sub",
    # Tower Arithmetic — Predicates
    "is_native_integer",
    "is_pole",
    "is_zero",
    "lift",
    # Tower Arithmetic — Validation
    "validate_index_range",
    "validate_native_integer",
    "validate_non_negative_integer",
    "validate_positive_integer",
    # Factorials — Constants
    "DOUBLE_FACTORIAL_STEP",
    "SUBFACTORIAL_FLOAT_EXACT_MAX_N",
    # Factorials — Functions
    "double_factorial",
    "factorial",
    "multifactorial",
    "strided_product",
    "subfactorial",
    # Pochhammer — Dispatch
    "FALLING_FACTORIAL_VARIANTS",
    "RISING_FACTORIAL_VARIANTS",
    "ArgKind",
    "classify",
    # Pochhammer — Functions
    "factorial_power",
    "falling_factorial",
    "pochhammer",
    "rising_factorial",
    # Stirling — Constants
    "STIRLING_SECOND_KIND_MIN_K",
    # Stirling — Functions
    "stirling_first_kind",
    "stirling_first_kind_unsigned",
    "stirling_second_kind",
]
