"""
Pochhammer — Falling & Rising Factorials

Модуль вычисляет falling factorial (factorial power) и rising factorial
(Pochhammer symbol) над всей числовой башней:
- falling_factorial(x, n) = x·(x−1)·…·(x−n+1)
- rising_factorial(x, n)  = x·(x+1)·…·(x+n−1)

Выбор реализации — явная диспетчеризация по паре ArgKind(x), ArgKind(n):
    (NATIVE_INTEGER, NATIVE_INTEGER) → целочисленный путь (strided range)
    (RING,           NATIVE_INTEGER) → общий путь через кольцевые операции
Любая другая пара (n не native integer) → InvalidArgument.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. n = 0 → 1 для любого x
2. n < 0 → ровно один reciprocal-переход в парную функцию с n > 0
3. Точный ноль в знаменателе → POLE (invert на нуле не вызывается)
4. Целочисленный путь не переполняется (Python int)

ФОРМУЛЫ:
    falling(x, −m) = 1 / rising(x + 1, m)
    rising(x, −m)  = 1 / falling(x − 1, m)
    falling(x, n)  = rising(x − n + 1, n)
"""

from enum import Enum
from typing import Any, Callable, Final

from src.combinat.logging import get_logger
from src.combinat.math.arithmetic import (
    POLE,
    InvalidArgument,
    add,
    div,
    invert,
    is_native_integer,
    is_zero,
    mul,
    sub,
)
from src.combinat.math.factorials import strided_product

logger = get_logger(__name__)


# =============================================================================
# ARGUMENT KINDS
# =============================================================================


class ArgKind(str, Enum):
    """Capability tag аргумента для диспетчеризации."""

    NATIVE_INTEGER = "NATIVE_INTEGER"
    RING = "RING"


def classify(value: Any) -> ArgKind:
    """
    Классификация значения башни.

    Examples:
        >>> classify(3)
        <ArgKind.NATIVE_INTEGER: 'NATIVE_INTEGER'>
        >>> classify(3.5)
        <ArgKind.RING: 'RING'>
    """
    if is_native_integer(value):
        return ArgKind.NATIVE_INTEGER
    return ArgKind.RING


def _pole(function: str, x: Any, n: int):
    logger.debug("pole_result", function=function, x=repr(x), n=n)
    return POLE


# =============================================================================
# NATIVE INTEGER VARIANT
# =============================================================================


def _falling_factorial_int(x: int, n: int):
    x, n = int(x), int(n)

    if n == 0:
        return 1

    if n > 0:
        return strided_product(x, x - n, -1)

    denominator = rising_factorial(x + 1, -n)
    if denominator == 0:
        return _pole("falling_factorial", x, n)
    return div(1, denominator)


def _rising_factorial_int(x: int, n: int):
    x, n = int(x), int(n)

    if n == 0:
        return 1

    if n > 0:
        return strided_product(x, x + n, 1)

    denominator = falling_factorial(x - 1, -n)
    if denominator == 0:
        return _pole("rising_factorial", x, n)
    return div(1, denominator)


# =============================================================================
# GENERIC RING VARIANT
# =============================================================================


def _falling_factorial_ring(x: Any, n: int):
    n = int(n)

    if n == 0:
        return 1

    if n > 0:
        result = x
        for i in range(1, n):
            result = mul(result, sub(x, i))
        return result

    denominator = rising_factorial(add(x, 1), -n)
    if is_zero(denominator):
        return _pole("falling_factorial", x, n)
    return invert(denominator)


def _rising_factorial_ring(x: Any, n: int):
    n = int(n)

    if n == 0:
        return 1

    if n > 0:
        result = x
        for i in range(1, n):
            result = mul(result, add(x, i))
        return result

    denominator = falling_factorial(sub(x, 1), -n)
    if is_zero(denominator):
        return _pole("rising_factorial", x, n)
    return invert(denominator)


# =============================================================================
# DISPATCH
# =============================================================================

Variant = Callable[[Any, int], Any]

FALLING_FACTORIAL_VARIANTS: Final[dict[tuple[ArgKind, ArgKind], Variant]] = {
    (ArgKind.NATIVE_INTEGER, ArgKind.NATIVE_INTEGER): _falling_factorial_int,
    (ArgKind.RING, ArgKind.NATIVE_INTEGER): _falling_factorial_ring,
}

RISING_FACTORIAL_VARIANTS: Final[dict[tuple[ArgKind, ArgKind], Variant]] = {
    (ArgKind.NATIVE_INTEGER, ArgKind.NATIVE_INTEGER): _rising_factorial_int,
    (ArgKind.RING, ArgKind.NATIVE_INTEGER): _rising_factorial_ring,
}


def _select_variant(
    variants: dict[tuple[ArgKind, ArgKind], Variant],
    function: str,
    x: Any,
    n: Any,
) -> Variant:
    key = (classify(x), classify(n))
    variant = variants.get(key)
    if variant is None:
        raise InvalidArgument(
            f"{function}: exponent n must be a native integer, "
            f"got {type(n).__name__} {n!r}"
        )
    return variant


def falling_factorial(x: Any, n: int) -> Any:
    """
    Falling factorial (factorial power) x·(x−1)·…·(x−n+1).

    Args:
        x: Любое значение башни (int, Fraction, float, sympy.Expr, ...)
        n: Показатель, native integer любого знака

    Returns:
        - 1 при n = 0
        - произведение при n > 0
        - 1 / rising_factorial(x + 1, −n) при n < 0, либо POLE,
          если этот знаменатель точно равен нулю

    Raises:
        InvalidArgument: если n не native integer

    Examples:
        >>> falling_factorial(5, 3)
        60
        >>> falling_factorial(5, -2)
        Fraction(1, 42)
        >>> falling_factorial(-1, -1)
        oo
    """
    variant = _select_variant(FALLING_FACTORIAL_VARIANTS, "falling_factorial", x, n)
    return variant(x, n)


def rising_factorial(x: Any, n: int) -> Any:
    """
    Rising factorial (Pochhammer symbol) x·(x+1)·…·(x+n−1).

    Args:
        x: Любое значение башни
        n: Показатель, native integer любого знака

    Returns:
        - 1 при n = 0
        - произведение при n > 0
        - 1 / falling_factorial(x − 1, −n) при n < 0, либо POLE,
          если этот знаменатель точно равен нулю

    Raises:
        InvalidArgument: если n не native integer

    Examples:
        >>> rising_factorial(5, 3)
        210
        >>> rising_factorial(0, 3)
        0
        >>> rising_factorial(1, -1)
        oo
    """
    variant = _select_variant(RISING_FACTORIAL_VARIANTS, "rising_factorial", x, n)
    return variant(x, n)


# Альтернативные имена
factorial_power = falling_factorial
pochhammer = rising_factorial
