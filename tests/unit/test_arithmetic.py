"""
Тесты для модуля Tower Arithmetic

Проверяет:
1. Предикаты башни (native integer, zero, pole)
2. Подъём numpy integers до Python int
3. Точное деление рациональных и пропагацию ZeroDivisionError
4. Валидацию аргументов (InvalidArgument)
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from src.combinat.math.arithmetic import (
    POLE,
    POLE_SYMBOL,
    InvalidArgument,
    PoleSentinel,
    add,
    div,
    floor,
    invert,
    is_native_integer,
    is_pole,
    is_zero,
    lift,
    mul,
    sub,
    validate_index_range,
    validate_native_integer,
    validate_non_negative_integer,
    validate_positive_integer,
)

# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestIsNativeInteger:
    """Тесты для is_native_integer"""

    def test_python_int(self):
        """Python int — native integer"""
        assert is_native_integer(0) is True
        assert is_native_integer(-7) is True
        assert is_native_integer(10**30) is True

    def test_numpy_integers(self):
        """numpy fixed-width integers — native integers"""
        assert is_native_integer(np.int64(5)) is True
        assert is_native_integer(np.int32(-5)) is True
        assert is_native_integer(np.uint8(3)) is True

    def test_bool_rejected(self):
        """bool не считается native integer"""
        assert is_native_integer(True) is False
        assert is_native_integer(np.bool_(True)) is False

    def test_non_integers(self):
        """float, Fraction, строки — не native integers"""
        assert is_native_integer(5.0) is False
        assert is_native_integer(Fraction(5)) is False
        assert is_native_integer("5") is False
        assert is_native_integer(None) is False


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_zeros(self):
        assert is_zero(0) is True
        assert is_zero(0.0) is True
        assert is_zero(Fraction(0, 3)) is True
        assert is_zero(np.float64(0.0)) is True

    def test_non_zeros(self):
        assert is_zero(1) is False
        assert is_zero(1e-300) is False
        assert is_zero(Fraction(1, 10**20)) is False


class TestPoleSentinel:
    """Тесты для POLE"""

    def test_pole_identity(self):
        """POLE — единственный член PoleSentinel"""
        assert POLE is PoleSentinel.INFINITY
        assert is_pole(POLE) is True

    def test_pole_not_equal_to_numbers(self):
        """POLE отличим от любого числа, включая float inf"""
        assert POLE != 0
        assert POLE != float("inf")
        assert is_pole(float("inf")) is False
        assert is_pole(0) is False

    def test_pole_repr(self):
        assert repr(POLE) == POLE_SYMBOL
        assert str(POLE) == "oo"


# =============================================================================
# ТЕСТЫ КОЛЬЦЕВЫХ ОПЕРАЦИЙ
# =============================================================================


class TestLift:
    """Тесты для lift"""

    def test_numpy_int_lifted(self):
        value = lift(np.int64(7))
        assert value == 7
        assert type(value) is int

    def test_other_values_unchanged(self):
        assert lift(2.5) == 2.5
        assert lift(Fraction(1, 3)) == Fraction(1, 3)


class TestRingOperations:
    """Тесты для add/sub/mul"""

    def test_int_operations(self):
        assert add(2, 3) == 5
        assert sub(2, 3) == -1
        assert mul(4, 5) == 20

    def test_numpy_no_overflow(self):
        """Произведение numpy int64 не переполняется"""
        big = np.int64(2**62)
        result = mul(big, np.int64(4))
        assert result == 2**64
        assert type(result) is int

    def test_mixed_values(self):
        assert add(Fraction(1, 2), 1) == Fraction(3, 2)
        assert mul(0.5, 4) == 2.0


class TestDiv:
    """Тесты для div/invert"""

    def test_exact_rational(self):
        """int / int даёт точный Fraction"""
        result = div(1, 42)
        assert result == Fraction(1, 42)
        assert isinstance(result, Fraction)

    def test_normalized_to_int(self):
        """Знаменатель 1 → int"""
        result = div(6, 3)
        assert result == 2
        assert type(result) is int

    def test_fraction_division(self):
        assert div(Fraction(1, 2), Fraction(1, 4)) == 2
        assert div(1, Fraction(3, 2)) == Fraction(2, 3)

    def test_float_division(self):
        assert div(1.0, 4) == 0.25

    def test_zero_division_propagates(self):
        """Деление на точный ноль пропагирует ошибку арифметики"""
        with pytest.raises(ZeroDivisionError):
            div(1, 0)
        with pytest.raises(ZeroDivisionError):
            invert(0)

    def test_invert(self):
        assert invert(4) == Fraction(1, 4)
        assert invert(-1) == -1
        assert invert(0.5) == 2.0


class TestFloor:
    """Тесты для floor"""

    def test_floor_values(self):
        assert floor(2.7) == 2
        assert floor(-0.5) == -1
        assert floor(Fraction(7, 2)) == 3
        assert floor(math.e * 100) == 271


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_* функций"""

    def test_validate_native_integer(self):
        assert validate_native_integer(np.int16(3), "n") == 3
        with pytest.raises(InvalidArgument, match="n must be a native integer"):
            validate_native_integer(3.0, "n")

    def test_invalid_argument_is_value_error(self):
        """InvalidArgument совместим с ValueError"""
        with pytest.raises(ValueError):
            validate_native_integer("3", "n")

    def test_validate_non_negative_integer(self):
        assert validate_non_negative_integer(0, "n") == 0
        with pytest.raises(InvalidArgument, match="non-negative"):
            validate_non_negative_integer(-1, "n")

    def test_validate_positive_integer(self):
        assert validate_positive_integer(1, "k") == 1
        with pytest.raises(InvalidArgument, match="positive"):
            validate_positive_integer(0, "k")

    def test_validate_index_range(self):
        assert validate_index_range(3, "k", min_value=0, max_value=3) == 3
        with pytest.raises(InvalidArgument, match="k must be <= 3"):
            validate_index_range(4, "k", min_value=0, max_value=3)
        with pytest.raises(InvalidArgument, match="k must be >= 1"):
            validate_index_range(0, "k", min_value=1)
