"""
Tower Arithmetic — Generic Ring Operations over the Numeric Tower

Модуль задаёт единый интерфейс арифметики, через который работают все
factorial-функции пакета:
- Кольцевые операции (add/sub/mul/div/invert) для любых значений башни
- Предикаты (is_zero, is_native_integer) и floor
- Pole sentinel: выделенное значение "бесконечность" для полюсов
- Валидация аргументов с немедленным InvalidArgument

Числовая башня:
    native integer    → int (кроме bool) и numpy.integer
    big integer       → int (Python int — произвольной точности)
    real              → float, numpy.floating, fractions.Fraction
    symbolic          → любой объект с кольцевыми операторами (sympy.Expr и т.п.)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Native integers поднимаются до Python int ДО умножения (numpy не переполняется)
2. Точное деление int/Fraction даёт Fraction, нормализованный до int при q == 1
3. Деление на точный ноль не маскируется: ZeroDivisionError пропагирует
4. POLE никогда не равен числу
"""

import math
from enum import Enum
from fractions import Fraction
from typing import Any, Final

import numpy as np

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Текстовое представление полюса (используется в repr и JSON-контрактах)
POLE_SYMBOL: Final[str] = "oo"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Нарушение предусловия: неверный тип или индекс вне диапазона.

    Поднимается сразу при входе в функцию, значение никогда не
    приводится молча.
    """

    pass


# =============================================================================
# POLE SENTINEL
# =============================================================================


class PoleSentinel(Enum):
    """
    Результат в полюсе: знаменатель reciprocal-соотношения точно равен нулю.

    Это не ошибка, а корректный результат. Отличим от любого числа:
    POLE == 0 → False, POLE == float("inf") → False.
    """

    INFINITY = POLE_SYMBOL

    def __repr__(self) -> str:
        return POLE_SYMBOL

    def __str__(self) -> str:
        return POLE_SYMBOL


POLE: Final[PoleSentinel] = PoleSentinel.INFINITY


def is_pole(value: Any) -> bool:
    """Проверка, является ли значение pole sentinel."""
    return value is POLE


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_native_integer(value: Any) -> bool:
    """
    Проверка, является ли значение native integer.

    bool исключён явно: True/False не являются показателями факториала.

    Examples:
        >>> is_native_integer(5)
        True
        >>> is_native_integer(np.int64(5))
        True
        >>> is_native_integer(5.0)
        False
        >>> is_native_integer(True)
        False
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_zero(value: Any) -> bool:
    """
    Проверка значения башни на точный ноль.

    Для символьных значений используется структурное сравнение:
    свободный символ нулём не считается.
    """
    return bool(value == 0)


def lift(value: Any) -> Any:
    """
    Подъём native integer до Python int произвольной точности.

    Остальные значения башни возвращаются без изменений.

    Examples:
        >>> type(lift(np.int64(7)))
        <class 'int'>
        >>> lift(2.5)
        2.5
    """
    if is_native_integer(value):
        return int(value)
    return value


# =============================================================================
# КОЛЬЦЕВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: Any, b: Any) -> Any:
    """Сумма a + b (native integers поднимаются до int)."""
    return lift(a) + lift(b)


def sub(a: Any, b: Any) -> Any:
    """Разность a - b (native integers поднимаются до int)."""
    return lift(a) - lift(b)


def mul(a: Any, b: Any) -> Any:
    """Произведение a * b (native integers поднимаются до int)."""
    return lift(a) * lift(b)


_EXACT_RATIONALS = (int, Fraction)


def _normalize_rational(value: Fraction) -> int | Fraction:
    if value.denominator == 1:
        return value.numerator
    return value


def div(a: Any, b: Any) -> Any:
    """
    Деление a / b в башне.

    Для точных рациональных (int, Fraction) результат точный:
    Fraction, либо int если знаменатель равен 1. Для остальных
    значений используется оператор "/" самого значения.

    Raises:
        ZeroDivisionError: если b — точный ноль (поведение арифметики)

    Examples:
        >>> div(1, 42)
        Fraction(1, 42)
        >>> div(6, 3)
        2
        >>> div(1.0, 4)
        0.25
    """
    a = lift(a)
    b = lift(b)

    if isinstance(a, _EXACT_RATIONALS) and isinstance(b, _EXACT_RATIONALS):
        return _normalize_rational(Fraction(a) / Fraction(b))

    return a / b


def invert(a: Any) -> Any:
    """Мультипликативный обратный элемент 1 / a."""
    return div(1, a)


def floor(a: Any) -> int:
    """
    Floor значения башни.

    Examples:
        >>> floor(2.7)
        2
        >>> floor(Fraction(-1, 2))
        -1
    """
    return math.floor(lift(a))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_native_integer(value: Any, name: str) -> int:
    """
    Валидация, что значение — native integer.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение, поднятое до Python int

    Raises:
        InvalidArgument: Если value не native integer
    """
    if not is_native_integer(value):
        raise InvalidArgument(
            f"{name} must be a native integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def validate_non_negative_integer(value: Any, name: str) -> int:
    """
    Валидация, что значение — неотрицательный native integer.

    Raises:
        InvalidArgument: Если value не native integer или value < 0
    """
    value = validate_native_integer(value, name)
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return value


def validate_positive_integer(value: Any, name: str) -> int:
    """
    Валидация, что значение — положительный native integer.

    Raises:
        InvalidArgument: Если value не native integer или value <= 0
    """
    value = validate_native_integer(value, name)
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return value


def validate_index_range(
    value: Any,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Валидация, что native integer лежит в диапазоне [min_value, max_value].

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, поднятое до Python int

    Raises:
        InvalidArgument: Если value не native integer или вне диапазона
    """
    value = validate_native_integer(value, name)

    if min_value is not None and value < min_value:
        raise InvalidArgument(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidArgument(f"{name} must be <= {max_value}, got {value}")

    return value
