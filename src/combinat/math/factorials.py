"""
Factorials — Factorial, Multifactorial, Double Factorial, Subfactorial

Модуль вычисляет факториал и его ступенчатые обобщения:
- factorial(n)            = 1·2·…·n
- multifactorial(n, k)    = n·(n−k)·(n−2k)·…  (пока член > 0)
- double_factorial(n)     = multifactorial(n, 2), расширенный на n < 0
- subfactorial(n)         = число беспорядков, ближайшее целое к n!/e

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение невозможно: накопление всегда в Python int
2. Предусловия проверяются при входе (InvalidArgument)
3. double_factorial имеет полюса в отрицательных чётных n → POLE
4. Все операции детерминированы и воспроизводимы

ФОРМУЛЫ:
    n!! = n · (n−2)!!,            0!! = 1
    n!! = (n+2)!! / (n+2),        n < 0, n нечётное  →  (−1)!! = 1, (−3)!! = −1
    !n  = floor(n!/e + 1/2),      n ≥ 1
    !n  = n · !(n−1) + (−1)^n     (точная форма для больших n)
"""

import math
from fractions import Fraction
from typing import Final

from src.combinat.logging import get_logger
from src.combinat.math.arithmetic import (
    POLE,
    PoleSentinel,
    div,
    floor,
    validate_native_integer,
    validate_non_negative_integer,
    validate_positive_integer,
)

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Шаг двойного факториала
DOUBLE_FACTORIAL_STEP: Final[int] = 2

# Максимальное n, для которого float closed form floor(n!/e + 0.5) точна.
# Выше этой границы погрешность float сравнима с расстоянием n!/e до
# ближайшего целого → используется точная целочисленная форма.
SUBFACTORIAL_FLOAT_EXACT_MAX_N: Final[int] = 16


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    Факториал n! = 1·2·…·n.

    Args:
        n: Native integer, n ≥ 0

    Returns:
        n! как Python int (произвольная точность)

    Raises:
        InvalidArgument: если n не native integer или n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(21)  # > 2**63 - 1
        51090942171709440000
    """
    n = validate_non_negative_integer(n, "n")
    return math.factorial(n)


# =============================================================================
# STRIDED PRODUCT
# =============================================================================


def strided_product(start: int, stop: int, step: int) -> int:
    """
    Произведение членов range(start, stop, step).

    Общий примитив для multifactorial и целочисленного пути
    falling/rising factorial. Пустой диапазон → 1.

    Examples:
        >>> strided_product(10, 0, -3)  # 10·7·4·1
        280
        >>> strided_product(5, 8, 1)  # 5·6·7
        210
        >>> strided_product(3, 3, 1)
        1
    """
    return math.prod(range(int(start), int(stop), int(step)))


# =============================================================================
# MULTIFACTORIAL
# =============================================================================


def multifactorial(n: int, k: int) -> int:
    """
    Multifactorial n!^(k) = n·(n−k)·(n−2k)·…, пока член строго > 0.

    Args:
        n: Native integer, n ≥ 0
        k: Шаг, native integer, k > 0

    Returns:
        Произведение как Python int; multifactorial(0, k) = 1

    Raises:
        InvalidArgument: если n < 0, k ≤ 0 или любой из них не native integer

    Examples:
        >>> multifactorial(10, 3)
        280
        >>> multifactorial(0, 4)
        1
    """
    n = validate_non_negative_integer(n, "n")
    k = validate_positive_integer(k, "k")
    return strided_product(n, 0, -k)


# =============================================================================
# DOUBLE FACTORIAL
# =============================================================================


def double_factorial(n: int) -> int | Fraction | PoleSentinel:
    """
    Double factorial n!!, обобщённый на отрицательные n.

    - n = 0            → 1
    - n > 0            → multifactorial(n, 2)
    - n < 0, чётное    → POLE
    - n < 0, нечётное  → (n+2)!! / (n+2), рекурсия свёрнута в одно произведение

    Args:
        n: Native integer любого знака

    Returns:
        int, Fraction (для n ≤ −5) или POLE

    Raises:
        InvalidArgument: если n не native integer

    Examples:
        >>> double_factorial(7)
        105
        >>> double_factorial(-3)
        -1
        >>> double_factorial(-5)
        Fraction(1, 3)
        >>> double_factorial(-2)
        oo
    """
    n = validate_native_integer(n, "n")

    if n == 0:
        return 1

    if n > 0:
        return multifactorial(n, DOUBLE_FACTORIAL_STEP)

    if n % 2 == 0:
        logger.debug("pole_result", function="double_factorial", n=n)
        return POLE

    # (−1)!! = 1, (m−2)!! = m!! / m  →  n!! = 1 / ((−1)·(−3)·…·(n+2))
    return div(1, strided_product(-1, n, -DOUBLE_FACTORIAL_STEP))


# =============================================================================
# SUBFACTORIAL
# =============================================================================


def _subfactorial_exact(n: int) -> int:
    derangements = 1
    for i in range(1, n + 1):
        derangements = i * derangements + (-1) ** i
    return derangements


def subfactorial(n: int) -> int:
    """
    Subfactorial !n — количество перестановок без неподвижных точек.

    Для 1 ≤ n ≤ SUBFACTORIAL_FLOAT_EXACT_MAX_N используется closed form
    floor(n!/e + 0.5). Для больших n то же ближайшее целое вычисляется
    точно через !n = n·!(n−1) + (−1)^n.

    Args:
        n: Native integer, n ≥ 0

    Returns:
        !n как Python int; subfactorial(0) = 1

    Raises:
        InvalidArgument: если n не native integer или n < 0

    Examples:
        >>> subfactorial(0)
        1
        >>> subfactorial(4)
        9
        >>> subfactorial(20)
        895014631192902121
    """
    n = validate_non_negative_integer(n, "n")

    if n == 0:
        return 1

    if n <= SUBFACTORIAL_FLOAT_EXACT_MAX_N:
        return floor(factorial(n) / math.e + 0.5)

    return _subfactorial_exact(n)
