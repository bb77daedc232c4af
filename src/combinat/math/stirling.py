"""
Stirling Numbers — First Kind (signed / unsigned) & Second Kind

Модуль вычисляет числа Стирлинга через двумерные рекуррентные соотношения:
- s(n, k)  signed first kind:  s(n, k) = s(n−1, k−1) − (n−1)·s(n−1, k)
- c(n, k)  unsigned first kind: c(n, k) = |s(n, k)|  (число перестановок с k циклами)
- S(n, k)  second kind:        S(n, k) = k·S(n−1, k) + S(n−1, k−1)

Вычисление — bottom-up заполнение таблицы (n+1) × (k+1), созданной
заново на каждый вызов. Рекурсии нет, глубина стека не зависит от n.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица локальна для вызова: нет общего кэша между вызовами/потоками
2. s(0, 0) = 1, s(0, k) = 0 при k ≠ 0
3. S(n, 1) = 1, S(n, n) = 1; k = 0 для второго рода отвергается
4. Значения — точные Python int (рост комбинаторный, переполнения нет)
"""

from typing import Final

from src.combinat.logging import get_logger
from src.combinat.math.arithmetic import (
    validate_index_range,
    validate_non_negative_integer,
)

logger = get_logger(__name__)

# Минимальный допустимый k для чисел Стирлинга второго рода
STIRLING_SECOND_KIND_MIN_K: Final[int] = 1


# =============================================================================
# TABLE
# =============================================================================


def _new_table(n: int, k: int) -> list[list[int]]:
    table = [[0] * (k + 1) for _ in range(n + 1)]
    table[0][0] = 1
    return table


# =============================================================================
# FIRST KIND
# =============================================================================


def stirling_first_kind(n: int, k: int) -> int:
    """
    Signed Stirling number of the first kind s(n, k).

    Args:
        n: Native integer, n ≥ 0
        k: Native integer, 0 ≤ k ≤ n

    Returns:
        s(n, k) как Python int (знак (−1)^(n−k))

    Raises:
        InvalidArgument: если n < 0, k < 0, k > n или аргумент не native integer

    Examples:
        >>> stirling_first_kind(0, 0)
        1
        >>> stirling_first_kind(4, 2)
        11
        >>> stirling_first_kind(4, 1)
        -6
    """
    n = validate_non_negative_integer(n, "n")
    k = validate_index_range(k, "k", min_value=0, max_value=n)

    table = _new_table(n, k)
    for i in range(1, n + 1):
        previous = table[i - 1]
        row = table[i]
        row[0] = -(i - 1) * previous[0]
        for j in range(1, min(i, k) + 1):
            row[j] = previous[j - 1] - (i - 1) * previous[j]

    logger.debug("stirling_table_filled", kind="first", n=n, k=k)
    return table[n][k]


def stirling_first_kind_unsigned(n: int, k: int) -> int:
    """
    Unsigned Stirling number of the first kind c(n, k) = |s(n, k)|.

    Число перестановок n элементов ровно с k циклами.

    Examples:
        >>> stirling_first_kind_unsigned(4, 1)
        6
    """
    return abs(stirling_first_kind(n, k))


# =============================================================================
# SECOND KIND
# =============================================================================


def stirling_second_kind(n: int, k: int) -> int:
    """
    Stirling number of the second kind S(n, k).

    Число разбиений n-элементного множества на k непустых блоков.

    ВНИМАНИЕ: k = 0 отвергается, хотя S(0, 0) = 1 и S(n, 0) = 0 при
    n > 0 математически определены. Расширение не вводится молча.

    Args:
        n: Native integer, n ≥ 1
        k: Native integer, 1 ≤ k ≤ n

    Returns:
        S(n, k) как Python int

    Raises:
        InvalidArgument: если k < 1, k > n или аргумент не native integer

    Examples:
        >>> stirling_second_kind(4, 2)
        7
        >>> stirling_second_kind(5, 5)
        1
    """
    n = validate_non_negative_integer(n, "n")
    k = validate_index_range(k, "k", min_value=STIRLING_SECOND_KIND_MIN_K, max_value=n)

    # Столбец 0 (S(0,0) = 1, S(i,0) = 0) даёт S(i,1) = 1 и S(i,i) = 1
    table = _new_table(n, k)
    for i in range(1, n + 1):
        previous = table[i - 1]
        row = table[i]
        for j in range(1, min(i, k) + 1):
            row[j] = j * previous[j] + previous[j - 1]

    logger.debug("stirling_table_filled", kind="second", n=n, k=k)
    return table[n][k]
