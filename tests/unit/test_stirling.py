"""
Тесты для Stirling Numbers

Проверяемые инварианты:
1. Базовые случаи s(0, 0) = 1, s(n, 0) = 0, S(n, 1) = S(n, n) = 1
2. Σ_k |s(n, k)| = n!,  Σ_k S(n, k) = Bell(n)
3. Диапазоны индексов → InvalidArgument (k = 0 для второго рода отвергается)
4. Стек не ограничивает n (bottom-up таблица)
5. Независимость вызовов: чередование больших вычислений
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.combinat.math.arithmetic import InvalidArgument
from src.combinat.math.factorials import factorial
from src.combinat.math.stirling import (
    STIRLING_SECOND_KIND_MIN_K,
    stirling_first_kind,
    stirling_first_kind_unsigned,
    stirling_second_kind,
)


def bell_numbers(limit: int) -> list[int]:
    """Числа Белла B(0..limit) через треугольник Белла"""
    bells = [1]
    row = [1]
    for _ in range(limit):
        next_row = [row[-1]]
        for value in row:
            next_row.append(next_row[-1] + value)
        row = next_row
        bells.append(row[0])
    return bells


# =============================================================================
# ТЕСТЫ: First kind
# =============================================================================


class TestStirlingFirstKind:
    """Тесты signed Stirling numbers of the first kind"""

    def test_base_cases(self):
        assert stirling_first_kind(0, 0) == 1
        for n in range(1, 20):
            assert stirling_first_kind(n, 0) == 0
            assert stirling_first_kind(n, n) == 1

    def test_row_five(self):
        assert [stirling_first_kind(5, k) for k in range(6)] == [0, 24, -50, 35, -10, 1]

    def test_known_values(self):
        assert stirling_first_kind(4, 2) == 11
        assert stirling_first_kind(4, 1) == -6
        assert stirling_first_kind(10, 3) == -1172700

    def test_sign_pattern(self):
        """Знак s(n, k) равен (−1)^(n−k)"""
        for n in range(1, 15):
            for k in range(1, n + 1):
                value = stirling_first_kind(n, k)
                assert (value > 0) == ((n - k) % 2 == 0)

    def test_absolute_row_sum_is_factorial(self):
        for n in range(0, 25):
            total = sum(abs(stirling_first_kind(n, k)) for k in range(n + 1))
            assert total == factorial(n)

    def test_column_one(self):
        """s(n, 1) = (−1)^(n−1) (n−1)!"""
        for n in range(1, 30):
            assert stirling_first_kind(n, 1) == (-1) ** (n - 1) * math.factorial(n - 1)

    def test_unsigned(self):
        assert stirling_first_kind_unsigned(4, 1) == 6
        assert stirling_first_kind_unsigned(5, 2) == 50
        for n in range(0, 12):
            for k in range(n + 1):
                assert stirling_first_kind_unsigned(n, k) == abs(stirling_first_kind(n, k))

    def test_invalid_indices(self):
        with pytest.raises(InvalidArgument):
            stirling_first_kind(3, -1)
        with pytest.raises(InvalidArgument):
            stirling_first_kind(3, 4)
        with pytest.raises(InvalidArgument):
            stirling_first_kind(-1, 0)
        with pytest.raises(InvalidArgument):
            stirling_first_kind(3.0, 1)
        with pytest.raises(InvalidArgument):
            stirling_first_kind_unsigned(2, 3)


# =============================================================================
# ТЕСТЫ: Second kind
# =============================================================================


class TestStirlingSecondKind:
    """Тесты Stirling numbers of the second kind"""

    def test_base_cases(self):
        for n in range(1, 20):
            assert stirling_second_kind(n, 1) == 1
            assert stirling_second_kind(n, n) == 1

    def test_known_values(self):
        assert stirling_second_kind(4, 2) == 7
        assert stirling_second_kind(5, 2) == 15
        assert stirling_second_kind(5, 3) == 25
        assert stirling_second_kind(10, 3) == 9330

    def test_row_sum_is_bell(self):
        bells = bell_numbers(20)
        for n in range(1, 21):
            total = sum(stirling_second_kind(n, k) for k in range(1, n + 1))
            assert total == bells[n]

    def test_closed_forms(self):
        """S(n, 2) = 2^(n−1) − 1,  S(n, n−1) = C(n, 2)"""
        for n in range(2, 40):
            assert stirling_second_kind(n, 2) == 2 ** (n - 1) - 1
            assert stirling_second_kind(n, n - 1) == math.comb(n, 2)

    def test_k_zero_rejected(self):
        """k = 0 отвергается, без молчаливого расширения"""
        assert STIRLING_SECOND_KIND_MIN_K == 1
        with pytest.raises(InvalidArgument):
            stirling_second_kind(0, 0)
        with pytest.raises(InvalidArgument):
            stirling_second_kind(5, 0)

    def test_invalid_indices(self):
        with pytest.raises(InvalidArgument):
            stirling_second_kind(3, 4)
        with pytest.raises(InvalidArgument):
            stirling_second_kind(-2, 1)
        with pytest.raises(InvalidArgument):
            stirling_second_kind(4, 2.0)


# =============================================================================
# ТЕСТЫ: Стек и независимость вызовов
# =============================================================================


class TestTableScope:
    """Таблица на вызов: нет утечки состояния, нет глубокой рекурсии"""

    def test_large_n_beyond_recursion_limit(self):
        n = 5000
        assert stirling_second_kind(n, 2) == 2 ** (n - 1) - 1
        assert stirling_first_kind(n, 1) == (-1) ** (n - 1) * math.factorial(n - 1)

    def test_interleaved_calls(self):
        first_a = stirling_first_kind(300, 1)
        second_a = stirling_second_kind(400, 2)
        first_b = stirling_first_kind(120, 119)
        second_b = stirling_second_kind(250, 249)
        first_a_again = stirling_first_kind(300, 1)

        assert first_a == (-1) ** 299 * math.factorial(299)
        assert second_a == 2**399 - 1
        assert first_b == -math.comb(120, 2)
        assert second_b == math.comb(250, 2)
        assert first_a_again == first_a

    def test_small_after_large(self):
        stirling_second_kind(300, 150)
        assert stirling_second_kind(4, 2) == 7
        stirling_first_kind(300, 150)
        assert stirling_first_kind(4, 2) == 11

    def test_concurrent_calls(self):
        """Параллельные вызовы не разделяют таблицу"""
        cases = [(60 + i, 2 + i % 5) for i in range(16)]
        expected = [stirling_second_kind(n, k) for n, k in cases]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda args: stirling_second_kind(*args), cases))

        assert results == expected
