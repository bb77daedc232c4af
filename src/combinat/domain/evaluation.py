"""
Evaluation — Модели запроса и результата вычисления по имени функции

Immutable Pydantic модели для вызова factorial-функций через контракты
(contracts/schema/evaluation_request.json, evaluation_result.json).
"""

from enum import Enum
from typing import Final, Optional, Union

from pydantic import BaseModel, Field, model_validator

# Ограничение индексов в запросах (n, k) для одноиндексных функций и
# multifactorial: стоимость O(n) умножений Python int
MAX_REQUEST_INDEX: Final[int] = 10_000

# Числа Стирлинга заполняют таблицу (n+1) × (k+1): стоимость O(n·k)
# сложений больших int, поэтому n и размер таблицы ограничены отдельно
MAX_REQUEST_STIRLING_N: Final[int] = 2_000
MAX_REQUEST_STIRLING_CELLS: Final[int] = 250_000

# Граница десятичного кодирования целых в результате. Выше неё значение
# кодируется в hex (big_integer / big_rational): int → str в десятичной
# системе ограничен интерпретатором (4300 цифр ≈ 14284 бит)
DECIMAL_ENCODING_MAX_BITS: Final[int] = 14_000


# =============================================================================
# ENUMS
# =============================================================================


class FunctionName(str, Enum):
    """Имена функций, доступных для вычисления"""

    FACTORIAL = "factorial"
    FALLING_FACTORIAL = "falling_factorial"
    FACTORIAL_POWER = "factorial_power"  # alias falling_factorial
    RISING_FACTORIAL = "rising_factorial"
    POCHHAMMER = "pochhammer"  # alias rising_factorial
    MULTIFACTORIAL = "multifactorial"
    DOUBLE_FACTORIAL = "double_factorial"
    SUBFACTORIAL = "subfactorial"
    STIRLING_FIRST_KIND = "stirling_first_kind"
    STIRLING_FIRST_KIND_UNSIGNED = "stirling_first_kind_unsigned"
    STIRLING_SECOND_KIND = "stirling_second_kind"


class ResultKind(str, Enum):
    """Вид значения результата"""

    INTEGER = "integer"  # десятичная строка (произвольная точность)
    RATIONAL = "rational"  # строка "p/q"
    REAL = "real"  # float
    SYMBOLIC = "symbolic"  # строковое представление выражения
    POLE = "pole"  # "oo"
    BIG_INTEGER = "big_integer"  # hex строка "-0x1f", выше DECIMAL_ENCODING_MAX_BITS
    BIG_RATIONAL = "big_rational"  # hex строка "0x1/0x2a"
    NON_FINITE = "non_finite"  # "inf", "-inf" или "nan"


# Функции, принимающие значение башни x
FUNCTIONS_WITH_X: Final[frozenset[FunctionName]] = frozenset(
    {
        FunctionName.FALLING_FACTORIAL,
        FunctionName.FACTORIAL_POWER,
        FunctionName.RISING_FACTORIAL,
        FunctionName.POCHHAMMER,
    }
)

# Функции с вторым индексом k
FUNCTIONS_WITH_K: Final[frozenset[FunctionName]] = frozenset(
    {
        FunctionName.MULTIFACTORIAL,
        FunctionName.STIRLING_FIRST_KIND,
        FunctionName.STIRLING_FIRST_KIND_UNSIGNED,
        FunctionName.STIRLING_SECOND_KIND,
    }
)

# Функции, заполняющие таблицу Стирлинга
STIRLING_FUNCTIONS: Final[frozenset[FunctionName]] = frozenset(
    {
        FunctionName.STIRLING_FIRST_KIND,
        FunctionName.STIRLING_FIRST_KIND_UNSIGNED,
        FunctionName.STIRLING_SECOND_KIND,
    }
)


# =============================================================================
# REQUEST / RESULT MODELS
# =============================================================================


class EvaluationRequest(BaseModel):
    """
    Запрос на вычисление функции по имени.

    x задаётся только для falling/rising factorial: целое, float или
    рациональная строка ("3/4"). k задаётся для multifactorial и
    чисел Стирлинга.

    Immutable модель (frozen=True).
    """

    function: FunctionName = Field(..., description="Имя функции")
    x: Optional[Union[int, float, str]] = Field(
        None, description="Значение башни (int, float или рациональная строка)"
    )
    n: int = Field(
        ...,
        ge=-MAX_REQUEST_INDEX,
        le=MAX_REQUEST_INDEX,
        description="Показатель / первый индекс",
    )
    k: Optional[int] = Field(
        None,
        ge=-MAX_REQUEST_INDEX,
        le=MAX_REQUEST_INDEX,
        description="Шаг multifactorial / второй индекс Стирлинга",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_arguments_for_function(self) -> "EvaluationRequest":
        """Проверка, что переданы ровно нужные функции аргументы"""
        if self.function in FUNCTIONS_WITH_X and self.x is None:
            raise ValueError(f"{self.function.value} requires x")
        if self.function not in FUNCTIONS_WITH_X and self.x is not None:
            raise ValueError(f"{self.function.value} does not accept x")
        if self.function in FUNCTIONS_WITH_K and self.k is None:
            raise ValueError(f"{self.function.value} requires k")
        if self.function not in FUNCTIONS_WITH_K and self.k is not None:
            raise ValueError(f"{self.function.value} does not accept k")

        if self.function in STIRLING_FUNCTIONS:
            if self.n > MAX_REQUEST_STIRLING_N:
                raise ValueError(
                    f"{self.function.value} requires n <= {MAX_REQUEST_STIRLING_N}, got {self.n}"
                )
            # Размер таблицы оценивается по неотрицательным индексам;
            # отрицательные отвергает само ядро (InvalidArgument)
            cells = max(self.n, 0) * (max(self.k, 0) + 1)
            if cells > MAX_REQUEST_STIRLING_CELLS:
                raise ValueError(
                    f"{self.function.value} table n*(k+1) = {cells} exceeds "
                    f"{MAX_REQUEST_STIRLING_CELLS}"
                )
        return self


class EvaluationResult(BaseModel):
    """
    Результат вычисления.

    Immutable модель (frozen=True).
    """

    function: FunctionName = Field(..., description="Имя вычисленной функции")
    kind: ResultKind = Field(..., description="Вид значения")
    value: Union[str, float] = Field(..., description="Закодированное значение")

    model_config = {"frozen": True}

    def is_pole(self) -> bool:
        """Результат — полюс"""
        return self.kind is ResultKind.POLE
