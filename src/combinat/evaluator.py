"""
Evaluator — вычисление factorial-функций по имени

Связывает domain-модели (EvaluationRequest / EvaluationResult), JSON
контракты и математическое ядро:
1. Payload проверяется по evaluation_request.json
2. Запрос разбирается в EvaluationRequest (pydantic)
3. Функция выбирается по имени из EVALUATORS
4. Результат кодируется: integer → десятичная строка, rational → "p/q",
   real → float, pole → "oo", прочее → symbolic (str).
   Целые длиннее DECIMAL_ENCODING_MAX_BITS → hex (big_integer,
   big_rational); inf / nan → non_finite

InvalidArgument из ядра пропагирует к вызывающему без изменений.
"""

import math
from fractions import Fraction
from typing import Any, Callable, Dict, Final

import numpy as np

from src.combinat.contracts import validate_evaluation_request
from src.combinat.domain.evaluation import (
    DECIMAL_ENCODING_MAX_BITS,
    EvaluationRequest,
    EvaluationResult,
    FunctionName,
    ResultKind,
)
from src.combinat.logging import get_logger, log_event
from src.combinat.math.arithmetic import POLE_SYMBOL, InvalidArgument, is_pole
from src.combinat.math.factorials import (
    double_factorial,
    factorial,
    multifactorial,
    subfactorial,
)
from src.combinat.math.pochhammer import falling_factorial, rising_factorial
from src.combinat.math.stirling import (
    stirling_first_kind,
    stirling_first_kind_unsigned,
    stirling_second_kind,
)

logger = get_logger(__name__)


# =============================================================================
# FUNCTION TABLE
# =============================================================================

EVALUATORS: Final[Dict[FunctionName, Callable[[EvaluationRequest], Any]]] = {
    FunctionName.FACTORIAL: lambda r: factorial(r.n),
    FunctionName.FALLING_FACTORIAL: lambda r: falling_factorial(parse_tower_value(r.x), r.n),
    FunctionName.FACTORIAL_POWER: lambda r: falling_factorial(parse_tower_value(r.x), r.n),
    FunctionName.RISING_FACTORIAL: lambda r: rising_factorial(parse_tower_value(r.x), r.n),
    FunctionName.POCHHAMMER: lambda r: rising_factorial(parse_tower_value(r.x), r.n),
    FunctionName.MULTIFACTORIAL: lambda r: multifactorial(r.n, r.k),
    FunctionName.DOUBLE_FACTORIAL: lambda r: double_factorial(r.n),
    FunctionName.SUBFACTORIAL: lambda r: subfactorial(r.n),
    FunctionName.STIRLING_FIRST_KIND: lambda r: stirling_first_kind(r.n, r.k),
    FunctionName.STIRLING_FIRST_KIND_UNSIGNED: lambda r: stirling_first_kind_unsigned(r.n, r.k),
    FunctionName.STIRLING_SECOND_KIND: lambda r: stirling_second_kind(r.n, r.k),
}


# =============================================================================
# ENCODING
# =============================================================================


def parse_tower_value(raw: int | float | str) -> int | float | Fraction:
    """
    Разбор x из запроса в значение башни.

    Строки интерпретируются как точные рациональные ("3/4", "-2").

    Raises:
        InvalidArgument: если строка не является рациональным числом

    Examples:
        >>> parse_tower_value("3/4")
        Fraction(3, 4)
        >>> parse_tower_value("6/3")
        2
        >>> parse_tower_value(2.5)
        2.5
    """
    if not isinstance(raw, str):
        return raw

    try:
        value = Fraction(raw)
    except (ValueError, ZeroDivisionError) as e:
        raise InvalidArgument(f"x must be a rational literal, got {raw!r}") from e

    if value.denominator == 1:
        return value.numerator
    return value


def _exceeds_decimal_limit(value: int) -> bool:
    return abs(value).bit_length() > DECIMAL_ENCODING_MAX_BITS


def encode_value(function: FunctionName, value: Any) -> EvaluationResult:
    """
    Кодирование значения башни в EvaluationResult.

    Целые и рациональные длиннее DECIMAL_ENCODING_MAX_BITS кодируются
    в hex (big_integer / big_rational), hex не ограничен длиной.
    Неконечные float (inf, nan) кодируются как non_finite строкой,
    JSON не допускает Infinity / NaN.

    Examples:
        >>> encode_value(FunctionName.FACTORIAL, 120).value
        '120'
        >>> encode_value(FunctionName.FALLING_FACTORIAL, Fraction(1, 42)).value
        '1/42'
        >>> encode_value(FunctionName.FACTORIAL, 2**20000).kind
        <ResultKind.BIG_INTEGER: 'big_integer'>
    """
    if is_pole(value):
        return EvaluationResult(function=function, kind=ResultKind.POLE, value=POLE_SYMBOL)

    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        value = int(value)
        if _exceeds_decimal_limit(value):
            return EvaluationResult(
                function=function, kind=ResultKind.BIG_INTEGER, value=format(value, "#x")
            )
        return EvaluationResult(function=function, kind=ResultKind.INTEGER, value=str(value))

    if isinstance(value, Fraction):
        if _exceeds_decimal_limit(value.numerator) or _exceeds_decimal_limit(value.denominator):
            return EvaluationResult(
                function=function,
                kind=ResultKind.BIG_RATIONAL,
                value=f"{format(value.numerator, '#x')}/{format(value.denominator, '#x')}",
            )
        return EvaluationResult(
            function=function,
            kind=ResultKind.RATIONAL,
            value=f"{value.numerator}/{value.denominator}",
        )

    if isinstance(value, (float, np.floating)):
        value = float(value)
        if not math.isfinite(value):
            return EvaluationResult(
                function=function, kind=ResultKind.NON_FINITE, value=str(value)
            )
        return EvaluationResult(function=function, kind=ResultKind.REAL, value=value)

    return EvaluationResult(function=function, kind=ResultKind.SYMBOLIC, value=str(value))


# =============================================================================
# EVALUATION
# =============================================================================


def evaluate(request: EvaluationRequest) -> EvaluationResult:
    """
    Вычисление функции, указанной в запросе.

    Args:
        request: Провалидированный EvaluationRequest

    Returns:
        EvaluationResult с закодированным значением

    Raises:
        InvalidArgument: если аргументы нарушают предусловия функции
    """
    try:
        value = EVALUATORS[request.function](request)
    except InvalidArgument as e:
        log_event(
            logger,
            "evaluation_rejected",
            {"function": request.function.value, "reason": str(e)},
        )
        raise

    result = encode_value(request.function, value)
    log_event(
        logger,
        "evaluation_completed",
        {"function": request.function.value, "kind": result.kind.value},
    )
    return result


def evaluate_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Вычисление по JSON payload.

    Payload проверяется по evaluation_request.json, затем по модели
    EvaluationRequest. Возвращается dict, совместимый с
    evaluation_result.json.

    Raises:
        jsonschema.ValidationError: если payload нарушает контракт
        pydantic.ValidationError: если payload нарушает модель
        InvalidArgument: если аргументы нарушают предусловия функции

    Examples:
        >>> evaluate_payload({"function": "factorial", "n": 5})
        {'function': 'factorial', 'kind': 'integer', 'value': '120'}
    """
    validate_evaluation_request(payload)
    request = EvaluationRequest.model_validate(payload)
    return evaluate(request).model_dump(mode="json")
