"""
Contract Validation Module

Модуль для валидации JSON контрактов вычисления combinat.
"""

from .validators import (
    ContractValidator,
    EvaluationRequestValidator,
    EvaluationResultValidator,
    SchemaLoader,
    validate_evaluation_request,
    validate_evaluation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EvaluationRequestValidator",
    "EvaluationResultValidator",
    # Functions
    "validate_evaluation_request",
    "validate_evaluation_result",
]
