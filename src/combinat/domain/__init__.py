"""
Domain models for evaluating combinat functions by name.
"""

from src.combinat.domain.evaluation import (
    DECIMAL_ENCODING_MAX_BITS,
    FUNCTIONS_WITH_K,
    FUNCTIONS_WITH_X,
    MAX_REQUEST_INDEX,
    MAX_REQUEST_STIRLING_CELLS,
    MAX_REQUEST_STIRLING_N,
    STIRLING_FUNCTIONS,
    EvaluationRequest,
    EvaluationResult,
    FunctionName,
    ResultKind,
)

__all__ = [
    "DECIMAL_ENCODING_MAX_BITS",
    "FUNCTIONS_WITH_K",
    "FUNCTIONS_WITH_X",
    "MAX_REQUEST_INDEX",
    "MAX_REQUEST_STIRLING_CELLS",
    "MAX_REQUEST_STIRLING_N",
    "STIRLING_FUNCTIONS",
    "EvaluationRequest",
    "EvaluationResult",
    "FunctionName",
    "ResultKind",
]
