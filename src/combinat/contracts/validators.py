"""
JSON Schema Contract Validators

Валидация payload вычисления по JSON Schema контрактам. Схемы
поставляются как package-data пакета src.combinat.contracts и читаются
через importlib.resources, поэтому работают и из установленного wheel.

Схемы:
- evaluation_request.json
- evaluation_result.json
"""

import json
from importlib.resources import files
from typing import Any, Dict, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from src.combinat.logging import get_logger

logger = get_logger(__name__)

# Каталог схем внутри пакета контрактов
SCHEMA_RESOURCE_DIR: Final[str] = "schema"
SCHEMA_SUFFIX: Final[str] = ".json"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    Каждая схема проверяется meta-валидацией и сверкой "$id" с именем
    ресурса, затем кэшируется в экземпляре.
    """

    def __init__(self, package: str = __package__):
        self._root = files(package).joinpath(SCHEMA_RESOURCE_DIR)
        if not self._root.is_dir():
            raise RuntimeError(f"Schema resources not found in package {package!r}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available_schemas(self) -> List[str]:
        """Имена схем (без расширения), поставляемых в пакете."""
        return sorted(
            entry.name[: -len(SCHEMA_SUFFIX)]
            for entry in self._root.iterdir()
            if entry.is_file() and entry.name.endswith(SCHEMA_SUFFIX)
        )

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'evaluation_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: если ресурс схемы отсутствует
            ValueError: если ресурс не валидная JSON Schema или "$id" не совпадает с именем
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource_name = f"{schema_name}{SCHEMA_SUFFIX}"
        resource = self._root.joinpath(resource_name)
        if not resource.is_file():
            raise FileNotFoundError(f"Schema resource not found: {resource_name}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {resource_name}: {e}") from e

        if schema.get("$id") != resource_name:
            raise ValueError(
                f"Schema {resource_name} declares $id {schema.get('$id')!r}"
            )

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Скомпилированный Draft202012Validator общий для всех экземпляров
    одного контракта. Нарушения логируются событием contract_violation.
    """

    _compiled: Dict[str, Draft202012Validator] = {}

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        if schema_name not in self._compiled:
            schema = _SCHEMA_LOADER.load_schema(schema_name)
            self._compiled[schema_name] = Draft202012Validator(schema)
        self.validator = self._compiled[schema_name]
        self.schema = self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: первое (наиболее релевантное) нарушение контракта
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return

        logger.debug(
            "contract_violation",
            schema=self.schema_name,
            path="/".join(str(part) for part in error.absolute_path),
            reason=error.message,
        )
        raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class EvaluationRequestValidator(ContractValidator):
    """Контракт evaluation_request."""

    def __init__(self):
        super().__init__("evaluation_request")


class EvaluationResultValidator(ContractValidator):
    """Контракт evaluation_result."""

    def __init__(self):
        super().__init__("evaluation_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_evaluation_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: если запрос нарушает evaluation_request.json
    """
    EvaluationRequestValidator().validate(data)


def validate_evaluation_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: если результат нарушает evaluation_result.json
    """
    EvaluationResultValidator().validate(data)
