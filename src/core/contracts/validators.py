"""
JSON Schema Contract Validators

Валидация JSON payload'ов exercise-evaluation слоя по контрактам
contracts/schema/*.json (Draft 2020-12, библиотека jsonschema).

Контракты:
- topological_space — кандидат в топологическое пространство
- metric_definition — метрика упражнения

Контракт проверяет только форму payload'а. Аксиомы топологии проверяет
src.topology.validator, доменные ограничения — Pydantic модели
src.core.domain.
"""

import json
from functools import partial
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

# Корень проекта — 4 уровня вверх от этого файла
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик контрактов из каталога схем.

    Каждая схема читается один раз и проходит meta-validation при загрузке.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> List[str]:
        """Имена контрактов в каталоге (без расширения, по алфавиту)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя контракта без расширения ('topological_space')

        Raises:
            FileNotFoundError: Если файла контракта нет
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Подклассы фиксируют контракт через атрибут класса SCHEMA_NAME; базовый
    класс принимает имя явно.
    """

    SCHEMA_NAME: str = ""

    def __init__(self, schema_name: str | None = None, loader: SchemaLoader | None = None):
        self.schema_name = schema_name or self.SCHEMA_NAME
        if not self.schema_name:
            raise ValueError("schema_name must be provided")

        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое (наиболее релевантное) нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Все нарушения (ValidationError), без остановки на первом."""
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Сообщения о нарушениях в виде "<путь>: <сообщение>" для обратной
        связи в упражнении. Порядок детерминирован (по пути в документе).

        Examples:
            >>> TopologicalSpaceValidator().error_messages({"base_set": []})
            ["$: 'open_sets' is a required property", '$.base_set: [] should be non-empty']
        """
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [f"{error.json_path}: {error.message}" for error in errors]


class TopologicalSpaceValidator(ContractValidator):
    """Контракт topological_space."""

    SCHEMA_NAME = "topological_space"


class MetricDefinitionValidator(ContractValidator):
    """Контракт metric_definition."""

    SCHEMA_NAME = "metric_definition"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Валидаторы по имени контракта (создаются при первом обращении)
_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """
    Raises:
        FileNotFoundError: Если контракта с таким именем нет
    """
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        validator = ContractValidator(schema_name)
        _VALIDATORS[schema_name] = validator
    return validator


def validate_contract(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Валидация payload'а по контракту с именем schema_name.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        FileNotFoundError: Если контракта нет
    """
    get_validator(schema_name).validate(data)


validate_topological_space = partial(validate_contract, "topological_space")
validate_metric_definition = partial(validate_contract, "metric_definition")
