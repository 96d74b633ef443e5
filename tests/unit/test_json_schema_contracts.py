"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (minItems/uniqueItems/enum/if-then)
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    MetricDefinitionValidator,
    SchemaLoader,
    TopologicalSpaceValidator,
    get_validator,
    validate_contract,
    validate_metric_definition,
    validate_topological_space,
)
from src.core.domain import MetricDefinition, TopologicalSpacePayload
from src.core.math.metrics import MetricKind


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_topological_space():
    """Валидный topological_space (топология Серпинского)."""
    return {
        "base_set": ["a", "b"],
        "open_sets": [[], ["a"], ["a", "b"]],
        "label": "Sierpinski",
    }


@pytest.fixture
def valid_metric_definition():
    """Валидный metric_definition."""
    return {
        "name": "Taxicab metric",
        "formula": "sum(|x_i - y_i|)",
        "space_dimension": 2,
        "kind": "manhattan",
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


@pytest.mark.parametrize("schema_name", ["topological_space", "metric_definition"])
def test_schemas_are_valid(schema_name):
    """Все схемы проходят meta-validation."""
    schema = SchemaLoader().load_schema(schema_name)
    assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("topological_space")
    schema2 = loader.load_schema("topological_space")

    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не проходящая meta-validation → ValueError."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(schema_dir=tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
        loader.load_schema("broken")


def test_schema_loader_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(schema_dir=tmp_path / "absent")


def test_schema_loader_lists_available_contracts():
    assert SchemaLoader().available() == ["metric_definition", "topological_space"]


# =============================================================================
# TESTS - GENERIC CONTRACT VALIDATION
# =============================================================================


def test_validate_contract_by_name(valid_topological_space, valid_metric_definition):
    """validate_contract выбирает контракт по имени."""
    validate_contract("topological_space", valid_topological_space)
    validate_contract("metric_definition", valid_metric_definition)

    with pytest.raises(ValidationError):
        validate_contract("metric_definition", valid_topological_space)


def test_validate_contract_unknown_name(valid_topological_space):
    with pytest.raises(FileNotFoundError):
        validate_contract("exercise", valid_topological_space)


def test_get_validator_is_cached():
    assert get_validator("topological_space") is get_validator("topological_space")


def test_contract_validator_requires_name():
    with pytest.raises(ValueError, match="schema_name must be provided"):
        ContractValidator()


def test_named_validators_bind_their_contract():
    assert TopologicalSpaceValidator().schema_name == "topological_space"
    assert MetricDefinitionValidator().schema_name == "metric_definition"


def test_error_messages_carry_json_path():
    """Сообщения для обратной связи: путь в документе + текст нарушения."""
    messages = TopologicalSpaceValidator().error_messages({"base_set": []})

    assert len(messages) == 2
    assert messages[0] == "$: 'open_sets' is a required property"
    assert messages[1].startswith("$.base_set: ")


def test_error_messages_empty_for_valid_payload(valid_topological_space):
    assert TopologicalSpaceValidator().error_messages(valid_topological_space) == []


# =============================================================================
# TESTS - TOPOLOGICAL SPACE VALIDATION
# =============================================================================


def test_topological_space_validator_accepts_valid_data(valid_topological_space):
    validator = TopologicalSpaceValidator()
    validator.validate(valid_topological_space)  # Не должно выбросить исключение
    assert validator.is_valid(valid_topological_space)


def test_topological_space_validate_function(valid_topological_space):
    validate_topological_space(valid_topological_space)


def test_topological_space_label_optional(valid_topological_space):
    data = valid_topological_space.copy()
    del data["label"]

    validate_topological_space(data)


def test_topological_space_accepts_numeric_elements():
    validate_topological_space({"base_set": [1, 2.5], "open_sets": [[], [1, 2.5]]})


def test_topological_space_shape_not_axioms():
    """Контракт проверяет форму: нарушение аксиом проходит JSON Schema."""
    validate_topological_space({"base_set": [1, 2], "open_sets": [[1]]})


def test_topological_space_rejects_missing_required_field(valid_topological_space):
    data = valid_topological_space.copy()
    del data["open_sets"]

    with pytest.raises(ValidationError) as exc_info:
        validate_topological_space(data)
    assert "'open_sets' is a required property" in str(exc_info.value)


def test_topological_space_rejects_empty_base_set(valid_topological_space):
    data = valid_topological_space.copy()
    data["base_set"] = []

    with pytest.raises(ValidationError):
        validate_topological_space(data)


def test_topological_space_rejects_empty_family(valid_topological_space):
    data = valid_topological_space.copy()
    data["open_sets"] = []

    with pytest.raises(ValidationError):
        validate_topological_space(data)


def test_topological_space_rejects_duplicate_elements(valid_topological_space):
    """uniqueItems: множество без повторов."""
    data = valid_topological_space.copy()
    data["base_set"] = ["a", "b", "a"]

    with pytest.raises(ValidationError):
        validate_topological_space(data)


def test_topological_space_rejects_nested_elements(valid_topological_space):
    data = valid_topological_space.copy()
    data["open_sets"] = [[], [["a"]]]

    with pytest.raises(ValidationError):
        validate_topological_space(data)


def test_topological_space_rejects_boolean_elements(valid_topological_space):
    data = valid_topological_space.copy()
    data["base_set"] = [True, False]

    with pytest.raises(ValidationError):
        validate_topological_space(data)


def test_topological_space_rejects_additional_properties(valid_topological_space):
    data = valid_topological_space.copy()
    data["closed_sets"] = []

    with pytest.raises(ValidationError):
        validate_topological_space(data)


# =============================================================================
# TESTS - METRIC DEFINITION VALIDATION
# =============================================================================


def test_metric_definition_validator_accepts_valid_data(valid_metric_definition):
    validator = MetricDefinitionValidator()
    validator.validate(valid_metric_definition)
    assert validator.is_valid(valid_metric_definition)


def test_metric_definition_validate_function(valid_metric_definition):
    validate_metric_definition(valid_metric_definition)


def test_metric_definition_rejects_unknown_kind(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["kind"] = "hamming"

    with pytest.raises(ValidationError):
        validate_metric_definition(data)


def test_metric_definition_rejects_zero_dimension(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["space_dimension"] = 0

    with pytest.raises(ValidationError):
        validate_metric_definition(data)


def test_metric_definition_rejects_wrong_type(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["space_dimension"] = "two"

    with pytest.raises(ValidationError) as exc_info:
        validate_metric_definition(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_metric_definition_rejects_empty_name(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["name"] = ""

    with pytest.raises(ValidationError):
        validate_metric_definition(data)


def test_metric_definition_minkowski_requires_p(valid_metric_definition):
    """if kind == minkowski then p обязателен и числовой."""
    data = valid_metric_definition.copy()
    data["kind"] = "minkowski"

    with pytest.raises(ValidationError):
        validate_metric_definition(data)

    data["p"] = None
    with pytest.raises(ValidationError):
        validate_metric_definition(data)

    data["p"] = 3
    validate_metric_definition(data)


def test_metric_definition_rejects_non_positive_p(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["kind"] = "minkowski"
    data["p"] = 0

    with pytest.raises(ValidationError):
        validate_metric_definition(data)


def test_metric_definition_accepts_null_p(valid_metric_definition):
    data = valid_metric_definition.copy()
    data["p"] = None

    validate_metric_definition(data)


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


def test_topological_space_payload_generates_valid_json():
    """Pydantic TopologicalSpacePayload генерирует валидный JSON."""
    payload = TopologicalSpacePayload(
        base_set=["x", "y", "z"],
        open_sets=[[], ["x"], ["x", "y", "z"]],
        label="chain",
    )

    validate_topological_space(payload.model_dump())


def test_metric_definition_model_generates_valid_json():
    """Pydantic MetricDefinition генерирует валидный JSON (enum → строка)."""
    definition = MetricDefinition(
        name="Minkowski p=3",
        formula="(sum |x_i - y_i|^3)^(1/3)",
        space_dimension=3,
        kind=MetricKind.MINKOWSKI,
        p=3.0,
    )

    validate_metric_definition(definition.model_dump(mode="json"))


def test_contract_payload_round_trip(valid_topological_space):
    """JSON → контракт → Pydantic → value object ядра."""
    validate_topological_space(valid_topological_space)
    space = TopologicalSpacePayload.model_validate(valid_topological_space).to_space()

    assert space.size == 2
    assert len(space.open_sets) == 3


def test_iter_errors_returns_all_errors():
    """iter_errors возвращает все ошибки валидации."""
    validator = MetricDefinitionValidator()

    invalid_data = {
        "name": "",  # minLength: 1 - НАРУШЕНИЕ
        "formula": "d(x, y)",
        "space_dimension": 0,  # minimum: 1 - НАРУШЕНИЕ
        "kind": "hamming",  # enum - НАРУШЕНИЕ
        "extra": True,  # additionalProperties - НАРУШЕНИЕ
    }

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) >= 4
