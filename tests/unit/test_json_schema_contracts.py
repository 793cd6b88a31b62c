"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидатора random_range:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Интеграция с Pydantic моделью RangeRandom
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from range_random import RangeRandom
from range_random.core.contracts import (
    RANDOM_RANGE_SCHEMA,
    RandomRangeValidator,
    SchemaLoader,
    validate_random_range,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_random_range():
    """Валидный random_range для тестирования."""
    return {"min": 1, "max": 6, "step": 1, "usfpp": False}


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_random_range():
    """Проверка загрузки схемы random_range."""
    schema = SchemaLoader().load_schema(RANDOM_RANGE_SCHEMA)

    assert schema["title"] == "random_range"
    assert schema["required"] == ["min", "max"]
    assert list(schema["properties"]) == ["min", "max", "step", "usfpp"]
    Draft202012Validator.check_schema(schema)


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema(RANDOM_RANGE_SCHEMA)
    schema2 = loader.load_schema(RANDOM_RANGE_SCHEMA)

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Проверка ошибки при отсутствующем каталоге схем."""
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Meta-validation: файл с некорректной JSON Schema отклоняется."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - RANDOM RANGE VALIDATION
# =============================================================================


def test_random_range_validator_accepts_valid_data(valid_random_range):
    """Валидация правильного random_range."""
    validator = RandomRangeValidator()
    validator.validate(valid_random_range)  # Не должно выбросить исключение
    assert validator.is_valid(valid_random_range)


def test_random_range_validate_function(valid_random_range):
    """Проверка функции validate_random_range."""
    validate_random_range(valid_random_range)


def test_random_range_accepts_minimal_data():
    """step и usfpp необязательны."""
    validate_random_range({"min": 0.5, "max": -0.5})


def test_random_range_accepts_additional_properties(valid_random_range):
    """Дополнительные поля допускаются."""
    data = {**valid_random_range, "label": "dice"}
    assert RandomRangeValidator().is_valid(data)


@pytest.mark.parametrize("field", ["min", "max"])
def test_random_range_rejects_missing_required_field(valid_random_range, field):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_random_range.copy()
    del data[field]

    with pytest.raises(ValidationError) as exc_info:
        validate_random_range(data)
    assert f"'{field}' is a required property" in str(exc_info.value)


@pytest.mark.parametrize(
    "field, value",
    [("min", "1"), ("max", None), ("step", "0.1"), ("min", True)],
)
def test_random_range_rejects_wrong_number_type(valid_random_range, field, value):
    """Валидация отклоняет нечисловые границы и шаг."""
    data = {**valid_random_range, field: value}

    with pytest.raises(ValidationError) as exc_info:
        validate_random_range(data)
    assert "is not of type 'number'" in str(exc_info.value)


def test_random_range_rejects_non_boolean_usfpp(valid_random_range):
    data = {**valid_random_range, "usfpp": 1}

    with pytest.raises(ValidationError) as exc_info:
        validate_random_range(data)
    assert "is not of type 'boolean'" in str(exc_info.value)


@pytest.mark.parametrize("data", [[1, 2], "range", None, 5])
def test_random_range_rejects_non_object(data):
    assert not RandomRangeValidator().is_valid(data)


def test_iter_errors_returns_all_errors():
    """Проверка, что iter_errors возвращает все ошибки валидации."""
    validator = RandomRangeValidator()

    invalid_data = {
        "min": "low",  # type violation - НАРУШЕНИЕ
        # max отсутствует - НАРУШЕНИЕ
        "usfpp": "no",  # type violation - НАРУШЕНИЕ
    }

    errors = list(validator.iter_errors(invalid_data))
    assert len(errors) == 3


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


@pytest.mark.parametrize(
    "rnd",
    [
        RangeRandom.from_range(0, 2),
        RangeRandom.from_range(1, 6, 1, True),
        RangeRandom.from_center(0, 0.5, 0.1),
    ],
)
def test_model_dump_conforms_to_schema(rnd):
    """to_dict() RangeRandom всегда соответствует схеме."""
    validate_random_range(rnd.to_dict())
    validate_random_range(json.loads(rnd.to_json()))
