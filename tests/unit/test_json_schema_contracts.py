"""
Тесты для JSON Schema контрактов

Проверяет:
1. Загрузку и meta-валидацию схем
2. coefficient_triple.json
3. factored_result.json, включая результаты движка
"""

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CoefficientTripleValidator,
    FactoredResultValidator,
    SchemaLoader,
    validate_coefficient_triple,
    validate_factored_result,
)
from src.core.domain import CoefficientTriple
from src.factoring import factor, factor_ab, factor_abc, factor_ac


# =============================================================================
# ТЕСТЫ: Schema Loader
# =============================================================================


class TestSchemaLoader:
    """Загрузка схем."""

    def test_loads_and_caches(self):
        loader = SchemaLoader()
        schema = loader.load_schema("factored_result")
        assert schema["title"] == "FactoredResult"
        assert loader.load_schema("factored_result") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")


# =============================================================================
# ТЕСТЫ: coefficient_triple
# =============================================================================


class TestCoefficientTripleContract:
    """coefficient_triple.json"""

    def test_valid(self):
        validate_coefficient_triple({"a": 2, "b": 7, "c": 3})

    def test_pydantic_dump_is_valid(self):
        validate_coefficient_triple(CoefficientTriple(a=-1, b=0, c=9).model_dump())

    def test_zero_a_invalid(self):
        with pytest.raises(ValidationError):
            validate_coefficient_triple({"a": 0, "b": 1, "c": 1})

    def test_missing_field_invalid(self):
        assert not CoefficientTripleValidator().is_valid({"a": 1, "b": 1})

    def test_non_integer_invalid(self):
        assert not CoefficientTripleValidator().is_valid({"a": 1.5, "b": 1, "c": 1})

    def test_get_errors(self):
        errors = CoefficientTripleValidator().get_errors({"a": 1, "b": "x", "c": 1, "d": 0})
        assert len(errors) == 2
        assert any(e.startswith("b:") for e in errors)


# =============================================================================
# ТЕСТЫ: factored_result
# =============================================================================


class TestFactoredResultContract:
    """factored_result.json"""

    @pytest.mark.parametrize(
        "result",
        [
            factor(1),
            factor(-7),
            factor_ab(2, 4),
            factor_ac(-1, 9),
            factor_abc(1, 5, 6),
            factor_abc(-6, -1, 2),
            factor_abc(4, 14, 6),
        ],
    )
    def test_engine_results_valid(self, result):
        validate_factored_result(result.to_dict())

    def test_unescaped_latex_invalid(self):
        """Неэкранированная скобка в latex нарушает контракт."""
        assert not FactoredResultValidator().is_valid(
            {"plain": "(x + 1)(x + 1)", "latex": "(x + 1)(x + 1)"}
        )

    def test_foreign_characters_invalid(self):
        with pytest.raises(ValidationError):
            validate_factored_result({"plain": "(y + 1)", "latex": "\\left(y + 1\\right)"})

    def test_empty_invalid(self):
        assert not FactoredResultValidator().is_valid({"plain": "", "latex": ""})
