"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями
"""

from datetime import datetime

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    EarningsBreakdownValidator,
    SalaryInputValidator,
    SalaryPreferencesValidator,
    SchemaLoader,
    validate_earnings_breakdown,
    validate_salary_input,
    validate_salary_preferences,
)
from src.core.domain import SalaryInput, SalaryPeriod
from src.projector import project


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_salary_input():
    """Валидный salary_input для тестирования."""
    return {"amount": 30000.0, "period": "monthly", "currency_code": "INR"}


@pytest.fixture
def valid_breakdown():
    """Валидный earnings_breakdown для тестирования."""
    salary = SalaryInput(amount=30_000, period=SalaryPeriod.MONTHLY, currency_code="INR")
    return project(salary, datetime(2025, 4, 10, 12, 0, 0)).model_dump()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize(
        "name", ["salary_input", "earnings_breakdown", "salary_preferences"]
    )
    def test_schemas_load_and_are_valid(self, name):
        schema = SchemaLoader().load_schema(name)
        assert schema["title"] == name

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("salary_input") is loader.load_schema("salary_input")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(schema_dir=tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")


# =============================================================================
# SALARY INPUT CONTRACT
# =============================================================================


class TestSalaryInputContract:
    """Тесты контракта salary_input."""

    def test_valid(self, valid_salary_input):
        validate_salary_input(valid_salary_input)

    def test_pydantic_model_complies(self):
        salary = SalaryInput(amount=120_000, period=SalaryPeriod.YEARLY, currency_code="USD")
        validate_salary_input(salary.model_dump(mode="json"))

    def test_missing_required(self, valid_salary_input):
        del valid_salary_input["period"]
        with pytest.raises(ValidationError):
            validate_salary_input(valid_salary_input)

    def test_unknown_currency(self, valid_salary_input):
        valid_salary_input["currency_code"] = "GBP"
        assert not SalaryInputValidator().is_valid(valid_salary_input)

    def test_negative_amount(self, valid_salary_input):
        valid_salary_input["amount"] = -1
        with pytest.raises(ValidationError):
            validate_salary_input(valid_salary_input)


# =============================================================================
# EARNINGS BREAKDOWN CONTRACT
# =============================================================================


class TestEarningsBreakdownContract:
    """Тесты контракта earnings_breakdown."""

    def test_projector_output_complies(self, valid_breakdown):
        validate_earnings_breakdown(valid_breakdown)

    def test_negative_value(self, valid_breakdown):
        valid_breakdown["per_second"] = -0.1
        with pytest.raises(ValidationError):
            validate_earnings_breakdown(valid_breakdown)

    def test_progress_above_100(self, valid_breakdown):
        valid_breakdown["month_progress_pct"] = 101.0
        assert not EarningsBreakdownValidator().is_valid(valid_breakdown)

    def test_extra_field(self, valid_breakdown):
        valid_breakdown["per_week"] = 7000.0
        errors = list(EarningsBreakdownValidator().iter_errors(valid_breakdown))
        assert len(errors) == 1


# =============================================================================
# SALARY PREFERENCES CONTRACT
# =============================================================================


class TestSalaryPreferencesContract:
    """Тесты контракта salary_preferences."""

    def test_valid(self):
        validate_salary_preferences({"salary": "300000", "isYearly": "false", "currency": "INR"})

    def test_empty_document(self):
        validate_salary_preferences({})

    def test_non_string_value(self):
        with pytest.raises(ValidationError):
            validate_salary_preferences({"salary": 300000})

    def test_bad_period_flag(self):
        assert not SalaryPreferencesValidator().is_valid({"isYearly": "yes"})
