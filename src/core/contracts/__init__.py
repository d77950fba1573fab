"""
Contract Validation Module

Модуль для валидации JSON контрактов: ввод зарплаты, метрики заработка,
сохранённые настройки.
"""

from .validators import (
    ContractValidator,
    EarningsBreakdownValidator,
    SalaryInputValidator,
    SalaryPreferencesValidator,
    SchemaLoader,
    validate_earnings_breakdown,
    validate_salary_input,
    validate_salary_preferences,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SalaryInputValidator",
    "EarningsBreakdownValidator",
    "SalaryPreferencesValidator",
    # Functions
    "validate_salary_input",
    "validate_earnings_breakdown",
    "validate_salary_preferences",
]
