"""
Domain models and value objects.

Contains fundamental domain entities: CurrencyProfile, SalaryInput, EarningsBreakdown.
"""

from src.core.domain.currency import (
    CURRENCIES,
    DEFAULT_CURRENCY_CODE,
    EUR,
    INR,
    USD,
    CurrencyProfile,
    UnknownCurrencyError,
    get_currency_profile,
    is_supported_currency,
)
from src.core.domain.earnings import EXPORT_METRIC_NAMES, EarningsBreakdown
from src.core.domain.salary import SalaryInput, SalaryPeriod

__all__ = [
    # Currency module
    "CURRENCIES",
    "DEFAULT_CURRENCY_CODE",
    "INR",
    "USD",
    "EUR",
    "CurrencyProfile",
    "UnknownCurrencyError",
    "get_currency_profile",
    "is_supported_currency",
    # Salary model
    "SalaryInput",
    "SalaryPeriod",
    # Earnings model
    "EarningsBreakdown",
    "EXPORT_METRIC_NAMES",
]
