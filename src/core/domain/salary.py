"""
SalaryInput — Модель валидированного ввода зарплаты

Immutable Pydantic модель: сумма, период (YEARLY/MONTHLY) и код валюты.
Полная совместимость с JSON Schema (contracts/schema/salary_input.json).

ИНВАРИАНТ: min_amount(currency_code) ≤ amount ≤ max_amount(currency_code).
Экземпляр с суммой вне границ создать нельзя, поэтому невалидный ввод
никогда не доходит до EarningsProjector.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.currency import CurrencyProfile, get_currency_profile
from src.core.math.calendar_units import MONTHS_PER_YEAR


# =============================================================================
# ENUMS
# =============================================================================


class SalaryPeriod(str, Enum):
    """Период, к которому относится заявленная сумма."""

    YEARLY = "yearly"
    MONTHLY = "monthly"


# =============================================================================
# SALARY INPUT MODEL
# =============================================================================


class SalaryInput(BaseModel):
    """
    Валидированный ввод зарплаты.

    Immutable модель (frozen=True). Все изменения ввода (новая сумма,
    смена периода или валюты) создают новый экземпляр.
    """

    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Заявленная сумма зарплаты")
    period: SalaryPeriod = Field(..., description="Период суммы (yearly/monthly)")
    currency_code: str = Field(..., description="Код валюты из реестра CurrencyProfile")

    model_config = {"frozen": True}

    @field_validator("currency_code")
    @classmethod
    def validate_currency_supported(cls, v: str) -> str:
        """Код валюты должен быть в реестре."""
        get_currency_profile(v)
        return v

    @model_validator(mode="after")
    def validate_amount_within_bounds(self) -> "SalaryInput":
        """
        Проверка границ суммы для выбранной валюты.

        amount == min_amount валиден; min_amount - 1 невалиден.
        """
        profile = get_currency_profile(self.currency_code)
        if not profile.contains(self.amount):
            raise ValueError(
                f"amount {self.amount} outside [{profile.min_amount}, {profile.max_amount}] "
                f"for currency {profile.code}"
            )
        return self

    @property
    def currency(self) -> CurrencyProfile:
        """Профиль валюты ввода."""
        return get_currency_profile(self.currency_code)

    @property
    def is_yearly(self) -> bool:
        return self.period == SalaryPeriod.YEARLY

    def yearly_amount(self) -> float:
        """
        Нормализация суммы к годовой.

        Returns:
            amount для YEARLY, amount * 12 для MONTHLY
        """
        if self.period == SalaryPeriod.YEARLY:
            return self.amount
        return self.amount * MONTHS_PER_YEAR
