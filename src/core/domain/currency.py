"""
CurrencyProfile — Конфигурация поддерживаемой валюты

Immutable Pydantic модель: код валюты, символ для отображения и границы
допустимой суммы зарплаты. Курсы обмена НЕ моделируются, каждая валюта является
независимой конфигурацией, выбираемой по коду.

Полная совместимость с JSON Schema (contracts/schema/salary_input.json, currency_code).
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownCurrencyError(ValueError):
    """Запрошен код валюты, для которой нет CurrencyProfile."""


# =============================================================================
# CURRENCY PROFILE MODEL
# =============================================================================


class CurrencyProfile(BaseModel):
    """
    Профиль валюты.

    Immutable модель (frozen=True). Определяет только границы валидации
    суммы (min_amount ≤ amount ≤ max_amount) и символ для рендера.
    """

    code: str = Field(..., pattern="^[A-Z]{3}$", description="ISO 4217 код валюты")
    display_symbol: str = Field(..., min_length=1, description="Символ для отображения (₹, $, €)")
    min_amount: float = Field(..., ge=0, description="Минимально допустимая сумма зарплаты")
    max_amount: float = Field(..., gt=0, description="Максимально допустимая сумма зарплаты")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "CurrencyProfile":
        """Проверка, что min_amount ≤ max_amount."""
        if self.min_amount > self.max_amount:
            raise ValueError(
                f"min_amount {self.min_amount} exceeds max_amount {self.max_amount} "
                f"for currency {self.code}"
            )
        return self

    def contains(self, amount: float) -> bool:
        """Проверка, что сумма в допустимых границах (границы включительно)."""
        return self.min_amount <= amount <= self.max_amount


# =============================================================================
# REGISTRY
# =============================================================================

INR: Final[CurrencyProfile] = CurrencyProfile(
    code="INR", display_symbol="₹", min_amount=1_000, max_amount=100_000_000
)
USD: Final[CurrencyProfile] = CurrencyProfile(
    code="USD", display_symbol="$", min_amount=100, max_amount=1_000_000
)
EUR: Final[CurrencyProfile] = CurrencyProfile(
    code="EUR", display_symbol="€", min_amount=100, max_amount=1_000_000
)

# Порядок ключей = порядок в селекторе валют
CURRENCIES: Final[dict[str, CurrencyProfile]] = {
    INR.code: INR,
    USD.code: USD,
    EUR.code: EUR,
}

DEFAULT_CURRENCY_CODE: Final[str] = INR.code


def get_currency_profile(code: str) -> CurrencyProfile:
    """
    Получение профиля валюты по коду.

    Args:
        code: Код валюты (например, 'INR')

    Returns:
        CurrencyProfile для кода

    Raises:
        UnknownCurrencyError: Если код не поддерживается
    """
    try:
        return CURRENCIES[code]
    except KeyError:
        raise UnknownCurrencyError(
            f"Unsupported currency code {code!r}; expected one of {', '.join(CURRENCIES)}"
        ) from None


def is_supported_currency(code: str) -> bool:
    """Проверка, поддерживается ли код валюты."""
    return code in CURRENCIES
