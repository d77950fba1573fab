"""Salary Input Gate — допуск ввода зарплаты к расчёту.

Единственный класс ошибки ввода: сумма вне границ CurrencyProfile.
- amount < min_amount или NaN/Inf → block_reason="below_minimum", message "Minimum ₹1,000"
- amount > max_amount → block_reason="above_maximum", message "Maximum $1,000,000"

Отклонение является ожидаемым исходом, а не исключением: gate возвращает результат
с человекочитаемым сообщением, вызывающая сторона подавляет отображение
метрик до исправления ввода. Повторов и частичных результатов нет.

Разбор текста формы:
- parse_amount повторяет поведение поля ввода: |число| или 0 при мусоре
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.currency import CurrencyProfile, get_currency_profile
from src.core.domain.salary import SalaryInput, SalaryPeriod
from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)

BLOCK_BELOW_MINIMUM = "below_minimum"
BLOCK_ABOVE_MAXIMUM = "above_maximum"


def parse_amount(raw: str | float | int | None) -> float:
    """Разбор суммы из поля формы.

    Отрицательные значения берутся по модулю; пустая строка, мусор,
    NaN и Inf дают 0.0.

    Examples:
        >>> parse_amount("25000")
        25000.0
        >>> parse_amount("-500")
        500.0
        >>> parse_amount("abc")
        0.0
    """
    if raw is None:
        return 0.0
    try:
        value = float(str(raw).strip() or 0)
    except ValueError:
        return 0.0
    if not is_valid_float(value):
        return 0.0
    return abs(value)


def format_bound(value: float) -> str:
    """Граница с разделителями тысяч, без дробной части для целых значений."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def bound_message(profile: CurrencyProfile, block_reason: str) -> str:
    """Человекочитаемое сообщение о нарушенной границе.

    Args:
        profile: профиль валюты
        block_reason: BLOCK_BELOW_MINIMUM или BLOCK_ABOVE_MAXIMUM

    Returns:
        Сообщение вида "Minimum ₹1,000" / "Maximum €1,000,000"
    """
    if block_reason == BLOCK_BELOW_MINIMUM:
        return f"Minimum {profile.display_symbol}{format_bound(profile.min_amount)}"
    if block_reason == BLOCK_ABOVE_MAXIMUM:
        return f"Maximum {profile.display_symbol}{format_bound(profile.max_amount)}"
    raise ValueError(f"Unknown block_reason: {block_reason!r}")


@dataclass(frozen=True)
class SalaryGateResult:
    """Результат Salary Input Gate."""

    accepted: bool
    block_reason: str

    # Человекочитаемое сообщение ("" если ввод принят)
    message: str

    # Входные параметры для диагностики
    amount: float
    period: SalaryPeriod
    currency_profile: CurrencyProfile

    # Валидированный ввод (только если accepted)
    salary_input: Optional[SalaryInput]


class SalaryInputGate:
    """Salary Input Gate: проверка суммы против границ валюты.

    Порядок проверок:
    1. amount < min_amount или NaN/Inf → блокировка
    2. amount > max_amount → блокировка
    3. PASS → SalaryInput для EarningsProjector
    """

    def __init__(self):
        """Gate не требует зависимостей (stateless)."""
        pass

    def evaluate(
        self,
        amount: float,
        period: SalaryPeriod,
        currency_code: str,
    ) -> SalaryGateResult:
        """Оценка ввода зарплаты.

        Args:
            amount: сумма (уже разобранная, >= 0)
            period: период суммы
            currency_code: код валюты

        Returns:
            SalaryGateResult с решением о допуске

        Raises:
            UnknownCurrencyError: если код валюты не поддерживается
        """
        profile = get_currency_profile(currency_code)

        # 1. Нижняя граница (граница включительно); NaN/Inf не проходят
        if not is_valid_float(amount) or amount < profile.min_amount:
            return self._blocked(amount, period, profile, BLOCK_BELOW_MINIMUM)

        # 2. Верхняя граница
        if amount > profile.max_amount:
            return self._blocked(amount, period, profile, BLOCK_ABOVE_MAXIMUM)

        # 3. PASS
        return SalaryGateResult(
            accepted=True,
            block_reason="",
            message="",
            amount=amount,
            period=period,
            currency_profile=profile,
            salary_input=SalaryInput(amount=amount, period=period, currency_code=profile.code),
        )

    def _blocked(
        self,
        amount: float,
        period: SalaryPeriod,
        profile: CurrencyProfile,
        block_reason: str,
    ) -> SalaryGateResult:
        message = bound_message(profile, block_reason)
        logger.info(
            "Salary input blocked: %s (amount=%s, currency=%s)",
            block_reason,
            amount,
            profile.code,
        )
        return SalaryGateResult(
            accepted=False,
            block_reason=block_reason,
            message=message,
            amount=amount,
            period=period,
            currency_profile=profile,
            salary_input=None,
        )
