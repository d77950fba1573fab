"""Formatting — рендер EarningsBreakdown в текст для отображения.

Денежные суммы:
- Символ валюты префиксом, ровно 2 знака после точки
- Индийская группировка разрядов (en-IN): 3,00,000.00: последние 3 цифры,
  далее группы по 2
- Отрицательные значения и NaN/Inf отображаются как 0 (display floor)

Прогресс: half-up округление до целого процента.
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.currency import get_currency_profile
from src.core.domain.earnings import EarningsBreakdown
from src.core.math.numerical_safeguards import clamp_non_negative, round_half_up

# Порядок строк на экране: (поле модели, подпись, тип значения)
DISPLAY_LAYOUT: Final[tuple[tuple[str, str, str], ...]] = (
    ("till_now_this_month", "Earned This Month (Till Now)", "money"),
    ("per_day", "Per Day", "money"),
    ("per_minute", "Per Minute", "money"),
    ("per_hour", "Per Hour", "money"),
    ("per_month", "Per Month", "money"),
    ("per_second", "Per Second", "money"),
    ("year_to_date", "Year to Date", "money"),
    ("month_progress_pct", "Monthly Progress", "percent"),
    ("year_progress_pct", "Yearly Progress", "percent"),
)


@dataclass(frozen=True)
class DisplayRow:
    """Строка отображения метрики."""

    key: str
    label: str
    text: str
    value: float


def group_indian(digits: str) -> str:
    """Группировка разрядов целой части по схеме en-IN.

    Examples:
        >>> group_indian("300000")
        '3,00,000'
        >>> group_indian("999")
        '999'
        >>> group_indian("100000000")
        '10,00,00,000'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: float, currency_code: str) -> str:
    """Денежная сумма как текст, например '₹3,00,000.00'.

    Raises:
        UnknownCurrencyError: если код валюты не поддерживается
    """
    profile = get_currency_profile(currency_code)
    integer_part, fraction_part = f"{clamp_non_negative(amount):.2f}".split(".")
    return f"{profile.display_symbol}{group_indian(integer_part)}.{fraction_part}"


def format_progress(pct: float) -> str:
    """Процент прогресса, например '33%'."""
    return f"{round_half_up(clamp_non_negative(pct))}%"


def render_breakdown(breakdown: EarningsBreakdown, currency_code: str) -> list[DisplayRow]:
    """Строки отображения в порядке экрана.

    Args:
        breakdown: метрики заработка
        currency_code: валюта для денежных сумм

    Returns:
        Список DisplayRow (DISPLAY_LAYOUT порядок)
    """
    rows = []
    for key, label, kind in DISPLAY_LAYOUT:
        value = getattr(breakdown, key)
        if kind == "money":
            text = format_currency(value, currency_code)
        else:
            text = format_progress(value)
        rows.append(DisplayRow(key=key, label=label, text=text, value=value))
    return rows
