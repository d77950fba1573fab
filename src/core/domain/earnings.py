"""
EarningsBreakdown — Модель рассчитанных метрик заработка

Immutable Pydantic модель, полностью производная от (SalaryInput, now).
Не имеет идентичности и жизненного цикла: пересчитывается на каждый tick.
Полная совместимость с JSON Schema (contracts/schema/earnings_breakdown.json).
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# EXPORT METRIC NAMES
# =============================================================================

# Имя поля модели → имя метрики в экспорте (колонка metric).
# Порядок = порядок строк в CSV.
EXPORT_METRIC_NAMES: Final[dict[str, str]] = {
    "per_second": "second",
    "per_minute": "minute",
    "per_hour": "hour",
    "per_day": "day",
    "per_month": "month",
    "year_to_date": "yearToDate",
    "month_progress_pct": "monthProgress",
    "year_progress_pct": "yearProgress",
    "till_now_this_month": "tillNow",
}


# =============================================================================
# EARNINGS BREAKDOWN MODEL
# =============================================================================


class EarningsBreakdown(BaseModel):
    """
    Снапшот метрик заработка на момент `now`.

    Immutable модель (frozen=True). Все значения неотрицательные.
    """

    # Ставки (прогрессивное деление год → месяц → день → час → минута → секунда)
    per_second: float = Field(..., ge=0, description="Заработок в секунду")
    per_minute: float = Field(..., ge=0, description="Заработок в минуту")
    per_hour: float = Field(..., ge=0, description="Заработок в час")
    per_day: float = Field(..., ge=0, description="Заработок в день (зависит от длины месяца)")
    per_month: float = Field(..., ge=0, description="Заработок в месяц")

    # Накопленные суммы
    year_to_date: float = Field(..., ge=0, description="Заработано с 1 января (фиксированный год 365 дней)")
    till_now_this_month: float = Field(
        ..., ge=0, description="Заработано с начала месяца до текущей секунды"
    )

    # Прогресс календаря (проценты)
    month_progress_pct: float = Field(..., ge=0, description="Прогресс месяца (%)")
    year_progress_pct: float = Field(..., ge=0, description="Прогресс года (%, делитель 365)")

    model_config = {"frozen": True}

    def export_metrics(self) -> list[tuple[str, float]]:
        """
        Пары (metric, value) в порядке экспорта.

        Returns:
            Список пар, имена метрик из EXPORT_METRIC_NAMES
        """
        return [
            (metric, getattr(self, field_name))
            for field_name, metric in EXPORT_METRIC_NAMES.items()
        ]

    @classmethod
    def from_export_metrics(cls, metrics: dict[str, float]) -> "EarningsBreakdown":
        """
        Обратная сборка модели из словаря metric → value.

        Raises:
            KeyError: Если в словаре нет одной из метрик
            ValidationError: Если значения нарушают ограничения модели
        """
        return cls(
            **{
                field_name: metrics[metric]
                for field_name, metric in EXPORT_METRIC_NAMES.items()
            }
        )
