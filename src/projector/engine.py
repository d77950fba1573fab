"""EarningsProjector — расчёт метрик заработка на момент времени.

Чистая функция project(salary_input, now) -> EarningsBreakdown:
- Без внутреннего состояния, без I/O, без таймеров
- Детерминирована: одинаковые (input, now) → одинаковый результат
- Безопасна для повторных и конкурентных вызовов
- Не валидирует ввод: SalaryInput уже гарантирует границы суммы

Алгоритм:
1. yearly = amount (YEARLY) или amount * 12 (MONTHLY)
2. Прогрессивное деление: monthly = yearly / 12, daily = monthly / days_in_month,
   hourly = daily / 24, minutely = hourly / 60, secondly = minutely / 60
3. month_progress_pct = day_of_month / days_in_month * 100
4. year_progress_pct = day_of_year / 365 * 100
5. year_to_date = yearly * day_of_year / 365
6. till_now_this_month = (day_of_month - 1) * daily
   + hour * hourly + minute * minutely + second * secondly

Ставки за день/час/минуту/секунду зависят от длины текущего месяца:
одна и та же зарплата даёт разную дневную ставку в феврале и в январе.
"""

import logging
from datetime import datetime

from src.core.domain.earnings import EarningsBreakdown
from src.core.domain.salary import SalaryInput
from src.core.math.calendar_units import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    YEAR_DAYS_FIXED,
    clock_of_day,
    day_of_month,
    day_of_year_elapsed,
    days_in_month,
)

logger = logging.getLogger(__name__)


class EarningsProjector:
    """EarningsProjector: (SalaryInput, now) → EarningsBreakdown.

    Stateless. Экземпляр нужен только как точка внедрения для
    коллабораторов (сессия, CLI); вся логика в project().
    """

    def project(self, salary_input: SalaryInput, now: datetime) -> EarningsBreakdown:
        """Расчёт всех метрик заработка на момент `now`.

        Args:
            salary_input: валидированный ввод зарплаты
            now: момент времени (naive datetime локальных часов хоста)

        Returns:
            EarningsBreakdown со всеми метриками
        """
        month_days = days_in_month(now)
        day = day_of_month(now)
        year_day = day_of_year_elapsed(now)
        hour, minute, second = clock_of_day(now)

        # 1-2. Нормализация к году и прогрессивное деление
        yearly = salary_input.yearly_amount()
        monthly = yearly / MONTHS_PER_YEAR
        daily = monthly / month_days
        hourly = daily / HOURS_PER_DAY
        minutely = hourly / MINUTES_PER_HOUR
        secondly = minutely / SECONDS_PER_MINUTE

        # 3-4. Прогресс календаря
        month_progress_pct = (day / month_days) * 100
        year_progress_pct = (year_day / YEAR_DAYS_FIXED) * 100

        # 5. Year-to-date (фиксированный год 365 дней)
        year_to_date = (yearly * year_day) / YEAR_DAYS_FIXED

        # 6. Полные прошедшие дни месяца + частичный текущий день
        full_days_earned = (day - 1) * daily
        partial_day_earned = hour * hourly + minute * minutely + second * secondly
        till_now_this_month = full_days_earned + partial_day_earned

        logger.debug(
            "Projected %s %s %.2f at %s: daily=%.6f till_now=%.6f",
            salary_input.period.value,
            salary_input.currency_code,
            salary_input.amount,
            now.isoformat(timespec="seconds"),
            daily,
            till_now_this_month,
        )

        return EarningsBreakdown(
            per_second=secondly,
            per_minute=minutely,
            per_hour=hourly,
            per_day=daily,
            per_month=monthly,
            year_to_date=year_to_date,
            till_now_this_month=till_now_this_month,
            month_progress_pct=month_progress_pct,
            year_progress_pct=year_progress_pct,
        )


_DEFAULT_PROJECTOR = EarningsProjector()


def project(salary_input: SalaryInput, now: datetime) -> EarningsBreakdown:
    """Расчёт метрик заработка (модульная обёртка над EarningsProjector)."""
    return _DEFAULT_PROJECTOR.project(salary_input, now)
