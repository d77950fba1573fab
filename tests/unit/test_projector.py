"""Тесты для EarningsProjector.

Coverage:
- Ставки для MONTHLY/YEARLY ввода
- Эквивалентность периодов при одинаковой годовой сумме
- Зависимость дневной ставки от длины месяца
- Прогресс месяца и года (фиксированный год 365 дней)
- Year-to-date и till-now-this-month
- Границы месяца и года
"""

from datetime import datetime, timedelta

import pytest

from src.core.domain import SalaryInput, SalaryPeriod
from src.projector import EarningsProjector, project


def monthly(amount: float, currency: str = "INR") -> SalaryInput:
    return SalaryInput(amount=amount, period=SalaryPeriod.MONTHLY, currency_code=currency)


def yearly(amount: float, currency: str = "INR") -> SalaryInput:
    return SalaryInput(amount=amount, period=SalaryPeriod.YEARLY, currency_code=currency)


class TestRates:
    """Тесты ставок (прогрессивное деление)."""

    @pytest.mark.parametrize("amount", [1_000.0, 30_000.0, 123_456.78, 100_000_000.0])
    def test_monthly_input_per_month_equals_amount(self, amount):
        """MONTHLY: per_month == amount."""
        result = project(monthly(amount), datetime(2025, 3, 15, 12, 0, 0))
        assert result.per_month == pytest.approx(amount)

    @pytest.mark.parametrize(
        "now,days",
        [
            (datetime(2025, 2, 10), 28),
            (datetime(2024, 2, 10), 29),
            (datetime(2025, 4, 10), 30),
            (datetime(2025, 1, 10), 31),
        ],
    )
    def test_monthly_input_per_second(self, now, days):
        """MONTHLY: per_second == amount / days_in_month / 24 / 3600."""
        result = project(monthly(30_000.0), now)
        assert result.per_second == pytest.approx(30_000.0 / days / 24 / 3600)

    def test_yearly_input_per_month(self):
        """YEARLY: per_month == amount / 12."""
        result = project(yearly(1_200_000.0), datetime(2025, 6, 1))
        assert result.per_month == pytest.approx(100_000.0)

    def test_rate_chain_consistency(self):
        """Каждая ставка — предыдущая, делённая на размер единицы."""
        result = project(monthly(31_000.0), datetime(2025, 1, 5, 8, 30))
        assert result.per_day == pytest.approx(1_000.0)
        assert result.per_hour == pytest.approx(result.per_day / 24)
        assert result.per_minute == pytest.approx(result.per_hour / 60)
        assert result.per_second == pytest.approx(result.per_minute / 60)

    def test_period_switch_preserves_rates(self):
        """Одинаковая годовая сумма → одинаковые дневная/часовая/секундная ставки."""
        now = datetime(2025, 9, 17, 14, 45, 12)
        from_monthly = project(monthly(50_000.0), now)
        from_yearly = project(yearly(600_000.0), now)

        assert from_monthly.per_day == pytest.approx(from_yearly.per_day)
        assert from_monthly.per_hour == pytest.approx(from_yearly.per_hour)
        assert from_monthly.per_second == pytest.approx(from_yearly.per_second)
        assert from_monthly.year_to_date == pytest.approx(from_yearly.year_to_date)

    def test_per_day_depends_on_month_length(self):
        """Февраль даёт большую дневную ставку, чем январь, при той же зарплате."""
        salary = monthly(31_000.0)
        january = project(salary, datetime(2025, 1, 31))
        february = project(salary, datetime(2025, 2, 1))

        assert january.per_day == pytest.approx(1_000.0)
        assert february.per_day == pytest.approx(31_000.0 / 28)
        assert february.per_day > january.per_day
        assert january.per_month == pytest.approx(february.per_month)


class TestTillNowThisMonth:
    """Тесты накопления с начала месяца."""

    def test_full_days_only_at_midnight(self):
        """30000/мес, 30-дневный месяц, 10 число 00:00:00 → 9 * 1000."""
        result = project(monthly(30_000.0), datetime(2025, 4, 10, 0, 0, 0))
        assert result.till_now_this_month == pytest.approx(9_000.0)

    def test_one_second_into_month(self):
        """1 число 00:00:01 → ровно одна секундная ставка."""
        result = project(monthly(30_000.0), datetime(2025, 4, 1, 0, 0, 1))
        assert result.till_now_this_month == pytest.approx(30_000.0 / 30 / 24 / 3600)
        assert result.till_now_this_month == pytest.approx(result.per_second)

    def test_month_start_is_zero(self):
        """1 число 00:00:00 → 0."""
        result = project(monthly(30_000.0), datetime(2025, 4, 1, 0, 0, 0))
        assert result.till_now_this_month == pytest.approx(0.0, abs=1e-12)

    def test_partial_day_accrual(self):
        """Частичный день: часы, минуты и секунды по своим ставкам."""
        now = datetime(2025, 4, 3, 6, 30, 15)
        result = project(monthly(30_000.0), now)
        expected = 2 * 1_000.0 + 6 * result.per_hour + 30 * result.per_minute + 15 * result.per_second
        assert result.till_now_this_month == pytest.approx(expected)

    def test_end_of_month_approaches_monthly(self):
        """Последняя секунда месяца ≈ месячная сумма за вычетом одной секунды."""
        result = project(monthly(30_000.0), datetime(2025, 4, 30, 23, 59, 59))
        assert result.till_now_this_month == pytest.approx(30_000.0 - result.per_second)
        assert result.till_now_this_month < result.per_month

    def test_microseconds_ignored(self):
        """Доли секунды не начисляются."""
        salary = monthly(30_000.0)
        base = project(salary, datetime(2025, 4, 5, 10, 0, 0))
        later = project(salary, datetime(2025, 4, 5, 10, 0, 0, 999_999))
        assert base.till_now_this_month == later.till_now_this_month


class TestProgress:
    """Тесты прогресса месяца и года."""

    def test_month_progress_first_day_nonzero(self):
        """1 число → минимальный ненулевой прогресс 1/days."""
        result = project(monthly(30_000.0), datetime(2025, 4, 1))
        assert result.month_progress_pct == pytest.approx(100 / 30)

    def test_month_progress_last_day(self):
        """Последний день 31-дневного месяца → 100%."""
        result = project(monthly(30_000.0), datetime(2025, 1, 31, 23, 59, 59))
        assert result.month_progress_pct == pytest.approx(100.0)

    def test_month_progress_monotonic_and_resets(self):
        """Прогресс не убывает в течение месяца и сбрасывается в следующем."""
        salary = monthly(30_000.0)
        start = datetime(2025, 1, 1, 12, 0)
        values = [
            project(salary, start + timedelta(days=offset)).month_progress_pct
            for offset in range(31)
        ]
        assert values == sorted(values)

        next_month = project(salary, datetime(2025, 2, 1, 12, 0)).month_progress_pct
        assert next_month < values[-1]
        assert next_month == pytest.approx(100 / 28)

    def test_year_progress_start(self):
        """1 января → 0% и YTD 0."""
        result = project(yearly(365_000.0), datetime(2025, 1, 1, 0, 0, 0))
        assert result.year_progress_pct == pytest.approx(0.0)
        assert result.year_to_date == pytest.approx(0.0)

    def test_year_progress_whole_days(self):
        """В течение 1 января день года остаётся 0."""
        result = project(yearly(365_000.0), datetime(2025, 1, 1, 23, 59, 59))
        assert result.year_progress_pct == pytest.approx(0.0)

    def test_year_progress_mid_year(self):
        """2 июля 2025: 182 прошедших дня."""
        result = project(yearly(365_000.0), datetime(2025, 7, 2, 9, 0))
        assert result.year_progress_pct == pytest.approx(182 / 365 * 100)
        assert result.year_to_date == pytest.approx(182_000.0)

    def test_leap_year_day_365_reaches_full_year(self):
        """31 декабря високосного года: 365 дней → YTD == годовая сумма."""
        result = project(yearly(365_000.0), datetime(2024, 12, 31, 10, 0))
        assert result.year_to_date == pytest.approx(365_000.0)
        assert result.year_progress_pct == pytest.approx(100.0)

    def test_non_leap_year_last_day(self):
        """31 декабря невисокосного года: 364/365."""
        result = project(yearly(365_000.0), datetime(2025, 12, 31, 10, 0))
        assert result.year_to_date == pytest.approx(364_000.0)

    def test_leap_year_uses_fixed_365_divisor(self):
        """1 марта 2024 (60 дней) делится на 365, а не на 366."""
        result = project(yearly(365_000.0), datetime(2024, 3, 1))
        assert result.year_progress_pct == pytest.approx(60 / 365 * 100)


class TestProjectorContract:
    """Тесты контракта projector."""

    def test_deterministic(self):
        """Одинаковые (input, now) → одинаковый результат."""
        salary = yearly(1_234_567.0)
        now = datetime(2025, 5, 20, 17, 3, 9)
        assert project(salary, now) == project(salary, now)
        assert EarningsProjector().project(salary, now) == project(salary, now)

    def test_minimum_amount_all_non_negative(self):
        """Граничная сумма даёт полный неотрицательный результат."""
        result = project(monthly(100.0, currency="USD"), datetime(2025, 8, 1, 0, 0, 0))
        for value in result.model_dump().values():
            assert value >= 0
