"""
Calendar Units — календарные примитивы для пропорционального начисления

Все функции работают с naive datetime локальных часов хоста.
Часовые пояса не поддерживаются: время берётся таким, каким его видит хост.

Политики:
- days_in_month: фактическое число дней месяца (28–31), пересчитывается на каждый вызов
- day_of_year_elapsed: число ЦЕЛЫХ суток, прошедших с 1 января 00:00
- YEAR_DAYS_FIXED = 365: фиксированный делитель года, високосные годы не учитываются
"""

import calendar
from datetime import datetime
from typing import Final

# =============================================================================
# КОНСТАНТЫ КАЛЕНДАРЯ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12
HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_MINUTE: Final[int] = 60

# Фиксированная длина года для прогресса года и year-to-date.
# Високосный год НЕ учитывается: 31 декабря високосного года даёт 365/365.
YEAR_DAYS_FIXED: Final[int] = 365


# =============================================================================
# ФУНКЦИИ
# =============================================================================


def days_in_month(now: datetime) -> int:
    """
    Число дней в календарном месяце `now` (28–31).

    Examples:
        >>> days_in_month(datetime(2024, 2, 10))
        29
        >>> days_in_month(datetime(2023, 2, 10))
        28
    """
    return calendar.monthrange(now.year, now.month)[1]


def day_of_month(now: datetime) -> int:
    """День месяца, 1-based (1 число → 1)."""
    return now.day


def start_of_year(now: datetime) -> datetime:
    """1 января 00:00:00 года `now` (tzinfo сохраняется)."""
    return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


def day_of_year_elapsed(now: datetime) -> int:
    """
    Число целых суток, прошедших с 1 января 00:00 года `now`.

    1 января (в любое время) → 0, 2 января 00:00 → 1, 31 декабря → 364
    (или 365 в високосном году).

    Examples:
        >>> day_of_year_elapsed(datetime(2025, 1, 1, 23, 59, 59))
        0
        >>> day_of_year_elapsed(datetime(2025, 2, 1))
        31
    """
    return (now - start_of_year(now)).days


def clock_of_day(now: datetime) -> tuple[int, int, int]:
    """
    Текущее время суток как (hour, minute, second).

    Доли секунды отбрасываются.
    """
    return now.hour, now.minute, now.second
