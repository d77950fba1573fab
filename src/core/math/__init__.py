"""
Core math modules

Календарные и численные примитивы для расчёта заработка.
"""

# Calendar
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
    start_of_year,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_MONEY,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Epsilon zero check
    is_zero,
    # Utilities
    clamp,
    clamp_non_negative,
    round_half_up,
    # Validation
    validate_positive,
)

__all__ = [
    # Calendar — Constants
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MONTHS_PER_YEAR",
    "SECONDS_PER_MINUTE",
    "YEAR_DAYS_FIXED",
    # Calendar — Functions
    "clock_of_day",
    "day_of_month",
    "day_of_year_elapsed",
    "days_in_month",
    "start_of_year",
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_MONEY",
    # Numerical Safeguards — NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Numerical Safeguards — Epsilon zero check
    "is_zero",
    # Numerical Safeguards — Utilities
    "clamp",
    "clamp_non_negative",
    "round_half_up",
    # Numerical Safeguards — Validation
    "validate_positive",
]
