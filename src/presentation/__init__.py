"""Presentation — коллабораторы вокруг EarningsProjector.

- Formatting: текст для отображения метрик
- Export: CSV metric,amount
- Preferences: сохранение последнего ввода
- Session: headless view model экрана калькулятора
"""

from .export import (
    CSV_HEADER,
    DEFAULT_EXPORT_FILENAME,
    breakdown_to_csv,
    parse_breakdown_csv,
    parse_metric_values,
    write_breakdown_csv,
)
from .formatting import (
    DISPLAY_LAYOUT,
    DisplayRow,
    format_currency,
    format_progress,
    group_indian,
    render_breakdown,
)
from .preferences import (
    DEFAULT_SALARY,
    InMemoryStorage,
    JsonFileStorage,
    KeyValueStorage,
    PreferencesConfig,
    PreferencesStore,
    SalaryPreferences,
)
from .session import EarningsSession

__all__ = [
    # Export
    "CSV_HEADER",
    "DEFAULT_EXPORT_FILENAME",
    "breakdown_to_csv",
    "parse_breakdown_csv",
    "parse_metric_values",
    "write_breakdown_csv",
    # Formatting
    "DISPLAY_LAYOUT",
    "DisplayRow",
    "format_currency",
    "format_progress",
    "group_indian",
    "render_breakdown",
    # Preferences
    "DEFAULT_SALARY",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "PreferencesConfig",
    "PreferencesStore",
    "SalaryPreferences",
    # Session
    "EarningsSession",
]
