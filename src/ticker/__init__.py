"""Ticker — периодический пересчёт метрик с handle отмены."""

from .scheduler import EarningsTicker, TickCallback, TickerConfig, TickHandle

__all__ = [
    "EarningsTicker",
    "TickCallback",
    "TickerConfig",
    "TickHandle",
]
