"""Projector — расчёт метрик заработка по зарплате и текущему времени.

- Чистая функция project(salary_input, now)
- Пересчитывается вызывающей стороной на каждый tick
"""

from .engine import EarningsProjector, project

__all__ = [
    "EarningsProjector",
    "project",
]
