"""Gatekeeper — допуск ввода зарплаты к EarningsProjector.

- Проверка границ суммы для выбранной валюты
- Сообщение об ошибке для отображения вместо метрик
"""

from .salary_gate import (
    BLOCK_ABOVE_MAXIMUM,
    BLOCK_BELOW_MINIMUM,
    SalaryGateResult,
    SalaryInputGate,
    bound_message,
    parse_amount,
)

__all__ = [
    "BLOCK_ABOVE_MAXIMUM",
    "BLOCK_BELOW_MINIMUM",
    "SalaryGateResult",
    "SalaryInputGate",
    "bound_message",
    "parse_amount",
]
