"""
Numerical Safeguards — безопасные float-примитивы для денежных метрик

Модуль обеспечивает численную устойчивость расчётов и отображения заработка:
- NaN/Inf санитизация (невалидные значения не доходят до рендера)
- Epsilon-проверка нулевых денежных сумм
- Отсечение отрицательных значений при отображении (display floor)
- Округление half-up для процентов прогресса

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в отображение (заменяются на fallback)
2. Отображаемые денежные значения всегда >= 0
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для денежных сумм (в единицах валюты)
EPS_MONEY: Final[float] = 1e-9

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# EPSILON-СРАВНЕНИЕ С НУЛЁМ
# =============================================================================


def is_zero(value: float, tol: float = EPS_MONEY) -> bool:
    """Проверка, близко ли значение к нулю (по умолчанию денежный epsilon)."""
    return abs(value) <= tol


# =============================================================================
# ОГРАНИЧЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_non_negative(value: float) -> float:
    """
    Display floor: max(0, value) с санитизацией NaN/Inf.

    Применяется рендером к каждой метрике перед форматированием.

    Examples:
        >>> clamp_non_negative(-0.01)
        0.0
        >>> clamp_non_negative(float('nan'))
        0.0
        >>> clamp_non_negative(12.5)
        12.5
    """
    return clamp(sanitize_float(value, fallback=0.0), min_value=0.0)


def round_half_up(value: float) -> int:
    """
    Округление до целого с правилом half-up (2.5 → 3, а не banker's 2).

    Examples:
        >>> round_half_up(49.5)
        50
        >>> round_half_up(49.49)
        49
    """
    return math.floor(value + 0.5)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str, eps: float = EPS_CALC) -> None:
    """
    Валидация, что значение положительное.

    Raises:
        ValueError: Если value <= eps или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")
