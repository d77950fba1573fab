"""Preferences — сохранение последнего ввода зарплаты между сессиями.

Key-value хранилище с фиксированными ключами:
- "salary":   сумма как строка ("300000")
- "isYearly": "true" / "false"
- "currency": код валюты ("INR")

Загрузка:
- сумма отсутствует, не число или 0 → DEFAULT_SALARY (300000)
- сумма поднимается до минимума INR (max(salary, 1000))
- неизвестный код валюты → INR

Формат хранения не проектируется: JsonFileStorage хранит плоский JSON объект
строк, проверяемый контрактом salary_preferences.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Final, Optional, Protocol

from jsonschema import ValidationError
from pydantic import BaseModel, Field

from src.core.contracts import validate_salary_preferences
from src.core.domain.currency import DEFAULT_CURRENCY_CODE, INR, is_supported_currency
from src.core.domain.salary import SalaryPeriod
from src.core.math.numerical_safeguards import is_valid_float, is_zero

logger = logging.getLogger(__name__)

DEFAULT_SALARY: Final[float] = 300_000.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PreferencesConfig:
    """Ключи хранилища и значения по умолчанию."""

    salary_key: str = "salary"
    period_key: str = "isYearly"
    currency_key: str = "currency"
    default_salary: float = DEFAULT_SALARY
    default_period: SalaryPeriod = SalaryPeriod.MONTHLY
    default_currency: str = DEFAULT_CURRENCY_CODE
    # Нижняя граница загруженной суммы (минимум валюты по умолчанию)
    salary_floor: float = INR.min_amount


# =============================================================================
# STORAGE
# =============================================================================


class KeyValueStorage(Protocol):
    """Строковое key-value хранилище."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryStorage:
    """Хранилище в памяти процесса."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class JsonFileStorage:
    """Хранилище в JSON файле (плоский объект строк).

    Битый или не прошедший контракт файл игнорируется с предупреждением:
    настройки начинаются с чистого листа, файл перезаписывается при set().
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            validate_salary_preferences(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        return data

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._write()


# =============================================================================
# PREFERENCES MODEL
# =============================================================================


class SalaryPreferences(BaseModel):
    """Сохранённый ввод зарплаты (без проверки границ валюты)."""

    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Сумма зарплаты")
    period: SalaryPeriod = Field(..., description="Период суммы")
    currency_code: str = Field(..., min_length=1, description="Код валюты")

    model_config = {"frozen": True}


def _format_amount(amount: float) -> str:
    """Сумма как строка: '300000' для целых, repr для дробных."""
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


def _parse_stored_amount(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not is_valid_float(value) or is_zero(value):
        return None
    return value


class PreferencesStore:
    """Загрузка и сохранение SalaryPreferences поверх KeyValueStorage."""

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        config: Optional[PreferencesConfig] = None,
    ):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.config = config or PreferencesConfig()

    def defaults(self) -> SalaryPreferences:
        return SalaryPreferences(
            amount=self.config.default_salary,
            period=self.config.default_period,
            currency_code=self.config.default_currency,
        )

    def load(self) -> SalaryPreferences:
        """Загрузка настроек с подстановкой значений по умолчанию."""
        cfg = self.config

        amount = _parse_stored_amount(self.storage.get(cfg.salary_key))
        if amount is None:
            amount = cfg.default_salary
        amount = max(amount, cfg.salary_floor)

        period = (
            SalaryPeriod.YEARLY
            if self.storage.get(cfg.period_key) == "true"
            else SalaryPeriod.MONTHLY
        )

        currency_code = self.storage.get(cfg.currency_key) or cfg.default_currency
        if not is_supported_currency(currency_code):
            logger.warning(
                "Stored currency %r is not supported, falling back to %s",
                currency_code,
                cfg.default_currency,
            )
            currency_code = cfg.default_currency

        return SalaryPreferences(amount=amount, period=period, currency_code=currency_code)

    def save(self, preferences: SalaryPreferences) -> None:
        """Сохранение настроек (вызывается только для валидного ввода)."""
        cfg = self.config
        self.storage.set(cfg.salary_key, _format_amount(preferences.amount))
        self.storage.set(
            cfg.period_key, "true" if preferences.period == SalaryPeriod.YEARLY else "false"
        )
        self.storage.set(cfg.currency_key, preferences.currency_code)

    def reset(self) -> SalaryPreferences:
        """Сброс к значениям по умолчанию; возвращает и сохраняет их."""
        preferences = self.defaults()
        self.save(preferences)
        logger.info("Preferences reset to defaults")
        return preferences
