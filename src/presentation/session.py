"""EarningsSession — headless view model калькулятора заработка.

Связывает коллабораторов вокруг EarningsProjector:
- PreferencesStore: начальный ввод и сохранение валидного ввода
- SalaryInputGate: проверка границ на каждое изменение ввода
- EarningsProjector: пересчёт метрик на каждый refresh(now)
- Formatting / Export: строки отображения и CSV
- EarningsTicker: пересчёт раз в секунду с handle отмены

Состояние ввода передаётся в projector явно на каждом tick; сам projector
состояния не хранит. Пока ввод невалиден, метрики не отображаются
и не экспортируются, а настройки не сохраняются.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from src.core.domain.currency import get_currency_profile
from src.core.domain.earnings import EarningsBreakdown
from src.core.domain.salary import SalaryPeriod
from src.gatekeeper.salary_gate import SalaryGateResult, SalaryInputGate, parse_amount
from src.presentation.export import DEFAULT_EXPORT_FILENAME, breakdown_to_csv, write_breakdown_csv
from src.presentation.formatting import DisplayRow, render_breakdown
from src.presentation.preferences import PreferencesStore, SalaryPreferences
from src.projector.engine import EarningsProjector
from src.ticker.scheduler import EarningsTicker, TickerConfig, TickHandle

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[Optional[EarningsBreakdown]], None]


class EarningsSession:
    """Состояние одного экрана калькулятора."""

    def __init__(
        self,
        store: Optional[PreferencesStore] = None,
        projector: Optional[EarningsProjector] = None,
        gate: Optional[SalaryInputGate] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store or PreferencesStore()
        self.projector = projector or EarningsProjector()
        self.gate = gate or SalaryInputGate()
        self.clock = clock

        self._lock = threading.RLock()
        self._last_breakdown: Optional[EarningsBreakdown] = None
        self._gate_result: Optional[SalaryGateResult] = None

        self._apply(self.store.load())

    # =========================================================================
    # INPUT
    # =========================================================================

    def _apply(self, preferences: SalaryPreferences) -> None:
        with self._lock:
            self.amount = preferences.amount
            self.period = preferences.period
            self.currency_code = preferences.currency_code
            self._evaluate()

    def _evaluate(self) -> None:
        result = self.gate.evaluate(self.amount, self.period, self.currency_code)
        self._gate_result = result
        if result.accepted:
            self.store.save(
                SalaryPreferences(
                    amount=self.amount,
                    period=self.period,
                    currency_code=self.currency_code,
                )
            )

    def set_salary_text(self, raw: str) -> SalaryGateResult:
        """Ввод суммы из текстового поля (|число| или 0)."""
        return self.set_amount(parse_amount(raw))

    def set_amount(self, amount: float) -> SalaryGateResult:
        with self._lock:
            self.amount = amount
            self._evaluate()
            return self._gate_result

    def set_period(self, period: SalaryPeriod) -> SalaryGateResult:
        with self._lock:
            self.period = SalaryPeriod(period)
            self._evaluate()
            return self._gate_result

    def set_currency(self, currency_code: str) -> SalaryGateResult:
        """Смена валюты; сумма перепроверяется по новым границам.

        Raises:
            UnknownCurrencyError: если код валюты не поддерживается
        """
        get_currency_profile(currency_code)
        with self._lock:
            self.currency_code = currency_code
            self._evaluate()
            return self._gate_result

    def set_input(
        self,
        amount: Optional[float] = None,
        period: Optional[SalaryPeriod] = None,
        currency_code: Optional[str] = None,
    ) -> SalaryGateResult:
        """Одновременная смена нескольких полей ввода.

        Проверяется и сохраняется только итоговая комбинация; None оставляет
        поле без изменений.

        Raises:
            UnknownCurrencyError: если код валюты не поддерживается
        """
        if currency_code is not None:
            get_currency_profile(currency_code)
        with self._lock:
            if amount is not None:
                self.amount = amount
            if period is not None:
                self.period = SalaryPeriod(period)
            if currency_code is not None:
                self.currency_code = currency_code
            self._evaluate()
            return self._gate_result

    def reset(self) -> SalaryGateResult:
        """Сброс ввода к значениям по умолчанию."""
        self._apply(self.store.reset())
        return self._gate_result

    @property
    def gate_result(self) -> SalaryGateResult:
        return self._gate_result

    @property
    def error(self) -> Optional[str]:
        """Сообщение о нарушенной границе или None."""
        result = self._gate_result
        return None if result.accepted else result.message

    @property
    def last_breakdown(self) -> Optional[EarningsBreakdown]:
        return self._last_breakdown

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def refresh(self, now: Optional[datetime] = None) -> Optional[EarningsBreakdown]:
        """Пересчёт метрик на момент now.

        Returns:
            EarningsBreakdown или None, пока ввод невалиден
            (последний валидный результат остаётся в last_breakdown)
        """
        with self._lock:
            result = self._gate_result
            if not result.accepted:
                return None
            breakdown = self.projector.project(result.salary_input, now or self.clock())
            self._last_breakdown = breakdown
            return breakdown

    def rows(self, now: Optional[datetime] = None) -> list[DisplayRow]:
        """Строки отображения; пустой список, пока ввод невалиден."""
        breakdown = self.refresh(now)
        if breakdown is None:
            return []
        return render_breakdown(breakdown, self.currency_code)

    def _exportable(self) -> EarningsBreakdown:
        # Метрики текущего ввода на момент clock(), не last_breakdown
        with self._lock:
            if not self._gate_result.accepted:
                raise RuntimeError(
                    f"Cannot export while salary input is invalid: {self._gate_result.message}"
                )
            return self.refresh()

    def export_csv(self) -> str:
        """CSV текущих метрик.

        Raises:
            RuntimeError: если ввод невалиден
        """
        return breakdown_to_csv(self._exportable())

    def export_to_file(self, path: str | Path = DEFAULT_EXPORT_FILENAME) -> Path:
        """Запись CSV текущих метрик в файл.

        Raises:
            RuntimeError: если ввод невалиден
        """
        return write_breakdown_csv(self._exportable(), path)

    # =========================================================================
    # TICKING
    # =========================================================================

    def start_ticking(
        self,
        on_update: Optional[UpdateCallback] = None,
        config: Optional[TickerConfig] = None,
    ) -> TickHandle:
        """Пересчёт раз в интервал; вызывающая сторона обязана cancel() handle."""

        def _tick(now: datetime) -> None:
            breakdown = self.refresh(now)
            if on_update is not None:
                on_update(breakdown)

        return EarningsTicker(_tick, config=config, clock=self.clock).start()
