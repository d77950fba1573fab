"""Earnings Ticker — периодический пересчёт по настенным часам.

Фиксированный интервал (по умолчанию 1 секунда):
- Первый tick сразу после start()
- Далее по расписанию monotonic, без накопления дрейфа
- На каждый tick callback получает текущее время clock()

Освобождение ресурсов:
- start() возвращает TickHandle; cancel() останавливает задачу и дожидается
  завершения потока (идемпотентно)
- TickHandle является context manager: выход из with освобождает регистрацию tick

Исключение в callback логируется и не останавливает ticker.
"""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from src.core.math.numerical_safeguards import validate_positive

logger = logging.getLogger(__name__)

TickCallback = Callable[[datetime], None]


@dataclass(frozen=True)
class TickerConfig:
    """Конфигурация ticker."""

    interval_sec: float = 1.0
    # Таймаут ожидания потока при cancel()
    join_timeout_sec: float = 5.0
    thread_name: str = "earnings-ticker"


class TickHandle:
    """Handle запущенного ticker: отмена и диагностика."""

    def __init__(self, stop_event: threading.Event, join_timeout_sec: float):
        self._stop_event = stop_event
        self._join_timeout_sec = join_timeout_sec
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._tick_count = 0

    def _bind(self, thread: threading.Thread) -> None:
        self._thread = thread

    def _record_tick(self) -> None:
        with self._lock:
            self._tick_count += 1

    @property
    def cancelled(self) -> bool:
        return self._stop_event.is_set()

    @property
    def tick_count(self) -> int:
        with self._lock:
            return self._tick_count

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def cancel(self) -> None:
        """Остановка ticker и ожидание завершения потока.

        Повторный вызов ничего не делает. Вызов из самого callback не ждёт поток.
        """
        if self._stop_event.is_set() and not self.is_alive():
            return
        self._stop_event.set()
        thread = self._thread
        if thread is not None and threading.current_thread() is not thread:
            thread.join(self._join_timeout_sec)
            if thread.is_alive():
                logger.warning(
                    "Ticker thread %s did not stop within %.1fs",
                    thread.name,
                    self._join_timeout_sec,
                )
        logger.debug("Ticker cancelled after %d ticks", self.tick_count)

    def __enter__(self) -> "TickHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class EarningsTicker:
    """Планировщик периодического вызова callback(now).

    Не держит состояние расчёта: только расписание и handle отмены.
    """

    def __init__(
        self,
        callback: TickCallback,
        config: Optional[TickerConfig] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Args:
            callback: вызывается на каждый tick с текущим временем
            config: конфигурация интервала
            clock: источник времени (по умолчанию локальные часы хоста)

        Raises:
            ValueError: если interval_sec не положительный
        """
        self.config = config or TickerConfig()
        validate_positive(self.config.interval_sec, "interval_sec")
        self.callback = callback
        self.clock = clock

    def start(self) -> TickHandle:
        """Запуск ticker в daemon-потоке.

        Returns:
            TickHandle для отмены
        """
        stop_event = threading.Event()
        handle = TickHandle(stop_event, self.config.join_timeout_sec)
        thread = threading.Thread(
            target=self._run,
            args=(handle, stop_event),
            name=self.config.thread_name,
            daemon=True,
        )
        handle._bind(thread)
        thread.start()
        logger.debug("Ticker started: interval=%.3fs", self.config.interval_sec)
        return handle

    def _run(self, handle: TickHandle, stop_event: threading.Event) -> None:
        interval = self.config.interval_sec
        next_at = time.monotonic()
        while not stop_event.is_set():
            self._fire(handle)
            next_at += interval
            if stop_event.wait(max(0.0, next_at - time.monotonic())):
                break

    def _fire(self, handle: TickHandle) -> None:
        handle._record_tick()
        try:
            self.callback(self.clock())
        except Exception:
            logger.exception("Tick callback failed")
