"""Тесты EarningsTicker.

Coverage:
- Первый tick сразу после start
- Периодические ticks и время из clock
- Отмена: идемпотентность, context manager, остановка потока
- Исключения в callback
- Валидация интервала
"""

import threading
import time
from datetime import datetime

import pytest

from src.ticker import EarningsTicker, TickerConfig

FAST = TickerConfig(interval_sec=0.01)


def wait_for(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestEarningsTicker:
    """Тесты EarningsTicker."""

    def test_first_tick_immediate(self):
        """Первый tick не ждёт интервал."""
        fired = threading.Event()
        ticker = EarningsTicker(lambda now: fired.set(), TickerConfig(interval_sec=60.0))
        with ticker.start():
            assert fired.wait(2.0)

    def test_periodic_ticks_use_clock(self):
        """Callback получает время из clock."""
        stamp = datetime(2025, 4, 10, 12, 0, 0)
        seen = []
        handle = EarningsTicker(seen.append, FAST, clock=lambda: stamp).start()
        try:
            assert wait_for(lambda: len(seen) >= 3)
        finally:
            handle.cancel()
        assert set(seen) == {stamp}
        assert handle.tick_count >= 3

    def test_cancel_stops_thread(self):
        handle = EarningsTicker(lambda now: None, FAST).start()
        assert wait_for(lambda: handle.tick_count >= 1)
        handle.cancel()

        assert handle.cancelled
        assert not handle.is_alive()
        count = handle.tick_count
        time.sleep(0.05)
        assert handle.tick_count == count

    def test_cancel_idempotent(self):
        handle = EarningsTicker(lambda now: None, FAST).start()
        handle.cancel()
        handle.cancel()
        assert not handle.is_alive()

    def test_context_manager_releases_tick(self):
        with EarningsTicker(lambda now: None, FAST).start() as handle:
            assert handle.is_alive()
        assert handle.cancelled
        assert not handle.is_alive()

    def test_cancel_from_callback(self):
        """cancel() из самого callback не блокируется."""
        holder = {}
        stopped = threading.Event()

        def callback(now):
            holder["handle"].cancel()
            stopped.set()

        ticker = EarningsTicker(callback, FAST)
        holder["handle"] = ticker.start()
        assert stopped.wait(2.0)
        assert wait_for(lambda: not holder["handle"].is_alive())

    def test_callback_error_does_not_stop_ticker(self, caplog):
        calls = []

        def callback(now):
            calls.append(now)
            raise RuntimeError("render failed")

        with caplog.at_level("ERROR", logger="src.ticker.scheduler"):
            with EarningsTicker(callback, FAST).start():
                assert wait_for(lambda: len(calls) >= 2)

        assert "Tick callback failed" in caplog.text

    @pytest.mark.parametrize("interval", [0.0, -1.0, float("nan")])
    def test_invalid_interval(self, interval):
        with pytest.raises(ValueError, match="interval_sec"):
            EarningsTicker(lambda now: None, TickerConfig(interval_sec=interval))
