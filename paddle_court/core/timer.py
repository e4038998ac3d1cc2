"""
Threaded fixed-period timer
"""

import logging
import threading
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ThreadTimer:
    """Recurring timer running its callback on a daemon thread"""

    def __init__(self, callback: Callable[[], None], interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.callback = callback
        self.interval = interval
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="paddle-court-ticker", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        next_time = time.monotonic() + self.interval
        while not self._stopped.wait(max(0.0, next_time - time.monotonic())):
            try:
                self.callback()
            except Exception:
                logger.exception("Tick callback failed, stopping timer")
                self._stopped.set()
                break
            next_time += self.interval

    def cancel(self) -> None:
        self._stopped.set()

    @property
    def active(self) -> bool:
        return not self._stopped.is_set()

    def join(self, timeout: float | None = None) -> None:
        """Waits for the timer thread to finish (not from inside the callback)"""
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join(timeout)


class ThreadTicker:
    """Ticker creating one ThreadTimer per start() call"""

    def start(self, callback: Callable[[], None], interval: float) -> ThreadTimer:
        timer = ThreadTimer(callback, interval)
        timer.start()
        return timer
