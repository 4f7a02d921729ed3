import logging
import threading
from typing import Callable, Optional

from .constants import TICK_INTERVAL_SEC

logger = logging.getLogger(__name__)


class RepeatingTicker:
    """
    Cancellable fixed-interval callback on a background thread.

    Use as a context manager to guarantee the thread is stopped:

        with RepeatingTicker(engine.tick):
            ...

    Each start() gets its own stop event, so a thread still finishing a
    callback after stop() never resumes ticking alongside a restarted one.
    """
    def __init__(self, callback: Callable[[], None], interval_sec: float = TICK_INTERVAL_SEC):
        if interval_sec <= 0:
            raise ValueError("interval_sec must be positive")
        self.callback = callback
        self.interval_sec = interval_sec
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_active(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._stop.is_set()
        )

    def start(self):
        if self.is_active:
            return
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=(self._stop,), name="neoresus-ticker", daemon=True
        )
        self._thread.start()

    def stop(self):
        self._stop.set()
        thread = self._thread
        if thread and thread is not threading.current_thread():
            thread.join(timeout=max(1.0, 2 * self.interval_sec))
            if thread.is_alive():
                logger.warning("Ticker thread still inside a callback after stop; it will exit when it returns")
        self._thread = None

    def _loop(self, stop_event: threading.Event):
        # wait() returns True once stop is requested
        while not stop_event.wait(self.interval_sec):
            try:
                self.callback()
            except Exception:
                logger.exception("Tick callback failed; stopping ticker")
                stop_event.set()
                raise

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
