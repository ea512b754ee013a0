from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

class Job(Protocol):
    def cancel(self) -> None: ...

class Scheduler(Protocol):
    def call_every(self, interval: float, fn: Callable[[], None]) -> Job: ...

class _ThreadJob:
    def __init__(self, interval: float, fn: Callable[[], None], name: str):
        self._interval = interval
        self._fn = fn
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        # first tick fires after one full interval, like setInterval
        while not self._stopped.wait(self._interval):
            try:
                self._fn()
            except Exception:
                logger.exception("scheduled job %s failed", self._thread.name)

    def cancel(self, timeout: float = 1.0) -> None:
        self._stopped.set()
        # a job may cancel itself from inside its own tick
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout)

class ThreadScheduler:
    """Runs each repeating job on its own daemon thread."""

    def call_every(self, interval: float, fn: Callable[[], None]) -> _ThreadJob:
        job = _ThreadJob(interval, fn, name=f"every-{interval:g}s-{getattr(fn, '__name__', 'job')}")
        job.start()
        return job
