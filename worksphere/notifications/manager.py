from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from worksphere.models.notification import Notification
from worksphere.models.result import Result
from worksphere.notifications.scheduler import Job, Scheduler
from worksphere.notifications.service import NotificationService

logger = logging.getLogger(__name__)

Listener = Callable[[list[Notification]], None]

DEFAULT_POLL_INTERVAL = 30.0

class NotificationManager:
    """
    Keeps a cached copy of the current user's notifications in sync with the
    remote api by polling, and pushes every refreshed list to its listeners.

    A fetch failure leaves the cache untouched and polling carries on at the
    same interval.
    """

    def __init__(
        self,
        service: NotificationService,
        scheduler: Scheduler,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.service = service
        self.scheduler = scheduler
        self.poll_interval = poll_interval

        self._notifications: list[Notification] = []
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()
        self._job: Job | None = None
        # bumped on every start/stop so a poll from a stopped job is dropped
        self._generation = 0

    @property
    def notifications(self) -> list[Notification]:
        with self._lock:
            return self._notifications

    @property
    def is_polling(self) -> bool:
        return self._job is not None

    def start_real_time(self) -> None:
        if self._job is not None:
            return
        self._generation += 1
        generation = self._generation
        self._job = self.scheduler.call_every(self.poll_interval, lambda: self._poll(generation))
        logger.info("real-time notifications started (every %ss)", self.poll_interval)

    def stop_real_time(self) -> None:
        self._generation += 1
        job, self._job = self._job, None
        if job is not None:
            job.cancel()
            logger.info("real-time notifications stopped")

    def add_listener(self, callback: Listener) -> Callable[[], None]:
        with self._lock:
            if callback not in self._listeners:
                self._listeners.append(callback)

        def _remove() -> None:
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return _remove

    def refresh(self) -> Result[list[Notification]]:
        result = self.service.get_notifications()
        self._apply(result)
        return result

    def get_unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.read)

    def _poll(self, generation: int) -> None:
        result = self.service.get_notifications()
        if generation != self._generation:
            logger.debug("dropping poll result from a stopped job")
            return
        if not result.success:
            logger.warning("notification poll failed: %s", result.error)
        self._apply(result)

    def _apply(self, result: Result[list[Notification]]) -> None:
        if not result.success:
            return
        with self._lock:
            self._notifications = result.data
        self._notify_listeners()

    def _notify_listeners(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
            snapshot = self._notifications
        for cb in listeners:
            try:
                cb(snapshot)
            except Exception:
                logger.exception("notification listener failed")
