"""
State behind the notification bell: the list shown in the dropdown plus the
unread badge.

On ``mount()`` the feed does one full fetch, then keeps only the badge fresh
with a cheaper stats poll. Push events, when a channel is supplied, are
prepended straight away. ``unmount()`` tears all of that down and any
response that lands afterwards is dropped.
"""
from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import ValidationError

from worksphere.config import Settings
from worksphere.models.notification import Notification
from worksphere.notifications.presentation import badge_label
from worksphere.notifications.push import NOTIFICATION_EVENT, PushChannel, RedisPushChannel
from worksphere.notifications.scheduler import Job, Scheduler
from worksphere.notifications.service import NotificationService
from worksphere.redis_client import make_redis

logger = logging.getLogger(__name__)

DEFAULT_STATS_INTERVAL = 20.0

class NotificationFeed:
    def __init__(
        self,
        service: NotificationService,
        scheduler: Scheduler,
        push_channel: PushChannel | None = None,
        stats_interval: float = DEFAULT_STATS_INTERVAL,
    ):
        self.service = service
        self.scheduler = scheduler
        self.push_channel = push_channel
        self.stats_interval = stats_interval

        self.items: list[Notification] = []
        self.unread_count = 0
        self.loading = False

        self._lock = threading.Lock()
        self._stats_job: Job | None = None
        self._mounted = False

    @classmethod
    def from_settings(cls, s: Settings, service: NotificationService, scheduler: Scheduler) -> NotificationFeed:
        push = RedisPushChannel(make_redis(s), s.push_channel) if s.push_enabled else None
        return cls(service, scheduler, push_channel=push, stats_interval=s.stats_poll_interval_seconds)

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def badge(self) -> str:
        return badge_label(self.unread_count)

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True

        self.load()
        self._stats_job = self.scheduler.call_every(self.stats_interval, self._poll_stats)
        if self.push_channel is not None:
            self.push_channel.on(NOTIFICATION_EVENT, self._on_push)

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._mounted = False

        job, self._stats_job = self._stats_job, None
        if job is not None:
            job.cancel()
        if self.push_channel is not None:
            self.push_channel.off(NOTIFICATION_EVENT, self._on_push)

    def load(self) -> None:
        self.loading = True
        try:
            result = self.service.get_notifications()
        finally:
            self.loading = False
        if not self._mounted or not result.success:
            return
        with self._lock:
            self.items = result.data
            self.unread_count = sum(1 for n in result.data if not n.read)

    def mark_as_read(self, notification_id: Any) -> bool:
        result = self.service.mark_notification_as_read(notification_id)
        if not result.success or not self._mounted:
            return result.success
        with self._lock:
            self.items = [
                n.model_copy(update={"read": True}) if n.id == notification_id else n
                for n in self.items
            ]
            self.unread_count = max(0, self.unread_count - 1)
        return True

    def mark_all_as_read(self) -> bool:
        result = self.service.mark_all_notifications_as_read()
        if not result.success or not self._mounted:
            return result.success
        with self._lock:
            self.items = [n.model_copy(update={"read": True}) for n in self.items]
            self.unread_count = 0
        return True

    def delete(self, notification_id: Any) -> bool:
        result = self.service.delete_notification(notification_id)
        if not result.success or not self._mounted:
            return result.success
        with self._lock:
            removed = next((n for n in self.items if n.id == notification_id), None)
            self.items = [n for n in self.items if n.id != notification_id]
            if removed is not None and not removed.read:
                self.unread_count = max(0, self.unread_count - 1)
        return True

    def _poll_stats(self) -> None:
        result = self.service.get_notification_stats()
        if not self._mounted or not result.success:
            return
        with self._lock:
            self.unread_count = result.data.unread_notifications

    def _on_push(self, payload: Any) -> None:
        if not self._mounted:
            return
        try:
            n = Notification.model_validate(payload)
        except ValidationError:
            logger.warning("ignoring malformed notification push: %r", payload)
            return
        with self._lock:
            self.items = [n, *self.items]
            if not n.read:
                self.unread_count += 1
