from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable
from typing import Any, Protocol

import redis

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]

NOTIFICATION_EVENT = "notification"

class PushChannel(Protocol):
    def on(self, event: str, handler: Handler) -> None: ...
    def off(self, event: str, handler: Handler) -> None: ...

class RedisPushChannel:
    """
    Server-originated events over redis pub/sub.

    Messages are JSON, either ``{"event": "...", "data": {...}}`` or a bare
    notification object (treated as a ``notification`` event). The listener
    thread runs only while at least one handler is attached.
    """

    def __init__(self, client: redis.Redis, channel: str):
        self.client = client
        self.channel = channel
        self._handlers: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()
        self._pubsub = None
        self._thread = None

    def on(self, event: str, handler: Handler) -> None:
        with self._lock:
            self._handlers.setdefault(event, []).append(handler)
            if self._thread is None:
                self._pubsub = self.client.pubsub(ignore_subscribe_messages=True)
                self._pubsub.subscribe(**{self.channel: self._on_message})
                self._thread = self._pubsub.run_in_thread(sleep_time=0.5, daemon=True)
                logger.info("subscribed to push channel %s", self.channel)

    def off(self, event: str, handler: Handler) -> None:
        with self._lock:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)
            if not handlers:
                self._handlers.pop(event, None)
            if not self._handlers and self._thread is not None:
                # the worker closes the pubsub itself on its way out
                self._thread.stop()
                self._thread.join(timeout=2.0)
                self._thread = None
                self._pubsub = None
                logger.info("unsubscribed from push channel %s", self.channel)

    def _on_message(self, message: dict) -> None:
        try:
            payload = json.loads(message["data"])
        except (KeyError, TypeError, ValueError):
            logger.warning("dropping malformed push message on %s", self.channel)
            return

        if isinstance(payload, dict) and "event" in payload:
            event, data = payload["event"], payload.get("data")
        else:
            event, data = NOTIFICATION_EVENT, payload

        self.dispatch(event, data)

    def dispatch(self, event: str, data: Any) -> None:
        with self._lock:
            handlers = list(self._handlers.get(event, []))
        for h in handlers:
            try:
                h(data)
            except Exception:
                logger.exception("push handler failed for %s", event)
