from typing import Any

import pytest
from fastapi.testclient import TestClient

from worksphere.config import Settings
from worksphere.main import create_app
from worksphere.notifications.manager import NotificationManager
from worksphere.notifications.service import NotificationService

class FakeRemote:
    """In-memory stand-in for the notifications api."""

    def __init__(self, items: list[dict] | None = None):
        self.items: list[dict] = list(items or [])
        self.created: list[dict] = []
        self.calls: dict[str, int] = {}
        self.fail: set[str] = set()
        self.next_id = 100

    def _call(self, op: str) -> None:
        self.calls[op] = self.calls.get(op, 0) + 1
        if op in self.fail:
            raise RuntimeError(f"{op} failed")

    def fetch_all(self, filters: dict[str, Any] | None = None) -> list[dict]:
        self._call("fetch_all")
        limit = (filters or {}).get("limit")
        return list(self.items[:limit] if limit else self.items)

    def create(self, draft: dict[str, Any]) -> dict:
        self._call("create")
        self.created.append(draft)
        self.next_id += 1
        n = {"id": self.next_id, "read": False, **draft}
        self.items.insert(0, n)
        return n

    def mark_read(self, notification_id: Any) -> dict | None:
        self._call("mark_read")
        for n in self.items:
            if str(n["id"]) == str(notification_id):
                n["read"] = True
                return n
        return None

    def mark_all_read(self) -> None:
        self._call("mark_all_read")
        for n in self.items:
            n["read"] = True

    def delete(self, notification_id: Any) -> None:
        self._call("delete")
        self.items = [n for n in self.items if str(n["id"]) != str(notification_id)]

    def get_stats(self) -> dict:
        self._call("get_stats")
        return {"unread_notifications": sum(1 for n in self.items if not n.get("read"))}

class FakeJob:
    def __init__(self, interval: float, fn, start: float):
        self.interval = interval
        self.fn = fn
        self.next_at = start + interval
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

class FakeScheduler:
    """Deterministic clock: jobs only run when advance() moves time past them."""

    def __init__(self):
        self.now = 0.0
        self.jobs: list[FakeJob] = []

    def call_every(self, interval: float, fn) -> FakeJob:
        job = FakeJob(interval, fn, self.now)
        self.jobs.append(job)
        return job

    @property
    def active(self) -> list[FakeJob]:
        return [j for j in self.jobs if not j.cancelled]

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [j for j in self.active if j.next_at <= target]
            if not due:
                break
            job = min(due, key=lambda j: j.next_at)
            self.now = job.next_at
            job.next_at += job.interval
            job.fn()
        self.now = target

class FakePush:
    def __init__(self):
        self.handlers: dict[str, list] = {}

    def on(self, event: str, handler) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler) -> None:
        self.handlers.get(event, []).remove(handler)

    def emit(self, event: str, payload) -> None:
        for h in list(self.handlers.get(event, [])):
            h(payload)

@pytest.fixture()
def remote() -> FakeRemote:
    return FakeRemote(
        [
            {"id": 1, "type": "task_assigned", "title": "Task Assigned", "read": False},
            {"id": 2, "type": "welcome", "title": "Welcome", "read": True},
        ]
    )

@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()

@pytest.fixture()
def push() -> FakePush:
    return FakePush()

@pytest.fixture()
def service(remote) -> NotificationService:
    return NotificationService(remote)

@pytest.fixture()
def manager(service, scheduler) -> NotificationManager:
    return NotificationManager(service, scheduler)

@pytest.fixture()
def client(remote, scheduler) -> TestClient:
    app = create_app(Settings(realtime_enabled=False, push_enabled=False), remote=remote, scheduler=scheduler)
    return TestClient(app)