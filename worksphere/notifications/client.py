from __future__ import annotations

from typing import Any, Protocol

import requests

from worksphere.config import Settings

class NotificationsRemote(Protocol):
    def fetch_all(self, filters: dict[str, Any] | None = None) -> Any: ...
    def create(self, draft: dict[str, Any]) -> Any: ...
    def mark_read(self, notification_id: Any) -> Any: ...
    def mark_all_read(self) -> Any: ...
    def delete(self, notification_id: Any) -> Any: ...
    def get_stats(self) -> Any: ...

def _unwrap(r: requests.Response) -> Any:
    r.raise_for_status()
    if r.status_code == 204 or not r.content:
        return None
    body = r.json()
    # some endpoints wrap their payload as {"data": ...}
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body

class NotificationsApi:
    """requests-backed client for the remote /notifications endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        self.base = base_url.rstrip("/") + "/notifications"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("content-type", "application/json")
        if token:
            self.session.headers["authorization"] = f"bearer {token}"

    @classmethod
    def from_settings(cls, s: Settings) -> NotificationsApi:
        return cls(s.api_base_url, token=s.api_token, timeout=s.request_timeout_seconds)

    def fetch_all(self, filters: dict[str, Any] | None = None) -> Any:
        return _unwrap(self.session.get(self.base, params=filters or None, timeout=self.timeout))

    def create(self, draft: dict[str, Any]) -> Any:
        return _unwrap(self.session.post(self.base, json=draft, timeout=self.timeout))

    def mark_read(self, notification_id: Any) -> Any:
        return _unwrap(self.session.put(f"{self.base}/{notification_id}/read", timeout=self.timeout))

    def mark_all_read(self) -> Any:
        return _unwrap(self.session.put(f"{self.base}/mark-all-read", timeout=self.timeout))

    def delete(self, notification_id: Any) -> Any:
        return _unwrap(self.session.delete(f"{self.base}/{notification_id}", timeout=self.timeout))

    def get_stats(self) -> Any:
        return _unwrap(self.session.get(f"{self.base}/stats", timeout=self.timeout))

    # reachability check
    def ping(self) -> bool:
        try:
            r = self.session.get(f"{self.base}/stats", timeout=self.timeout)
            return r.status_code < 500
        except requests.RequestException:
            return False
