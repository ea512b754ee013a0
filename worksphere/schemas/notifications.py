from datetime import datetime
from typing import Any

from pydantic import BaseModel

from worksphere.models.notification import Notification
from worksphere.notifications.presentation import (
    format_time_ago,
    notification_color,
    notification_icon,
)

class NotificationOut(BaseModel):
    id: int | str
    type: str
    priority: str
    title: str
    message: str
    created_at: datetime | None
    read: bool
    action_url: str | None
    metadata: dict[str, Any]

    icon: str
    color: str
    time_ago: str | None

    @classmethod
    def from_notification(cls, n: Notification, now: datetime | None = None) -> "NotificationOut":
        return cls(
            **n.model_dump(),
            icon=notification_icon(n.type),
            color=notification_color(n.priority),
            time_ago=format_time_ago(n.created_at, now) if n.created_at else None,
        )

class NotificationListOut(BaseModel):
    items: list[NotificationOut]
    unread_count: int
    badge: str
    error: str | None = None

class UnreadCountOut(BaseModel):
    unread_count: int
    badge: str

class WelcomeIn(BaseModel):
    user_id: str
    organization_id: str
    organization_name: str

class NotifyOut(BaseModel):
    notified: bool
    notification: NotificationOut | None = None
    error: str | None = None
