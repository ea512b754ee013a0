from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from worksphere.models.enums import NotificationPriority, NotificationType

class Notification(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int | str
    # kept as plain strings so unknown values from the server don't fail a whole fetch
    type: str = NotificationType.generic.value
    priority: str = NotificationPriority.medium.value
    title: str = ""
    message: str = ""
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    read: bool = False
    action_url: str | None = Field(
        default=None, validation_alias=AliasChoices("action_url", "actionUrl")
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("metadata", "notification_metadata"),
    )

class NotificationDraft(BaseModel):
    user_id: int | str
    title: str
    message: str
    type: NotificationType = NotificationType.generic
    priority: NotificationPriority = NotificationPriority.medium
    action_url: str | None = None
    organization_id: int | str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

class NotificationStats(BaseModel):
    model_config = ConfigDict(extra="ignore")

    unread_notifications: int = 0
    total_notifications: int | None = None
