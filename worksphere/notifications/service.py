"""
Fail-soft wrapper around the remote notifications api.

Every public method returns a ``Result``; errors from the remote side are
logged and captured on the result, never raised to the caller.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from worksphere.models.enums import NotificationPriority, NotificationType
from worksphere.models.notification import Notification, NotificationDraft, NotificationStats
from worksphere.models.result import Result
from worksphere.notifications.client import NotificationsRemote

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES: dict[str, bool] = {
    "email": True,
    "browser": True,
    "mobile": False,
    "desktop": True,
}

def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)

def _one(raw: Any) -> Notification | None:
    if raw is None:
        return None
    return Notification.model_validate(raw)

class NotificationService:
    def __init__(self, remote: NotificationsRemote):
        self.remote = remote
        self._preferences = dict(DEFAULT_PREFERENCES)

    def get_notifications(self, filters: dict[str, Any] | None = None) -> Result[list[Notification]]:
        try:
            raw = self.remote.fetch_all(filters or {})
            items = [Notification.model_validate(x) for x in (raw or [])]
        except Exception as e:
            logger.warning("failed to fetch notifications: %s", e)
            return Result.fail(e, data=[])
        return Result.ok(items)

    def create_notification(self, draft: NotificationDraft | Mapping[str, Any]) -> Result[Notification | None]:
        try:
            if not isinstance(draft, NotificationDraft):
                draft = NotificationDraft.model_validate(draft)
            created = self.remote.create(draft.model_dump(mode="json", exclude_none=True))
            return Result.ok(_one(created))
        except Exception as e:
            logger.warning("failed to create notification: %s", e)
            return Result.fail(e)

    def mark_notification_as_read(self, notification_id: Any) -> Result[Notification | None]:
        try:
            return Result.ok(_one(self.remote.mark_read(notification_id)))
        except Exception as e:
            logger.warning("failed to mark notification %s as read: %s", notification_id, e)
            return Result.fail(e)

    def mark_all_notifications_as_read(self) -> Result[Any]:
        try:
            return Result.ok(self.remote.mark_all_read())
        except Exception as e:
            logger.warning("failed to mark all notifications as read: %s", e)
            return Result.fail(e)

    def delete_notification(self, notification_id: Any) -> Result[Any]:
        try:
            return Result.ok(self.remote.delete(notification_id))
        except Exception as e:
            logger.warning("failed to delete notification %s: %s", notification_id, e)
            return Result.fail(e)

    def get_notification_stats(self) -> Result[NotificationStats | None]:
        try:
            return Result.ok(NotificationStats.model_validate(self.remote.get_stats() or {}))
        except Exception as e:
            logger.warning("failed to get notification stats: %s", e)
            return Result.fail(e)

    def check_first_time_user(self) -> bool:
        result = self.get_notifications({"limit": 1})
        if not result.success:
            return False
        return len(result.data) == 0

    # preferences have no backend endpoint yet; held per service instance
    def get_notification_preferences(self) -> Result[dict[str, bool]]:
        return Result.ok(dict(self._preferences))

    def update_notification_preferences(self, preferences: Mapping[str, Any]) -> Result[dict[str, bool]]:
        for k, v in preferences.items():
            if k in DEFAULT_PREFERENCES:
                self._preferences[k] = bool(v)
        return Result.ok(dict(self._preferences))

    def create_welcome_notification(
        self, user_id: Any, organization_id: Any, organization_name: str
    ) -> Result[Notification | None]:
        return self.create_notification(
            NotificationDraft(
                user_id=user_id,
                organization_id=organization_id,
                title="Welcome to Agno WorkSphere!",
                message=(
                    f"Welcome to {organization_name}! Start by exploring your dashboard "
                    "and setting up your first project."
                ),
                type=NotificationType.welcome,
                priority=NotificationPriority.high,
                action_url="/role-based-dashboard",
                metadata={"isWelcome": True},
            )
        )

    def notify_project_created(self, project: Any, creator_id: Any) -> Result[Notification | None]:
        pid = _field(project, "id")
        return self.create_notification(
            NotificationDraft(
                user_id=creator_id,
                title="Project Created",
                message=f'Your project "{_field(project, "name")}" has been created successfully.',
                type=NotificationType.project_created,
                priority=NotificationPriority.medium,
                action_url=f"/projects/{pid}",
                metadata={"projectId": pid},
            )
        )

    def notify_task_assigned(self, task: Any, assignee_id: Any, assigner_id: Any) -> Result[Notification | None]:
        tid = _field(task, "id")
        return self.create_notification(
            NotificationDraft(
                user_id=assignee_id,
                title="Task Assigned",
                message=f'You have been assigned a new task: "{_field(task, "title")}".',
                type=NotificationType.task_assigned,
                priority=NotificationPriority.high,
                action_url=f"/tasks/{tid}",
                metadata={"taskId": tid, "assignerId": assigner_id},
            )
        )

    def notify_task_completed(self, task: Any, project_owner_id: Any) -> Result[Notification | None]:
        tid = _field(task, "id")
        return self.create_notification(
            NotificationDraft(
                user_id=project_owner_id,
                title="Task Completed",
                message=f'Task "{_field(task, "title")}" has been completed.',
                type=NotificationType.task_completed,
                priority=NotificationPriority.medium,
                action_url=f"/tasks/{tid}",
                metadata={"taskId": tid},
            )
        )

    def notify_task_updated(self, task: Any, project_owner_id: Any) -> Result[Notification | None]:
        tid = _field(task, "id")
        return self.create_notification(
            NotificationDraft(
                user_id=project_owner_id,
                title="Task Updated",
                message=f'Task "{_field(task, "title")}" has been updated.',
                type=NotificationType.task_updated,
                priority=NotificationPriority.low,
                action_url=f"/tasks/{tid}",
                metadata={"taskId": tid},
            )
        )

    def notify_team_member_added(
        self, member: Any, project_id: Any, project_owner_id: Any
    ) -> Result[Notification | None]:
        return self.create_notification(
            NotificationDraft(
                user_id=project_owner_id,
                title="Team Member Added",
                message=f"{_field(member, 'name')} has been added to your project.",
                type=NotificationType.team_member_added,
                priority=NotificationPriority.medium,
                action_url=f"/projects/{project_id}/members",
                metadata={"projectId": project_id, "memberId": _field(member, "id")},
            )
        )
