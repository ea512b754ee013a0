from datetime import datetime, timezone

from worksphere.models.enums import NotificationPriority

NOTIFICATION_ICONS: dict[str, str] = {
    "project": "folder-plus",
    "project_created": "folder-plus",
    "task_assigned": "user-check",
    "task_completed": "check-circle",
    "task_updated": "edit",
    "team_member_added": "user-plus",
    "welcome": "heart",
}
DEFAULT_ICON = "bell"

PRIORITY_COLORS: dict[str, str] = {
    NotificationPriority.high.value: "red",
    NotificationPriority.medium.value: "blue",
}
DEFAULT_COLOR = "gray"

def notification_icon(notification_type: str | None) -> str:
    return NOTIFICATION_ICONS.get(getattr(notification_type, "value", notification_type) or "", DEFAULT_ICON)

def notification_color(priority: str | None) -> str:
    return PRIORITY_COLORS.get(getattr(priority, "value", priority) or "", DEFAULT_COLOR)

def _as_utc(ts: datetime | str) -> datetime:
    if isinstance(ts, str):
        ts = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    if ts.tzinfo is None:
        # naive timestamps from the api are utc
        ts = ts.replace(tzinfo=timezone.utc)
    return ts

def format_time_ago(ts: datetime | str, now: datetime | None = None) -> str:
    now = _as_utc(now or datetime.now(timezone.utc))
    minutes = int((now - _as_utc(ts)).total_seconds() // 60)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if minutes < 1440:
        return f"{minutes // 60}h ago"
    return f"{minutes // 1440}d ago"

def badge_label(unread: int) -> str:
    if unread <= 0:
        return ""
    return "9+" if unread > 9 else str(unread)
