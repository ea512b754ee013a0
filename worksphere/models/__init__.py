from worksphere.models.enums import AssignmentScope, NotificationPriority, NotificationType, Role
from worksphere.models.notification import Notification, NotificationDraft, NotificationStats
from worksphere.models.result import Result

__all__ = [
    "AssignmentScope",
    "Notification",
    "NotificationDraft",
    "NotificationPriority",
    "NotificationStats",
    "NotificationType",
    "Result",
    "Role",
]
