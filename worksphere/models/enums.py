from enum import Enum

class Role(str, Enum):
    viewer = "viewer"
    member = "member"
    admin = "admin"
    owner = "owner"

class AssignmentScope(str, Enum):
    self_ = "self"
    project = "project"
    organization = "organization"

class NotificationType(str, Enum):
    project = "project"
    project_created = "project_created"
    task_assigned = "task_assigned"
    task_completed = "task_completed"
    task_updated = "task_updated"
    team_member_added = "team_member_added"
    welcome = "welcome"
    generic = "generic"

class NotificationPriority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"
