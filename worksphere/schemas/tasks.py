from pydantic import BaseModel

from worksphere.models.enums import Role
from worksphere.schemas.notifications import NotifyOut

class TaskAssignIn(BaseModel):
    assignee_id: str
    title: str
    assignee_role: Role | None = None
    project_id: str | None = None
    project_member_ids: list[str] | None = None

class TaskAssignOut(BaseModel):
    task_id: str
    assignee_id: str
    assigned_by: str
    notify: NotifyOut
