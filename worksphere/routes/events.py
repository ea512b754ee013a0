from fastapi import APIRouter, Depends

from worksphere.deps import get_service
from worksphere.notifications.service import NotificationService
from worksphere.rbac.deps import CallerContext, require_capability
from worksphere.routes.notifications import notify_out
from worksphere.schemas.events import ProjectCreatedIn, TaskEventIn, TeamMemberAddedIn
from worksphere.schemas.notifications import NotifyOut

# domain events reported by the front end after a successful mutation
router = APIRouter(prefix="/events", tags=["events"])

@router.post("/project-created", response_model=NotifyOut)
def project_created(
    payload: ProjectCreatedIn,
    caller: CallerContext = Depends(require_capability("can_manage_projects")),
    service: NotificationService = Depends(get_service),
) -> NotifyOut:
    return notify_out(service.notify_project_created(payload.project.model_dump(), caller.user_id))

@router.post("/task-completed", response_model=NotifyOut)
def task_completed(
    payload: TaskEventIn,
    caller: CallerContext = Depends(require_capability("can_edit_own_tasks")),
    service: NotificationService = Depends(get_service),
) -> NotifyOut:
    return notify_out(service.notify_task_completed(payload.task.model_dump(), payload.project_owner_id))

@router.post("/task-updated", response_model=NotifyOut)
def task_updated(
    payload: TaskEventIn,
    caller: CallerContext = Depends(require_capability("can_edit_own_tasks")),
    service: NotificationService = Depends(get_service),
) -> NotifyOut:
    return notify_out(service.notify_task_updated(payload.task.model_dump(), payload.project_owner_id))

@router.post("/team-member-added", response_model=NotifyOut)
def team_member_added(
    payload: TeamMemberAddedIn,
    caller: CallerContext = Depends(require_capability("can_manage_members")),
    service: NotificationService = Depends(get_service),
) -> NotifyOut:
    return notify_out(
        service.notify_team_member_added(payload.member.model_dump(), payload.project_id, payload.project_owner_id)
    )
