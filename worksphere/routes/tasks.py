from fastapi import APIRouter, Depends, HTTPException

from worksphere.deps import get_service
from worksphere.notifications.service import NotificationService
from worksphere.rbac.deps import CallerContext, get_caller
from worksphere.rbac.perms import (
    ProjectContext,
    can_assign_task_to_user,
    can_receive_task_assignments,
    get_assignment_restriction_message,
)
from worksphere.routes.notifications import notify_out
from worksphere.schemas.tasks import TaskAssignIn, TaskAssignOut

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.post("/{task_id}/assign", response_model=TaskAssignOut)
def assign_task(
    task_id: str,
    payload: TaskAssignIn,
    caller: CallerContext = Depends(get_caller),
    service: NotificationService = Depends(get_service),
) -> TaskAssignOut:
    if payload.assignee_role is not None and not can_receive_task_assignments(payload.assignee_role):
        raise HTTPException(status_code=422, detail="assignee cannot receive task assignments")

    ctx = None
    if payload.project_member_ids is not None:
        ctx = ProjectContext(project_id=payload.project_id, member_ids=frozenset(payload.project_member_ids))

    if not can_assign_task_to_user(caller.role, caller.user_id, payload.assignee_id, ctx):
        raise HTTPException(status_code=403, detail=get_assignment_restriction_message(caller.role))

    result = service.notify_task_assigned(
        {"id": task_id, "title": payload.title},
        payload.assignee_id,
        caller.user_id,
    )
    return TaskAssignOut(
        task_id=task_id,
        assignee_id=payload.assignee_id,
        assigned_by=caller.user_id,
        notify=notify_out(result),
    )
