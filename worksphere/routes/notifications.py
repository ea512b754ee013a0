from fastapi import APIRouter, Depends, HTTPException

from worksphere.deps import get_manager, get_service
from worksphere.models.result import Result
from worksphere.notifications.manager import NotificationManager
from worksphere.notifications.presentation import badge_label
from worksphere.notifications.service import NotificationService
from worksphere.rbac.deps import CallerContext, get_caller
from worksphere.rbac.perms import has_capability
from worksphere.schemas.notifications import (
    NotificationListOut,
    NotificationOut,
    NotifyOut,
    UnreadCountOut,
    WelcomeIn,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

def notify_out(result: Result) -> NotifyOut:
    if not result.success:
        return NotifyOut(notified=False, error=result.error)
    n = result.data
    return NotifyOut(notified=True, notification=NotificationOut.from_notification(n) if n else None)

def _raise_if_failed(result: Result) -> None:
    if not result.success:
        raise HTTPException(status_code=502, detail=f"notifications api: {result.error}")

@router.get("", response_model=NotificationListOut)
def list_notifications(
    refresh: bool = False,
    manager: NotificationManager = Depends(get_manager),
) -> NotificationListOut:
    error = None
    if refresh:
        # on failure the last good cache is served alongside the error
        error = manager.refresh().error

    unread = manager.get_unread_count()
    return NotificationListOut(
        items=[NotificationOut.from_notification(n) for n in manager.notifications],
        unread_count=unread,
        badge=badge_label(unread),
        error=error,
    )

@router.get("/unread-count", response_model=UnreadCountOut)
def unread_count(manager: NotificationManager = Depends(get_manager)) -> UnreadCountOut:
    unread = manager.get_unread_count()
    return UnreadCountOut(unread_count=unread, badge=badge_label(unread))

@router.post("/read-all")
def read_all(
    caller: CallerContext = Depends(get_caller),
    service: NotificationService = Depends(get_service),
    manager: NotificationManager = Depends(get_manager),
) -> dict:
    _raise_if_failed(service.mark_all_notifications_as_read())
    manager.refresh()
    return {"read_all": True}

@router.post("/welcome", response_model=NotifyOut)
def welcome(
    payload: WelcomeIn,
    caller: CallerContext = Depends(get_caller),
    service: NotificationService = Depends(get_service),
) -> NotifyOut:
    # welcoming someone else is a member-management action
    if payload.user_id != caller.user_id and not has_capability(caller.role, "can_manage_members"):
        raise HTTPException(status_code=403, detail="forbidden")
    return notify_out(
        service.create_welcome_notification(payload.user_id, payload.organization_id, payload.organization_name)
    )

@router.post("/{notification_id}/read", response_model=NotifyOut)
def mark_read(
    notification_id: str,
    caller: CallerContext = Depends(get_caller),
    service: NotificationService = Depends(get_service),
    manager: NotificationManager = Depends(get_manager),
) -> NotifyOut:
    result = service.mark_notification_as_read(notification_id)
    _raise_if_failed(result)
    manager.refresh()
    return notify_out(result)

@router.delete("/{notification_id}")
def delete_notification(
    notification_id: str,
    caller: CallerContext = Depends(get_caller),
    service: NotificationService = Depends(get_service),
    manager: NotificationManager = Depends(get_manager),
) -> dict:
    _raise_if_failed(service.delete_notification(notification_id))
    manager.refresh()
    return {"deleted": True}
