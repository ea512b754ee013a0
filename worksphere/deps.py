from fastapi import Request

from worksphere.notifications.manager import NotificationManager
from worksphere.notifications.service import NotificationService

def get_service(request: Request) -> NotificationService:
    return request.app.state.service

def get_manager(request: Request) -> NotificationManager:
    return request.app.state.manager
