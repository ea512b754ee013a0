import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from worksphere.config import Settings, settings as default_settings
from worksphere.log import configure_logging
from worksphere.notifications.client import NotificationsApi, NotificationsRemote
from worksphere.notifications.manager import NotificationManager
from worksphere.notifications.scheduler import Scheduler, ThreadScheduler
from worksphere.notifications.service import NotificationService
from worksphere.redis_client import make_redis
from worksphere.routes.events import router as events_router
from worksphere.routes.health import router as health_router
from worksphere.routes.notifications import router as notifications_router
from worksphere.routes.permissions import router as permissions_router
from worksphere.routes.tasks import router as tasks_router

logger = logging.getLogger(__name__)

def create_app(
    settings: Settings | None = None,
    *,
    remote: NotificationsRemote | None = None,
    scheduler: Scheduler | None = None,
) -> FastAPI:
    s = settings or default_settings
    configure_logging(s.log_level)

    remote = remote or NotificationsApi.from_settings(s)
    service = NotificationService(remote)
    manager = NotificationManager(service, scheduler or ThreadScheduler(), poll_interval=s.poll_interval_seconds)

    redis_conn = make_redis(s) if s.push_enabled else None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if s.realtime_enabled:
            manager.start_real_time()
        try:
            yield
        finally:
            manager.stop_real_time()

    app = FastAPI(title="worksphere", version="0.1.0", lifespan=lifespan)
    app.state.settings = s
    app.state.remote = remote
    app.state.service = service
    app.state.manager = manager
    app.state.redis = redis_conn

    app.include_router(health_router)
    app.include_router(permissions_router)
    app.include_router(notifications_router)
    app.include_router(tasks_router)
    app.include_router(events_router)
    logger.info("worksphere app created (env=%s)", s.app_env)
    return app

app = create_app()
