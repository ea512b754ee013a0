from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from worksphere.redis_client import redis_ping

router = APIRouter(tags=["health"])

@router.get("/health")
def health() -> dict:
    return {"status": "ok"}

# readiness probe
@router.get("/ready")
def ready(request: Request):
    state = request.app.state
    probes = []
    if hasattr(state.remote, "ping"):
        probes.append(("notifications_api", state.remote.ping))
    if state.redis is not None:
        probes.append(("redis", lambda: redis_ping(state.redis)))

    checks: dict[str, bool] = {}
    errors: dict[str, str] = {}

    for name, fn in probes:
        try:
            checks[name] = bool(fn())
        except Exception as e:
            checks[name] = False
            msg = str(e).strip()
            errors[name] = f"{e.__class__.__name__}{(': ' + msg) if msg else ''}"

    ok = all(checks.values())

    body: dict = {"status": "ok" if ok else "unready", "checks": checks}
    if errors:
        body["errors"] = errors

    # 200 only when every dependency is reachable, 503 with details otherwise
    return JSONResponse(status_code=200 if ok else 503, content=body)
