"""Health check endpoints."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

from projecthub import __version__

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


@health_router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness."""
    return HealthResponse(status="healthy", service="projecthub", version=__version__)


@health_router.get("/ready")
async def readiness_check(request: Request) -> dict:
    """Readiness: the repository answers a count query."""
    context = request.app.state.context
    try:
        await context.repository.count_users()
    except Exception as exc:
        context.logger.warn("Readiness check failed", {"error": str(exc)})
        return {"status": "not_ready", "error": str(exc)}
    return {"status": "ready"}


@health_router.get("/live")
async def liveness_check() -> dict:
    """Liveness endpoint."""
    return {"status": "alive"}
