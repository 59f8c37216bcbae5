"""Project and task endpoints.

Every endpoint returns the action-result envelope; failures use the status
of their error kind.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from projecthub.core.exceptions import ActionResult
from projecthub.providers import AppContext

router = APIRouter()


def get_context(request: Request) -> AppContext:
    """Dependency to get the application context from app state."""
    return request.app.state.context


async def enforce_rate_limit(request: Request, context: AppContext = Depends(get_context)) -> None:
    """Count the request against the caller's window; raises RateLimitError."""
    key = request.client.host if request.client else "anonymous"
    context.rate_limiter.hit(key)


def to_response(result: ActionResult, success_status: int = 200) -> JSONResponse:
    status = success_status if result.success else result.status
    return JSONResponse(status_code=status, content=result.to_dict())


@router.get("/users/{user_id}/projects")
async def list_projects(user_id: str, context: AppContext = Depends(get_context)) -> JSONResponse:
    """List projects of a user."""
    result = await context.actions.list_projects({"user_id": user_id})
    return to_response(result)


@router.get("/users/{user_id}/dashboard")
async def dashboard(user_id: str, context: AppContext = Depends(get_context)) -> JSONResponse:
    """Project and task counts for the dashboard."""
    result = await context.actions.dashboard_summary({"user_id": user_id})
    return to_response(result)


@router.post("/projects", dependencies=[Depends(enforce_rate_limit)])
async def create_project(
    payload: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> JSONResponse:
    """Create a project."""
    result = await context.actions.create_project(payload)
    return to_response(result, success_status=201)


@router.get("/projects/{project_id}/tasks")
async def list_tasks(project_id: str, context: AppContext = Depends(get_context)) -> JSONResponse:
    """List tasks of a project."""
    result = await context.actions.list_tasks({"project_id": project_id})
    return to_response(result)


@router.post("/projects/{project_id}/tasks", dependencies=[Depends(enforce_rate_limit)])
async def create_task(
    project_id: str,
    payload: Dict[str, Any] = Body(...),
    context: AppContext = Depends(get_context),
) -> JSONResponse:
    """Create a task inside a project."""
    result = await context.actions.create_task({**payload, "project_id": project_id})
    return to_response(result, success_status=201)
