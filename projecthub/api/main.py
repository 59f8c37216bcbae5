#!/usr/bin/env python3
"""ProjectHub API - FastAPI service exposing projects and tasks."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from projecthub import __version__
from projecthub.api.health import health_router
from projecthub.api.routes import router
from projecthub.core.exceptions import AppError, to_action_error
from projecthub.providers import AppContext

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render taxonomy failures raised outside an action (e.g. rate limiting)."""
    return JSONResponse(status_code=exc.status, content=to_action_error(exc).to_dict())


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Build the FastAPI app. Without ``context`` one is created at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = context is None
        app.state.context = context if context is not None else await AppContext.create()
        logger.info("ProjectHub API starting...")
        yield
        logger.info("ProjectHub API shutting down...")
        if owned:
            await app.state.context.close()

    app = FastAPI(
        title="ProjectHub",
        description="Project and task management API",
        version=__version__,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.context = context

    app.add_exception_handler(AppError, app_error_handler)
    app.include_router(health_router, prefix="/health", tags=["health"])
    app.include_router(router, prefix="/api/v1", tags=["projects"])
    return app


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(create_app(), host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
