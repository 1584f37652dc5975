"""FastAPI application for the taskboard service."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from ..accounts import AccountService
from ..board.service import BoardService
from ..config import Settings
from ..constants import APP_NAME, APP_VERSION
from ..container import TaskboardContainer
from ..errors import TaskboardError, store_guard
from .auth_api import create_auth_router
from .models import HealthResponse
from .project_api import create_project_router
from .task_api import create_task_router


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(
    settings: Optional[Settings] = None,
    data_dir: Optional[Path] = None,
    enable_cors: bool = True,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Service settings. Built from the environment when omitted.
        data_dir: Data directory override, used when *settings* is omitted.
        enable_cors: Whether to enable CORS.

    Returns:
        Configured FastAPI app.
    """
    settings = settings or Settings(data_dir=data_dir)
    if settings.uses_default_secret:
        logger.warning("TASKBOARD_SECRET_KEY is not set; using the development secret")

    app = FastAPI(
        title=f"{APP_NAME} API",
        description="Per-user kanban boards and projects",
        version=APP_VERSION,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    container = TaskboardContainer(settings)
    app.state.container = container

    def _get_board() -> BoardService:
        return app.state.container.board

    def _get_accounts() -> AccountService:
        return app.state.container.accounts

    @app.exception_handler(TaskboardError)
    async def _taskboard_error(request: Request, exc: TaskboardError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
        else:
            logger.warning("{} {} rejected ({}): {}", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("{} {} invalid body: {}", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "status": "running",
        }

    @app.get("/api/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        with store_guard("health check"):
            users = app.state.container.users.list()
        return HealthResponse(status="ok", users=len(users))

    app.include_router(create_auth_router(_get_accounts))
    app.include_router(create_task_router(_get_board))
    app.include_router(create_project_router(_get_board))

    return app
