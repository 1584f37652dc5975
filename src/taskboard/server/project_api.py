"""Project endpoints: the project registry and each project's own board.

Mounted under ``/api/projects`` by ``create_app``.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends

from ..board.model import columns_to_dict
from ..board.service import BoardService
from ..errors import InvalidRequest
from .auth import require_email
from .models import (
    CreateProjectRequest,
    MessageResponse,
    PlaceTaskRequest,
    ProjectNamesResponse,
    ProjectSummary,
    RemoveTaskRequest,
    TasksResponse,
)


def create_project_router(get_board: Callable[[], BoardService]) -> APIRouter:
    router = APIRouter(prefix="/api/projects", tags=["projects"])

    @router.post("/createProject", response_model=MessageResponse, status_code=201)
    async def create_project(
        body: CreateProjectRequest,
        email: str = Depends(require_email),
    ) -> MessageResponse:
        if not body.id or not body.name:
            raise InvalidRequest()
        get_board().create_project(email, body.id, body.name)
        return MessageResponse(message="Project created successfully")

    @router.get("/names", response_model=ProjectNamesResponse)
    async def project_names(email: str = Depends(require_email)) -> ProjectNamesResponse:
        summaries = get_board().list_project_summaries(email)
        return ProjectNamesResponse(projectsNames=[ProjectSummary(**s) for s in summaries])

    @router.get("/{project_id}/allTasks", response_model=TasksResponse)
    async def project_tasks(
        project_id: str,
        email: str = Depends(require_email),
    ) -> TasksResponse:
        return TasksResponse(tasks=columns_to_dict(get_board().get_project_tasks(email, project_id)))

    @router.post("/{project_id}/addTask", response_model=MessageResponse, status_code=201)
    async def add_project_task(
        project_id: str,
        body: PlaceTaskRequest,
        email: str = Depends(require_email),
    ) -> MessageResponse:
        get_board().place_project_task(email, project_id, body.column, body.task.to_task())
        return MessageResponse(message="Task added/updated successfully")

    @router.delete("/{project_id}/deleteTask", response_model=MessageResponse)
    async def delete_project_task(
        project_id: str,
        body: RemoveTaskRequest,
        email: str = Depends(require_email),
    ) -> MessageResponse:
        get_board().remove_project_task(email, project_id, body.column, body.task_id)
        return MessageResponse(message="Task deleted successfully")

    return router
