"""Task endpoints for the user's own board.

Mounted under ``/api/tasks`` by ``create_app``.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends

from ..board.model import columns_to_dict
from ..board.service import BoardService
from .auth import require_email
from .models import MessageResponse, PlaceTaskRequest, RemoveTaskRequest, TasksResponse


def create_task_router(get_board: Callable[[], BoardService]) -> APIRouter:
    """Create the user-board task router.

    Parameters
    ----------
    get_board:
        A callable returning the :class:`BoardService` for the app.
    """
    router = APIRouter(prefix="/api/tasks", tags=["tasks"])

    @router.get("/allTasks", response_model=TasksResponse)
    async def all_tasks(email: str = Depends(require_email)) -> TasksResponse:
        return TasksResponse(tasks=columns_to_dict(get_board().get_tasks(email)))

    @router.post("/addTask", response_model=MessageResponse, status_code=201)
    async def add_task(
        body: PlaceTaskRequest,
        email: str = Depends(require_email),
    ) -> MessageResponse:
        get_board().place_task(email, body.column, body.task.to_task())
        return MessageResponse(message="Task added/updated successfully")

    @router.delete("/deleteTask", response_model=MessageResponse)
    async def delete_task(
        body: RemoveTaskRequest,
        email: str = Depends(require_email),
    ) -> MessageResponse:
        get_board().remove_task(email, body.column, body.task_id)
        return MessageResponse(message="Task deleted successfully")

    return router
