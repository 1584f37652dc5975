"""Board service: the read-modify-write cycle every board route shares.

Each operation fetches the user document by email, applies one core
operation to the user's board or to one project's board, and writes back only
the field that changed (``tasks`` or ``projects``).

No lock spans the fetch and the write. Two concurrent mutations for the same
user race and the later write wins; this matches the stored-document design
and is not guarded against here.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..errors import UserNotFound, store_guard
from ..storage.interfaces import UserRepository
from .model import Task, TaskColumns, UserDocument, columns_to_dict, projects_to_list
from .placement import list_tasks, place_task, remove_task
from .projects import create_project, find_project, list_project_summaries


class BoardService:
    def __init__(self, users: UserRepository) -> None:
        self.users = users

    # -- store access -------------------------------------------------------

    def _load_user(self, email: str) -> UserDocument:
        with store_guard("find_by_email"):
            user = self.users.find_by_email(email)
        if user is None:
            logger.warning("No user document for {}", email)
            raise UserNotFound()
        return user

    def _persist(self, email: str, fields: dict[str, Any]) -> None:
        with store_guard("replace_fields"):
            updated = self.users.replace_fields(email, fields)
        if not updated:
            raise UserNotFound()

    # -- user board ---------------------------------------------------------

    def get_tasks(self, email: str) -> TaskColumns:
        return list_tasks(self._load_user(email).tasks)

    def place_task(self, email: str, column: str, task: Task) -> TaskColumns:
        user = self._load_user(email)
        place_task(user.tasks, column, task)
        self._persist(email, {"tasks": columns_to_dict(user.tasks)})
        logger.info("Placed task {} in column {} for {}", task.id, column, email)
        return list_tasks(user.tasks)

    def remove_task(self, email: str, column: str, task_id: str) -> TaskColumns:
        user = self._load_user(email)
        remove_task(user.tasks, column, task_id)
        self._persist(email, {"tasks": columns_to_dict(user.tasks)})
        logger.info("Removed task {} from column {} for {}", task_id, column, email)
        return list_tasks(user.tasks)

    # -- projects -----------------------------------------------------------

    def list_project_summaries(self, email: str) -> list[dict[str, str]]:
        return list_project_summaries(self._load_user(email).projects)

    def create_project(self, email: str, project_id: str, name: str) -> dict[str, str]:
        user = self._load_user(email)
        create_project(user.projects, project_id, name)
        self._persist(email, {"projects": projects_to_list(user.projects)})
        logger.info("Created project {} ({}) for {}", project_id, name, email)
        return {"id": project_id, "name": name}

    def get_project_tasks(self, email: str, project_id: str) -> TaskColumns:
        user = self._load_user(email)
        return list_tasks(find_project(user.projects, project_id).tasks)

    def place_project_task(self, email: str, project_id: str, column: str, task: Task) -> TaskColumns:
        user = self._load_user(email)
        project = find_project(user.projects, project_id)
        place_task(project.tasks, column, task)
        self._persist(email, {"projects": projects_to_list(user.projects)})
        logger.info("Placed task {} in column {} of project {} for {}", task.id, column, project_id, email)
        return list_tasks(project.tasks)

    def remove_project_task(self, email: str, project_id: str, column: str, task_id: str) -> TaskColumns:
        user = self._load_user(email)
        project = find_project(user.projects, project_id)
        remove_task(project.tasks, column, task_id)
        self._persist(email, {"projects": projects_to_list(user.projects)})
        logger.info("Removed task {} from column {} of project {} for {}", task_id, column, project_id, email)
        return list_tasks(project.tasks)
