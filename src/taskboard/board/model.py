"""Document model for users, projects and tasks.

The persisted layout mirrors the JSON the web client exchanges: a user
document holds ``username``, ``email``, ``password``, a ``tasks`` mapping of
column name to task list, and an ordered ``projects`` list whose entries own
their own ``tasks`` mapping. Missing or null collections read as empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

TaskColumns = dict[str, list["Task"]]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass
class Task:
    """A card on the board. ``id`` is the only match key."""

    id: str
    name: str = ""
    description: str = ""
    due_date: str = ""
    tag: str = ""
    priority: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "dueDate": self.due_date,
            "tag": self.tag,
            "priority": self.priority,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        due = data.get("dueDate", data.get("due_date"))
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            due_date=str(due or ""),
            tag=str(data.get("tag") or ""),
            priority=_as_bool(data.get("priority", False)),
        )


def columns_from_dict(raw: Any) -> TaskColumns:
    """Build a tasks-by-column mapping, treating anything but a mapping as empty.

    Early project documents were created with ``tasks: []``; those read as an
    empty board rather than an error.
    """
    if not isinstance(raw, dict):
        if raw not in (None, []):
            logger.warning("Discarding malformed task board of type {}", type(raw).__name__)
        return {}
    columns: TaskColumns = {}
    for column, entries in raw.items():
        if not isinstance(entries, list):
            if entries is not None:
                logger.warning("Discarding malformed column {!r}: expected a list, got {}", column, type(entries).__name__)
            columns[str(column)] = []
            continue
        tasks = [Task.from_dict(e) for e in entries if isinstance(e, dict)]
        dropped = len(entries) - len(tasks)
        if dropped:
            logger.warning("Discarding {} malformed task entr{} in column {!r}", dropped, "y" if dropped == 1 else "ies", column)
        columns[str(column)] = tasks
    return columns


def columns_to_dict(columns: TaskColumns) -> dict[str, list[dict[str, Any]]]:
    return {column: [t.to_dict() for t in tasks] for column, tasks in columns.items()}


@dataclass
class Project:
    id: str
    name: str = ""
    tasks: TaskColumns = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "tasks": columns_to_dict(self.tasks)}

    def summary(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            tasks=columns_from_dict(data.get("tasks")),
        )


def projects_to_list(projects: list[Project]) -> list[dict[str, Any]]:
    return [p.to_dict() for p in projects]


@dataclass
class UserDocument:
    """One stored user, addressed by ``email``.

    ``password`` is an opaque hash owned by the credential layer; the board
    core never reads it.
    """

    email: str
    username: str = ""
    password: str = ""
    tasks: TaskColumns = field(default_factory=dict)
    projects: list[Project] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "tasks": columns_to_dict(self.tasks),
            "projects": projects_to_list(self.projects),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserDocument":
        raw_projects = data.get("projects")
        projects: list[Project] = []
        if isinstance(raw_projects, list):
            projects = [Project.from_dict(p) for p in raw_projects if isinstance(p, dict)]
        return cls(
            email=str(data.get("email", "")),
            username=str(data.get("username") or ""),
            password=str(data.get("password") or ""),
            tasks=columns_from_dict(data.get("tasks")),
            projects=projects,
        )

