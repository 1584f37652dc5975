"""Pydantic models for API requests and responses.

Field names follow the JSON the web client already speaks (``dueDate``,
``taskId``, ``projectsNames``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..board.model import Task


class TaskPayload(BaseModel):
    """A task as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = ""
    description: str = ""
    due_date: str = Field("", alias="dueDate")
    tag: str = ""
    priority: bool = False

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            name=self.name,
            description=self.description,
            due_date=self.due_date,
            tag=self.tag,
            priority=self.priority,
        )


class PlaceTaskRequest(BaseModel):
    column: str = Field(min_length=1)
    task: TaskPayload


class RemoveTaskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    column: str
    task_id: str = Field(alias="taskId")


class CreateProjectRequest(BaseModel):
    # Checked by the handler so a missing field answers "Missing required parameters"
    id: str = ""
    name: str = ""


class RegisterRequest(BaseModel):
    username: str
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    message: str
    token: str


class TasksResponse(BaseModel):
    tasks: dict[str, list[dict[str, Any]]]


class ProjectSummary(BaseModel):
    id: str
    name: str


class ProjectNamesResponse(BaseModel):
    projectsNames: list[ProjectSummary]


class HealthResponse(BaseModel):
    status: str
    users: int
