"""Per-user project registry: an ordered list of projects with unique ids."""

from __future__ import annotations

from ..errors import DuplicateProject, ProjectNotFound
from .model import Project


def create_project(projects: list[Project], project_id: str, name: str) -> list[Project]:
    """Append a new project with an empty board.

    Raises:
        DuplicateProject: a project with *project_id* already exists.
    """
    if any(p.id == project_id for p in projects):
        raise DuplicateProject()
    projects.append(Project(id=project_id, name=name))
    return projects


def find_project(projects: list[Project], project_id: str) -> Project:
    for project in projects:
        if project.id == project_id:
            return project
    raise ProjectNotFound()


def list_project_summaries(projects: list[Project]) -> list[dict[str, str]]:
    """``{id, name}`` per project, in creation order. Boards are left out."""
    return [p.summary() for p in projects]
