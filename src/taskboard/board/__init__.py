"""Board core: task placement across columns and the per-user project registry.

Nothing in this package performs I/O. Callers hand in the in-memory
tasks-by-column mapping (or project list) they fetched from the store,
and persist whatever comes back.
"""

from .model import Project, Task, TaskColumns, UserDocument
from .placement import find_task, list_tasks, place_task, remove_task
from .projects import create_project, find_project, list_project_summaries

__all__ = [
    "Project",
    "Task",
    "TaskColumns",
    "UserDocument",
    "create_project",
    "find_project",
    "find_task",
    "list_project_summaries",
    "list_tasks",
    "place_task",
    "remove_task",
]
