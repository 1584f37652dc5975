"""Task placement on a tasks-by-column board.

A board maps column names to ordered task lists. A task id lives in at most
one column of a board; placing a task always relocates it, never copies it.
The functions here mutate the mapping they are given and return it, so the
same code serves a user's own board and any project's board.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..errors import TaskNotFound
from .model import Task, TaskColumns


def find_task(columns: TaskColumns, task_id: str) -> Optional[tuple[str, Task]]:
    """Return ``(column, task)`` for the first entry with *task_id*, scanning columns in order."""
    for column, tasks in columns.items():
        for task in tasks:
            if task.id == task_id:
                return column, task
    return None


def place_task(columns: TaskColumns, column: str, task: Task) -> TaskColumns:
    """Upsert *task* at the tail of *column*, dropping every other entry with its id.

    Columns are created lazily. A column left empty by the relocation stays
    on the board as an empty list.
    """
    for tasks in columns.values():
        if any(t.id == task.id for t in tasks):
            tasks[:] = [t for t in tasks if t.id != task.id]
    columns.setdefault(column, []).append(task)
    return columns


def remove_task(columns: TaskColumns, column: str, task_id: str) -> TaskColumns:
    """Remove *task_id* from *column* only.

    Raises:
        TaskNotFound: the column is missing or holds no task with that id.
            The board is left untouched.
    """
    tasks = columns.get(column)
    if tasks is None:
        raise TaskNotFound()
    for idx, task in enumerate(tasks):
        if task.id == task_id:
            del tasks[idx]
            return columns
    raise TaskNotFound()


def list_tasks(columns: TaskColumns) -> TaskColumns:
    """Snapshot of the whole board; changing it does not change *columns*."""
    return {column: [replace(t) for t in tasks] for column, tasks in columns.items()}
