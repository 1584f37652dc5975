"""Error kinds raised by the board core, the store gateway and the auth layer.

Every kind carries the HTTP status the request handlers answer with, so the
mapping to transport status lives in one place.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from loguru import logger


class TaskboardError(Exception):
    """Base class for all expected taskboard failures."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UserNotFound(TaskboardError):
    status_code = 404
    default_message = "User not found"


class ProjectNotFound(TaskboardError):
    status_code = 404
    default_message = "Project not found"


class TaskNotFound(TaskboardError):
    status_code = 404
    default_message = "Task not found in the specified column"


class DuplicateProject(TaskboardError):
    status_code = 400
    default_message = "Project with the specified ID already exists"


class EmailAlreadyRegistered(TaskboardError):
    status_code = 400
    default_message = "Email is already registered. Please use a different email."


class InvalidRequest(TaskboardError):
    status_code = 400
    default_message = "Missing required parameters"


class InvalidCredentials(TaskboardError):
    status_code = 401
    default_message = "Invalid credentials"


class Unauthorized(TaskboardError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(TaskboardError):
    status_code = 403
    default_message = "Forbidden"


class StoreUnavailable(TaskboardError):
    """Any failure surfaced by the document store. Never retried."""

    status_code = 500


@contextmanager
def store_guard(operation: str) -> Iterator[None]:
    """Wrap a document store call, converting its failures to StoreUnavailable."""
    try:
        yield
    except TaskboardError:
        raise
    except Exception as exc:
        logger.opt(exception=exc).error("Document store failure during {}", operation)
        raise StoreUnavailable() from exc
