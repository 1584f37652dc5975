from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..board.model import UserDocument


class UserRepository(ABC):
    """Document store gateway for user documents, keyed by email."""

    @abstractmethod
    def list(self) -> list[UserDocument]:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserDocument]:
        raise NotImplementedError

    @abstractmethod
    def insert(self, user: UserDocument) -> bool:
        """Store a new user. Returns False if the email is already taken."""
        raise NotImplementedError

    @abstractmethod
    def replace_fields(self, email: str, fields: dict[str, Any]) -> bool:
        """Overwrite top-level *fields* of one user. Returns False if the user is missing."""
        raise NotImplementedError
