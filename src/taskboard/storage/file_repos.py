from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional

from ..board.model import UserDocument
from ..constants import STORE_SCHEMA_VERSION
from ..io_utils import FileLock, atomic_write_yaml, read_yaml_mapping
from .interfaces import UserRepository


class FileUserRepository(UserRepository):
    """User documents kept in one YAML file, guarded by a thread lock and a file lock.

    Each call is atomic on its own. Callers doing read-modify-write across
    two calls get no isolation from each other: the later write wins.
    """

    def __init__(self, path: Path, lock_path: Path) -> None:
        self._path = path
        self._lock = FileLock(lock_path)
        self._thread_lock = threading.RLock()

    def _load(self) -> list[dict[str, Any]]:
        raw = read_yaml_mapping(self._path)
        items = raw.get("users", [])
        if not isinstance(items, list):
            raise ValueError(f"{self._path.name}: 'users' must be a list")
        return [item for item in items if isinstance(item, dict)]

    def _save(self, users: list[dict[str, Any]]) -> None:
        atomic_write_yaml(self._path, {"version": STORE_SCHEMA_VERSION, "users": users})

    def list(self) -> list[UserDocument]:
        with self._thread_lock:
            with self._lock:
                return [UserDocument.from_dict(item) for item in self._load()]

    def find_by_email(self, email: str) -> Optional[UserDocument]:
        with self._thread_lock:
            with self._lock:
                for item in self._load():
                    if item.get("email") == email:
                        return UserDocument.from_dict(item)
        return None

    def insert(self, user: UserDocument) -> bool:
        with self._thread_lock:
            with self._lock:
                users = self._load()
                if any(item.get("email") == user.email for item in users):
                    return False
                users.append(user.to_dict())
                self._save(users)
        return True

    def replace_fields(self, email: str, fields: dict[str, Any]) -> bool:
        with self._thread_lock:
            with self._lock:
                users = self._load()
                for item in users:
                    if item.get("email") == email:
                        item.update(fields)
                        self._save(users)
                        return True
        return False
