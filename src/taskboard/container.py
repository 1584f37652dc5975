from __future__ import annotations

from .accounts import AccountService
from .board.service import BoardService
from .config import Settings
from .constants import USERS_FILE, USERS_LOCK_FILE
from .storage.file_repos import FileUserRepository


class TaskboardContainer:
    """Wire the store, the board service and the account service for one data directory."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.data_dir = settings.data_dir.resolve()
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self.users = FileUserRepository(self.data_dir / USERS_FILE, self.data_dir / USERS_LOCK_FILE)
        self.board = BoardService(self.users)
        self.accounts = AccountService(self.users, settings)
