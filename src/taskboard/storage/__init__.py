from .file_repos import FileUserRepository
from .interfaces import UserRepository

__all__ = ["FileUserRepository", "UserRepository"]
