"""User registration and login."""

from __future__ import annotations

from loguru import logger

from .board.model import UserDocument
from .config import Settings
from .credentials import create_access_token, hash_password, verify_password
from .errors import EmailAlreadyRegistered, InvalidCredentials, store_guard
from .storage.interfaces import UserRepository


class AccountService:
    def __init__(self, users: UserRepository, settings: Settings) -> None:
        self.users = users
        self.settings = settings

    def register(self, username: str, email: str, password: str) -> str:
        """Create a user with an empty board and no projects; return a session token."""
        user = UserDocument(
            email=email,
            username=username,
            password=hash_password(password, rounds=self.settings.bcrypt_rounds),
        )
        with store_guard("insert"):
            created = self.users.insert(user)
        if not created:
            logger.warning("Registration rejected, email already in use: {}", email)
            raise EmailAlreadyRegistered()
        logger.info("Registered user {}", email)
        return create_access_token({"sub": email, "username": username}, self.settings)

    def login(self, email: str, password: str) -> str:
        with store_guard("find_by_email"):
            user = self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password):
            logger.warning("Failed login for {}", email)
            raise InvalidCredentials()
        logger.info("User {} logged in", email)
        return create_access_token({"sub": email}, self.settings)
