"""Password hashing and session tokens.

Passwords are stored as bcrypt hashes. Sessions are HS256 JWTs whose ``sub``
claim is the user's email.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from .config import Settings


def _prehash(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes of its input
    return hashlib.sha256(password.encode("utf-8")).hexdigest().encode("ascii")


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False


def create_access_token(
    data: dict[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed access token.

    Args:
        data: Claims to encode; ``sub`` should hold the user's email.
        settings: Supplies the secret, algorithm and default lifetime.
        expires_delta: Optional lifetime overriding the configured one.

    Returns:
        Encoded JWT token.
    """
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> Optional[str]:
    """Verify *token* and return the email it was issued for, or None if invalid or expired."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
    email = payload.get("sub")
    return email if isinstance(email, str) and email else None
