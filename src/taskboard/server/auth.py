"""Request authentication for the board routes."""

from __future__ import annotations

from fastapi import Request

from ..credentials import decode_access_token
from ..errors import Forbidden, Unauthorized


def bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization", "")
    parts = header.split(" ")
    return parts[1].strip() if len(parts) > 1 else ""


def require_email(request: Request) -> str:
    """Resolve the authenticated user's email from the ``Authorization: Bearer`` header.

    Raises:
        Unauthorized: no token was sent.
        Forbidden: the token is invalid or expired.
    """
    token = bearer_token(request)
    if not token:
        raise Unauthorized()
    email = decode_access_token(token, request.app.state.container.settings)
    if email is None:
        raise Forbidden()
    return email
