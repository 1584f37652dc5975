"""Registration and login endpoints, mounted under ``/api``.

Both handlers are plain ``def`` so FastAPI runs them in its threadpool;
bcrypt hashing would otherwise stall the event loop.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter

from ..accounts import AccountService
from .models import LoginRequest, RegisterRequest, TokenResponse


def create_auth_router(get_accounts: Callable[[], AccountService]) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["auth"])

    @router.post("/register", response_model=TokenResponse, status_code=201)
    def register(body: RegisterRequest) -> TokenResponse:
        token = get_accounts().register(body.username, body.email, body.password)
        return TokenResponse(message="User registered successfully", token=token)

    @router.post("/login", response_model=TokenResponse)
    def login(body: LoginRequest) -> TokenResponse:
        token = get_accounts().login(body.email, body.password)
        return TokenResponse(message="Login successful", token=token)

    return router
