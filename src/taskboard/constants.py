"""Shared constants for the taskboard service."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "Taskboard"
APP_VERSION = "1.0.0"

DEFAULT_DATA_DIR = Path(".taskboard")
CONFIG_FILE = "taskboard.yaml"

USERS_FILE = "users.yaml"
USERS_LOCK_FILE = "users.lock"
STORE_SCHEMA_VERSION = 1

DEFAULT_SECRET_KEY = "dev-secret-change-in-production"
TOKEN_ALGORITHM = "HS256"
DEFAULT_TOKEN_EXPIRE_MINUTES = 1440  # 24 hours
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_LOG_LEVEL = "INFO"

# Bytes locked on Windows (msvcrt locks a byte range, not the whole file)
WINDOWS_LOCK_BYTES = 1024
