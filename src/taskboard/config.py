"""Load taskboard settings from the environment and an optional YAML file.

Precedence, lowest first: built-in defaults, ``<data_dir>/taskboard.yaml``,
``TASKBOARD_*`` environment variables, explicit keyword overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from loguru import logger

from .constants import (
    CONFIG_FILE,
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SECRET_KEY,
    DEFAULT_TOKEN_EXPIRE_MINUTES,
    TOKEN_ALGORITHM,
)

ENV_PREFIX = "TASKBOARD_"


def load_config_file(path: Path) -> tuple[dict[str, Any], str | None]:
    """Load the optional settings file.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A tuple of `(config, error_message)`. If the file is missing, returns `({}, None)`.
    """
    if not path.exists():
        return {}, None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        return {}, f"{path.name}: {exc.__class__.__name__}: {exc}"
    except yaml.YAMLError as exc:
        return {}, f"{path.name}: YAMLError: {exc}"
    if data is None:
        return {}, None
    if not isinstance(data, dict):
        return {}, f"{path.name}: expected mapping, got {type(data).__name__}"
    return data, None


def _split_origins(raw: Any) -> list[str]:
    if isinstance(raw, (list, tuple)):
        return [str(item).strip() for item in raw if str(item).strip()]
    return [item.strip() for item in str(raw).split(",") if item.strip()]


class Settings:
    """Runtime settings for the API server and CLI."""

    def __init__(self, data_dir: Optional[Path] = None, **overrides: Any) -> None:
        env_dir = os.getenv(f"{ENV_PREFIX}DATA_DIR")
        self.data_dir = Path(data_dir or env_dir or DEFAULT_DATA_DIR).expanduser()

        file_config, err = load_config_file(self.data_dir / CONFIG_FILE)
        if err:
            logger.warning("Ignoring invalid settings file: {}", err)

        def pick(key: str, default: Any, cast: Callable[[Any], Any] = str) -> Any:
            if key in overrides and overrides[key] is not None:
                return cast(overrides[key])
            env_value = os.getenv(ENV_PREFIX + key.upper())
            if env_value is not None and env_value != "":
                return cast(env_value)
            if key in file_config and file_config[key] is not None:
                return cast(file_config[key])
            return default

        self.secret_key: str = pick("secret_key", DEFAULT_SECRET_KEY)
        self.algorithm = TOKEN_ALGORITHM
        self.access_token_expire_minutes: int = pick(
            "token_expire_minutes", DEFAULT_TOKEN_EXPIRE_MINUTES, int
        )
        self.bcrypt_rounds: int = pick("bcrypt_rounds", DEFAULT_BCRYPT_ROUNDS, int)
        self.log_level: str = pick("log_level", DEFAULT_LOG_LEVEL).upper()
        self.cors_origins: list[str] = pick("cors_origins", ["*"], _split_origins)

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET_KEY

    def to_dict(self) -> dict[str, Any]:
        """Settings as a plain mapping, with the secret redacted."""
        return {
            "data_dir": str(self.data_dir),
            "secret_key": "***",
            "algorithm": self.algorithm,
            "token_expire_minutes": self.access_token_expire_minutes,
            "bcrypt_rounds": self.bcrypt_rounds,
            "log_level": self.log_level,
            "cors_origins": list(self.cors_origins),
        }
