"""HTTP layer for the taskboard service."""

from .api import create_app

__all__ = ["create_app"]
