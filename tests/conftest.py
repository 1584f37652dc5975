from __future__ import annotations

import os
from pathlib import Path

import pytest

from taskboard.board.model import Task
from taskboard.config import Settings
from taskboard.container import TaskboardContainer


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TASKBOARD_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("TASKBOARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", secret_key="test-secret", bcrypt_rounds=4)


@pytest.fixture
def container(settings: Settings) -> TaskboardContainer:
    return TaskboardContainer(settings)


def make_task(task_id: str, **fields) -> Task:
    fields.setdefault("name", f"Task {task_id}")
    return Task(id=task_id, **fields)
