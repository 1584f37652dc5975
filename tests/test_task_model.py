"""Tests for the user/project/task document model."""

from __future__ import annotations

from loguru import logger

from taskboard.board.model import Project, Task, UserDocument, columns_from_dict


def test_task_round_trips_client_field_names() -> None:
    raw = {
        "id": "t1",
        "name": "Write docs",
        "description": "API reference",
        "dueDate": "2024-05-01",
        "tag": "docs",
        "priority": True,
    }
    task = Task.from_dict(raw)
    assert task.due_date == "2024-05-01"
    assert task.to_dict() == raw


def test_task_defaults_for_missing_fields() -> None:
    task = Task.from_dict({"id": 7})
    assert task == Task(id="7")


def test_task_priority_from_string() -> None:
    assert Task.from_dict({"id": "t", "priority": "true"}).priority is True
    assert Task.from_dict({"id": "t", "priority": "false"}).priority is False


def test_missing_collections_read_as_empty() -> None:
    user = UserDocument.from_dict({"email": "a@example.com", "username": "a", "password": "x"})
    assert user.tasks == {}
    assert user.projects == []

    user = UserDocument.from_dict({"email": "a@example.com", "tasks": None, "projects": None})
    assert user.tasks == {}
    assert user.projects == []


def test_project_with_list_shaped_tasks_reads_as_empty_board() -> None:
    project = Project.from_dict({"id": "p1", "name": "Alpha", "tasks": []})
    assert project.tasks == {}


def test_columns_from_dict_skips_malformed_entries() -> None:
    columns = columns_from_dict({"todo": [{"id": "t1"}, "junk"], "done": None})
    assert [t.id for t in columns["todo"]] == ["t1"]
    assert columns["done"] == []



def test_columns_from_dict_logs_discarded_entries() -> None:
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    try:
        columns_from_dict({"todo": [{"id": "t1"}, "junk", 3], "done": None, "doing": "oops"})
        columns_from_dict({"todo": [{"id": "t1"}]})
    finally:
        logger.remove(sink_id)

    assert len(messages) == 2
    assert "2 malformed task entries" in messages[0] and "'todo'" in messages[0]
    assert "'doing'" in messages[1]


def test_columns_from_dict_list_shaped_board_is_silent() -> None:
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    try:
        assert columns_from_dict([]) == {}
        assert columns_from_dict(None) == {}
    finally:
        logger.remove(sink_id)
    assert messages == []
