"""Tests for registration, login and the user-board endpoints."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.server.api import create_app


@pytest.fixture
def client(settings: Settings):
    app = create_app(settings=settings, enable_cors=False)
    with TestClient(app) as c:
        yield c


def _register(client: TestClient, email: str = "alice@example.com") -> dict[str, str]:
    resp = client.post("/api/register", json={"username": "alice", "email": email, "password": "pw"})
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def _task(task_id: str, **fields) -> dict:
    data = {"id": task_id, "name": f"Task {task_id}", "description": "", "dueDate": "", "tag": "", "priority": False}
    data.update(fields)
    return data


class TestAuthEndpoints:
    def test_root_and_health(self, client: TestClient) -> None:
        assert client.get("/").json()["status"] == "running"
        assert client.get("/api/health").json() == {"status": "ok", "users": 0}

    def test_register_and_login(self, client: TestClient) -> None:
        resp = client.post("/api/register", json={"username": "alice", "email": "a@example.com", "password": "pw"})
        assert resp.status_code == 201
        assert resp.json()["message"] == "User registered successfully"

        resp = client.post("/api/login", json={"email": "a@example.com", "password": "pw"})
        assert resp.status_code == 200
        assert resp.json()["message"] == "Login successful"
        assert resp.json()["token"]

    def test_register_duplicate(self, client: TestClient) -> None:
        _register(client)
        resp = client.post("/api/register", json={"username": "x", "email": "alice@example.com", "password": "pw"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Email is already registered. Please use a different email."}

    def test_login_invalid(self, client: TestClient) -> None:
        _register(client)
        resp = client.post("/api/login", json={"email": "alice@example.com", "password": "bad"})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid credentials"}

    def test_missing_token(self, client: TestClient) -> None:
        resp = client.get("/api/tasks/allTasks")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Unauthorized"}

        resp = client.get("/api/tasks/allTasks", headers={"Authorization": "Bearer"})
        assert resp.status_code == 401

    def test_invalid_token(self, client: TestClient) -> None:
        resp = client.get("/api/tasks/allTasks", headers={"Authorization": "Bearer not-a-jwt"})
        assert resp.status_code == 403
        assert resp.json() == {"error": "Forbidden"}

    def test_login_token_works(self, client: TestClient) -> None:
        _register(client)
        token = client.post("/api/login", json={"email": "alice@example.com", "password": "pw"}).json()["token"]
        resp = client.get("/api/tasks/allTasks", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200


class TestUserBoardEndpoints:
    def test_new_user_has_empty_board(self, client: TestClient) -> None:
        headers = _register(client)
        resp = client.get("/api/tasks/allTasks", headers=headers)
        assert resp.status_code == 200
        assert resp.json() == {"tasks": {}}

    def test_add_move_and_delete(self, client: TestClient) -> None:
        headers = _register(client)
        resp = client.post("/api/tasks/addTask", headers=headers, json={"column": "todo", "task": _task("t1")})
        assert resp.status_code == 201
        assert resp.json() == {"message": "Task added/updated successfully"}

        client.post("/api/tasks/addTask", headers=headers, json={"column": "todo", "task": _task("t2")})
        client.post(
            "/api/tasks/addTask",
            headers=headers,
            json={"column": "done", "task": _task("t1", priority=True, dueDate="2024-06-01")},
        )

        tasks = client.get("/api/tasks/allTasks", headers=headers).json()["tasks"]
        assert [t["id"] for t in tasks["todo"]] == ["t2"]
        assert tasks["done"] == [_task("t1", priority=True, dueDate="2024-06-01")]

        resp = client.request("DELETE", "/api/tasks/deleteTask", headers=headers, json={"column": "done", "taskId": "t1"})
        assert resp.status_code == 200
        assert resp.json() == {"message": "Task deleted successfully"}
        assert client.get("/api/tasks/allTasks", headers=headers).json()["tasks"]["done"] == []

    def test_delete_missing_task(self, client: TestClient) -> None:
        headers = _register(client)
        client.post("/api/tasks/addTask", headers=headers, json={"column": "todo", "task": _task("t1")})
        resp = client.request("DELETE", "/api/tasks/deleteTask", headers=headers, json={"column": "done", "taskId": "t1"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "Task not found in the specified column"}

    def test_malformed_body(self, client: TestClient) -> None:
        headers = _register(client)
        resp = client.post("/api/tasks/addTask", headers=headers, json={"task": _task("t1")})
        assert resp.status_code == 400
        assert "column" in resp.json()["error"]

    def test_token_for_unknown_user(self, client: TestClient, settings: Settings) -> None:
        from taskboard.credentials import create_access_token

        token = create_access_token({"sub": "ghost@example.com"}, settings)
        resp = client.get("/api/tasks/allTasks", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 404
        assert resp.json() == {"error": "User not found"}

    def test_users_are_isolated(self, client: TestClient) -> None:
        alice = _register(client, "alice@example.com")
        bob = _register(client, "bob@example.com")
        client.post("/api/tasks/addTask", headers=alice, json={"column": "todo", "task": _task("t1")})
        assert client.get("/api/tasks/allTasks", headers=bob).json() == {"tasks": {}}

    def test_store_failure_is_500(self, client: TestClient) -> None:
        headers = _register(client)
        users = client.app.state.container.users
        with patch.object(users, "replace_fields", side_effect=OSError("disk full")):
            resp = client.post("/api/tasks/addTask", headers=headers, json={"column": "todo", "task": _task("t1")})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal Server Error"}
