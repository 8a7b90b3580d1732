"""Integration tests for the todo endpoints."""

import pytest
from httpx import AsyncClient

from chronos.modules.todos.models import Todo
from tests.factories.resources import TodoCreateFactory


pytestmark = pytest.mark.integration


def assert_completion_consistent(todo: dict) -> None:
    assert todo["is_completed"] == (todo["completed_at"] is not None)


class TestCreateTodo:
    """Tests for POST /api/todos."""

    async def test_create(self, client: AsyncClient, workspace):
        payload = TodoCreateFactory.build(priority="high", due_date="2026-01-31")

        response = await client.post(
            "/api/todos",
            json=payload.model_dump(mode="json"),
            headers=workspace.member_headers,
        )

        assert response.status_code == 201
        todo = response.json()["todo"]
        assert todo["id"]
        assert todo["title"] == payload.title
        assert todo["priority"] == "high"
        assert todo["due_date"] == "2026-01-31"
        assert todo["user_id"] == workspace.member.id
        assert todo["tenant_id"] == workspace.tenant.id
        assert todo["category_id"] is None
        assert_completion_consistent(todo)

    async def test_create_completed_sets_completed_at(self, client: AsyncClient, workspace):
        payload = TodoCreateFactory.build(is_completed=True)

        response = await client.post(
            "/api/todos",
            json=payload.model_dump(mode="json"),
            headers=workspace.member_headers,
        )

        todo = response.json()["todo"]
        assert todo["is_completed"] is True
        assert todo["completed_at"] is not None

    async def test_create_with_category(self, client: AsyncClient, workspace, make_category):
        category = await make_category(workspace.member)
        payload = TodoCreateFactory.build(category_id=category.id)

        response = await client.post(
            "/api/todos",
            json=payload.model_dump(mode="json"),
            headers=workspace.member_headers,
        )

        assert response.status_code == 201
        assert response.json()["todo"]["category_id"] == category.id

    async def test_create_with_unknown_category(self, client: AsyncClient, workspace):
        payload = TodoCreateFactory.build(category_id="does-not-exist")

        response = await client.post(
            "/api/todos",
            json=payload.model_dump(mode="json"),
            headers=workspace.member_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"path": ["category_id"], "message": "Category does not exist"}
        ]

    async def test_create_with_other_tenant_category(
        self, client: AsyncClient, workspace, other_workspace, make_category
    ):
        category = await make_category(other_workspace.member)
        payload = TodoCreateFactory.build(category_id=category.id)

        response = await client.post(
            "/api/todos",
            json=payload.model_dump(mode="json"),
            headers=workspace.member_headers,
        )

        assert response.status_code == 400

    async def test_create_validation(self, client: AsyncClient, workspace):
        response = await client.post(
            "/api/todos",
            json={"title": "", "is_completed": "maybe", "priority": "urgent"},
            headers=workspace.member_headers,
        )

        assert response.status_code == 400
        paths = {tuple(issue["path"]) for issue in response.json()["errors"]}
        assert paths == {("title",), ("is_completed",), ("priority",)}

    async def test_create_requires_auth(self, client: AsyncClient):
        payload = TodoCreateFactory.build()

        response = await client.post("/api/todos", json=payload.model_dump(mode="json"))

        assert response.status_code == 401


class TestReadTodos:
    """Tests for GET /api/todos and GET /api/todos/{id}."""

    async def test_list_is_owner_scoped(self, client: AsyncClient, workspace, make_todo):
        mine = await make_todo(workspace.member, title="mine")
        await make_todo(workspace.admin, title="admin's")

        response = await client.get("/api/todos", headers=workspace.member_headers)

        assert response.status_code == 200
        todos = response.json()["todos"]
        assert [t["id"] for t in todos] == [mine.id]

    async def test_admin_list_does_not_include_members_todos(
        self, client: AsyncClient, workspace, make_todo
    ):
        await make_todo(workspace.member)

        response = await client.get("/api/todos", headers=workspace.admin_headers)

        assert response.json() == {"success": True, "todos": []}

    async def test_get(self, client: AsyncClient, workspace, make_todo):
        todo = await make_todo(workspace.member)

        response = await client.get(f"/api/todos/{todo.id}", headers=workspace.member_headers)

        assert response.status_code == 200
        assert response.json()["todo"]["id"] == todo.id

    async def test_get_other_users_todo(self, client: AsyncClient, workspace, make_todo):
        todo = await make_todo(workspace.admin)

        response = await client.get(f"/api/todos/{todo.id}", headers=workspace.member_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Todo not found"

    async def test_get_missing(self, client: AsyncClient, workspace):
        response = await client.get("/api/todos/missing", headers=workspace.member_headers)

        assert response.status_code == 404


class TestUpdateTodo:
    """Tests for PUT /api/todos/{id}."""

    async def test_partial_update(self, client: AsyncClient, workspace, make_todo):
        todo = await make_todo(workspace.member, title="old", description="keep me")

        response = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": "new"},
            headers=workspace.member_headers,
        )

        assert response.status_code == 200
        updated = response.json()["todo"]
        assert updated["title"] == "new"
        assert updated["description"] == "keep me"
        assert updated["priority"] == "medium"

    async def test_updated_at_always_refreshed(
        self, client: AsyncClient, session_factory, workspace, make_todo
    ):
        todo = await make_todo(workspace.member)

        await client.put(
            f"/api/todos/{todo.id}", json={}, headers=workspace.member_headers
        )

        async with session_factory() as session:
            stored = await session.get(Todo, todo.id)
        assert stored.updated_at.replace(tzinfo=None) > todo.updated_at.replace(tzinfo=None)

    async def test_completion_toggles_completed_at(
        self, client: AsyncClient, workspace, make_todo
    ):
        todo = await make_todo(workspace.member)

        done = await client.put(
            f"/api/todos/{todo.id}",
            json={"is_completed": True},
            headers=workspace.member_headers,
        )
        assert done.json()["todo"]["completed_at"] is not None
        assert_completion_consistent(done.json()["todo"])

        renamed = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": "still done"},
            headers=workspace.member_headers,
        )
        assert renamed.json()["todo"]["is_completed"] is True
        assert renamed.json()["todo"]["completed_at"] is not None

        reopened = await client.put(
            f"/api/todos/{todo.id}",
            json={"is_completed": False},
            headers=workspace.member_headers,
        )
        assert reopened.json()["todo"]["completed_at"] is None
        assert_completion_consistent(reopened.json()["todo"])

    async def test_assign_and_clear_category(
        self, client: AsyncClient, workspace, make_category, make_todo
    ):
        category = await make_category(workspace.member)
        todo = await make_todo(workspace.member)

        assigned = await client.put(
            f"/api/todos/{todo.id}",
            json={"category_id": category.id},
            headers=workspace.member_headers,
        )
        assert assigned.json()["todo"]["category_id"] == category.id

        untouched = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": "renamed"},
            headers=workspace.member_headers,
        )
        assert untouched.json()["todo"]["category_id"] == category.id

        cleared = await client.put(
            f"/api/todos/{todo.id}",
            json={"category_id": None},
            headers=workspace.member_headers,
        )
        assert cleared.json()["todo"]["category_id"] is None

    async def test_unknown_category_rejected_and_not_applied(
        self, client: AsyncClient, workspace, make_category, make_todo
    ):
        category = await make_category(workspace.member)
        todo = await make_todo(workspace.member, category_id=category.id)

        response = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": "changed", "category_id": "does-not-exist"},
            headers=workspace.member_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == ["category_id"]

        current = await client.get(f"/api/todos/{todo.id}", headers=workspace.member_headers)
        assert current.json()["todo"]["category_id"] == category.id
        assert current.json()["todo"]["title"] == todo.title

    async def test_admin_cannot_update_members_todo(
        self, client: AsyncClient, workspace, make_todo
    ):
        todo = await make_todo(workspace.member)

        response = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": "hijacked"},
            headers=workspace.admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Todo not found or unauthorized"

    async def test_null_title_rejected(self, client: AsyncClient, workspace, make_todo):
        todo = await make_todo(workspace.member)

        response = await client.put(
            f"/api/todos/{todo.id}",
            json={"title": None},
            headers=workspace.member_headers,
        )

        assert response.status_code == 400


class TestDeleteTodo:
    """Tests for DELETE /api/todos/{id}."""

    async def test_member_forbidden_then_admin_deletes(
        self, client: AsyncClient, workspace, make_todo
    ):
        todo = await make_todo(workspace.member)

        forbidden = await client.delete(
            f"/api/todos/{todo.id}", headers=workspace.member_headers
        )
        assert forbidden.status_code == 403

        deleted = await client.delete(f"/api/todos/{todo.id}", headers=workspace.admin_headers)
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "message": "Todo deleted"}

        gone = await client.get(f"/api/todos/{todo.id}", headers=workspace.member_headers)
        assert gone.status_code == 404

    async def test_delete_missing(self, client: AsyncClient, workspace):
        response = await client.delete("/api/todos/missing", headers=workspace.admin_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Todo not found"

    async def test_delete_requires_auth(self, client: AsyncClient, workspace, make_todo):
        todo = await make_todo(workspace.member)

        response = await client.delete(f"/api/todos/{todo.id}")

        assert response.status_code == 401
