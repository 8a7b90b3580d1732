"""Todo service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from chronos.api.dependencies import DBSession
from chronos.core.auth.membership import MembershipVerifier
from chronos.core.auth.schemas import TokenData
from chronos.core.database import generate_id, transaction, utcnow
from chronos.core.errors import NotFoundError, ValidationError
from chronos.core.permissions import get_policy
from chronos.modules.categories.repos import CategoryRepository
from chronos.modules.todos.models import Todo
from chronos.modules.todos.repos import TodoRepository
from chronos.modules.todos.schemas import TodoCreate, TodoUpdate


logger = structlog.get_logger()


class TodoService:
    """Service for todo operations.

    Reads and updates are restricted to the owner. Deletion is
    admin-only and reaches any todo in the admin's tenant.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = TodoRepository(db)
        self.category_repo = CategoryRepository(db)
        self.membership = MembershipVerifier(db)

    async def _ensure_category(self, category_id: str | None, tenant_id: str) -> None:
        """Require a non-null category reference to exist in the tenant.

        Raises:
            ValidationError: If the category does not exist in the tenant
        """
        if category_id is None:
            return
        if not await self.category_repo.exists_in_tenant(category_id, tenant_id):
            raise ValidationError(
                "Validation failed",
                errors=[{"path": ["category_id"], "message": "Category does not exist"}],
                details={"category_id": category_id},
            )

    async def create(self, identity: TokenData, data: TodoCreate) -> Todo:
        """Create a todo owned by the caller.

        Raises:
            ForbiddenError: If the caller is not a member of the tenant
            ValidationError: If ``category_id`` names no category in the tenant
        """
        async with transaction(self.db):
            await self.membership.ensure_member(identity.tenant_id, identity.user_id)
            await self._ensure_category(data.category_id, identity.tenant_id)

            now = utcnow()
            todo = Todo(
                id=generate_id(),
                user_id=identity.user_id,
                tenant_id=identity.tenant_id,
                category_id=data.category_id,
                title=data.title,
                description=data.description,
                is_completed=data.is_completed,
                due_date=data.due_date,
                completed_at=now if data.is_completed else None,
                priority=data.priority.value,
                created_at=now,
                updated_at=now,
            )
            await self.repo.add(todo)

        logger.info(
            "todo_created",
            todo_id=todo.id,
            user_id=identity.user_id,
            tenant_id=identity.tenant_id,
        )
        return todo

    async def list(self, identity: TokenData) -> list[Todo]:
        """List the caller's own todos, newest first."""
        scope = get_policy("todos", "list").scope
        return await self.repo.list(identity, scope)

    async def get(self, identity: TokenData, todo_id: str) -> Todo:
        """Get one of the caller's todos.

        Raises:
            NotFoundError: If absent or not owned by the caller
        """
        scope = get_policy("todos", "get").scope
        todo = await self.repo.get(todo_id, identity, scope)
        if todo is None:
            raise NotFoundError("Todo not found", resource="todo", resource_id=todo_id)
        return todo

    async def update(
        self,
        identity: TokenData,
        todo_id: str,
        data: TodoUpdate,
    ) -> Todo:
        """Apply the fields present in ``data`` to one of the caller's todos.

        ``completed_at`` follows ``is_completed`` whenever that field is
        present; ``updated_at`` is always refreshed.

        Raises:
            NotFoundError: If absent or not owned by the caller
            ValidationError: If ``category_id`` names no category in the tenant
        """
        scope = get_policy("todos", "update").scope
        changes = data.model_dump(exclude_unset=True)

        async with transaction(self.db):
            todo = await self.repo.get(todo_id, identity, scope)
            if todo is None:
                raise NotFoundError(
                    "Todo not found or unauthorized",
                    resource="todo",
                    resource_id=todo_id,
                )

            if "category_id" in changes:
                await self._ensure_category(changes["category_id"], identity.tenant_id)

            now = utcnow()
            for field, value in changes.items():
                setattr(todo, field, value)
            if "is_completed" in changes:
                todo.completed_at = now if changes["is_completed"] else None
            todo.updated_at = now
            await self.repo.flush()

        logger.info(
            "todo_updated",
            todo_id=todo.id,
            fields=sorted(changes),
        )
        return todo

    async def delete(self, identity: TokenData, todo_id: str) -> None:
        """Delete any todo in the caller's tenant.

        Role gating happens in the route dependency; this only scopes the
        lookup to the tenant.

        Raises:
            NotFoundError: If no todo with this id exists in the tenant
        """
        scope = get_policy("todos", "delete").scope
        async with transaction(self.db):
            todo = await self.repo.get(todo_id, identity, scope)
            if todo is None:
                raise NotFoundError(
                    "Todo not found",
                    resource="todo",
                    resource_id=todo_id,
                )
            owner_id = todo.user_id
            await self.repo.delete(todo)

        logger.info(
            "todo_deleted",
            todo_id=todo_id,
            owner_id=owner_id,
            deleted_by=identity.user_id,
        )


# Type alias for dependency injection
TodoSvc = Annotated[TodoService, Depends(TodoService)]
