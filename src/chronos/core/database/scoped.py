"""Tenant- and owner-scoped repository.

This module provides a generic repository that filters every lookup by
the caller's tenant and, for owner-scoped operations, by the caller's
user id as well. A row outside the caller's scope is reported exactly like
a missing row, so callers cannot discover ids in other tenants.
"""

from enum import StrEnum
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession


class Scope(StrEnum):
    """How far an operation reaches inside a tenant."""

    TENANT = "tenant"  # any row in the caller's tenant
    OWNER = "owner"  # only rows the caller created


class ScopedIdentity(Protocol):
    """The identity attributes a scoped query needs."""

    user_id: str
    tenant_id: str


ModelT = TypeVar("ModelT")


class ScopedRepository(Generic[ModelT]):
    """Repository for models carrying ``tenant_id`` and ``user_id``.

    Subclasses set ``model``. All reads go through ``_apply_scope`` so no
    query can escape the caller's tenant.

    Usage:
        class TodoRepository(ScopedRepository[Todo]):
            model = Todo

        todo = await TodoRepository(session).get(todo_id, identity, Scope.OWNER)
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _apply_scope(
        self,
        statement: Select[Any],
        identity: ScopedIdentity,
        scope: Scope,
    ) -> Select[Any]:
        """Restrict a select statement to the caller's tenant (and ownership)."""
        statement = statement.where(self.model.tenant_id == identity.tenant_id)
        if scope is Scope.OWNER:
            statement = statement.where(self.model.user_id == identity.user_id)
        return statement

    async def list(
        self,
        identity: ScopedIdentity,
        scope: Scope = Scope.OWNER,
    ) -> list[ModelT]:
        """List rows in scope, newest first.

        Args:
            identity: The authenticated caller
            scope: Tenant-wide or owner-only visibility

        Returns:
            Rows ordered by created_at descending
        """
        stmt = self._apply_scope(select(self.model), identity, scope).order_by(
            self.model.created_at.desc()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(
        self,
        entity_id: str,
        identity: ScopedIdentity,
        scope: Scope = Scope.OWNER,
    ) -> ModelT | None:
        """Get a single row by id if it is within scope.

        Returns:
            The row, or None when absent or out of scope
        """
        stmt = self._apply_scope(
            select(self.model).where(self.model.id == entity_id), identity, scope
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add(self, instance: ModelT) -> ModelT:
        """Persist a new row and flush so generated values are populated."""
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def flush(self) -> None:
        """Flush pending attribute changes to the database."""
        await self.session.flush()

    async def delete(self, instance: ModelT) -> None:
        """Delete a row previously loaded through ``get``."""
        await self.session.delete(instance)
        await self.session.flush()
