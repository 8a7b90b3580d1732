"""Category service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from chronos.api.dependencies import DBSession
from chronos.core.auth.membership import MembershipVerifier
from chronos.core.auth.schemas import TokenData
from chronos.core.database import generate_id, transaction, utcnow
from chronos.core.errors import NotFoundError
from chronos.core.permissions import get_policy
from chronos.modules.categories.models import Category
from chronos.modules.categories.repos import CategoryRepository
from chronos.modules.categories.schemas import CategoryCreate, CategoryUpdate
from chronos.modules.todos.repos import TodoRepository


logger = structlog.get_logger()


class CategoryService:
    """Service for category operations.

    Every read and write is scoped by the matching entry of the policy
    table; categories are owner-scoped for all operations.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = CategoryRepository(db)
        self.todo_repo = TodoRepository(db)
        self.membership = MembershipVerifier(db)

    async def create(self, identity: TokenData, data: CategoryCreate) -> Category:
        """Create a category owned by the caller.

        Raises:
            ForbiddenError: If the caller is not a member of the tenant
        """
        async with transaction(self.db):
            await self.membership.ensure_member(identity.tenant_id, identity.user_id)

            category = Category(
                id=generate_id(),
                user_id=identity.user_id,
                tenant_id=identity.tenant_id,
                name=data.name,
                color=data.color,
                icon=data.icon,
                created_at=utcnow(),
            )
            await self.repo.add(category)

        logger.info(
            "category_created",
            category_id=category.id,
            user_id=identity.user_id,
            tenant_id=identity.tenant_id,
        )
        return category

    async def list(self, identity: TokenData) -> list[Category]:
        """List the caller's categories, newest first."""
        scope = get_policy("categories", "list").scope
        return await self.repo.list(identity, scope)

    async def get(self, identity: TokenData, category_id: str) -> Category:
        """Get one of the caller's categories.

        Raises:
            NotFoundError: If absent or not owned by the caller
        """
        scope = get_policy("categories", "get").scope
        category = await self.repo.get(category_id, identity, scope)
        if category is None:
            raise NotFoundError(
                "Category not found",
                resource="category",
                resource_id=category_id,
            )
        return category

    async def update(
        self,
        identity: TokenData,
        category_id: str,
        data: CategoryUpdate,
    ) -> Category:
        """Apply the fields present in ``data`` to one of the caller's categories.

        Raises:
            NotFoundError: If absent or not owned by the caller
        """
        scope = get_policy("categories", "update").scope
        async with transaction(self.db):
            category = await self.repo.get(category_id, identity, scope)
            if category is None:
                raise NotFoundError(
                    "Category not found or unauthorized",
                    resource="category",
                    resource_id=category_id,
                )

            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(category, field, value)
            await self.repo.flush()

        logger.info(
            "category_updated",
            category_id=category.id,
            fields=sorted(data.model_fields_set),
        )
        return category

    async def delete(self, identity: TokenData, category_id: str) -> None:
        """Delete one of the caller's categories.

        Runs in two phases inside one transaction: first every todo
        referencing the category, in any tenant, has its reference cleared;
        then the owner-scoped delete runs. If the delete matches nothing the
        whole unit rolls back, so the sweep leaves no trace.

        Raises:
            NotFoundError: If absent or not owned by the caller
        """
        scope = get_policy("categories", "delete").scope
        async with transaction(self.db):
            cleared = await self.todo_repo.clear_category(category_id)

            category = await self.repo.get(category_id, identity, scope)
            if category is None:
                raise NotFoundError(
                    "Category not found",
                    resource="category",
                    resource_id=category_id,
                )
            await self.repo.delete(category)

        logger.info(
            "category_deleted",
            category_id=category_id,
            user_id=identity.user_id,
            todos_cleared=cleared,
        )


# Type alias for dependency injection
CategorySvc = Annotated[CategoryService, Depends(CategoryService)]
