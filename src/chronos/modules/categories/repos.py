"""Category repository for database operations."""

from sqlalchemy import select

from chronos.api.dependencies import DBSession
from chronos.core.database import ScopedRepository
from chronos.modules.categories.models import Category


class CategoryRepository(ScopedRepository[Category]):
    """Repository for Category database operations."""

    model = Category

    def __init__(self, session: DBSession) -> None:
        super().__init__(session)

    async def exists_in_tenant(self, category_id: str, tenant_id: str) -> bool:
        """Check that a category exists inside a tenant, whoever owns it."""
        stmt = select(Category.id).where(
            Category.id == category_id,
            Category.tenant_id == tenant_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

