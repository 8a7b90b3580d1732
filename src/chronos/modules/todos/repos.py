"""Todo repository for database operations."""

from sqlalchemy import update

from chronos.api.dependencies import DBSession
from chronos.core.database import ScopedRepository
from chronos.modules.todos.models import Todo


class TodoRepository(ScopedRepository[Todo]):
    """Repository for Todo database operations."""

    model = Todo

    def __init__(self, session: DBSession) -> None:
        super().__init__(session)

    async def clear_category(self, category_id: str) -> int:
        """Null out ``category_id`` on every todo referencing a category.

        The sweep is system-level: it matches by category id alone, across
        all tenants and owners.

        Args:
            category_id: The category about to be deleted

        Returns:
            Number of todos updated
        """
        stmt = (
            update(Todo)
            .where(Todo.category_id == category_id)
            .values(category_id=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

