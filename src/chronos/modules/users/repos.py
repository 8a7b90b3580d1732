"""User repository for database operations."""

from sqlalchemy import select

from chronos.api.dependencies import DBSession
from chronos.modules.users.models import User


class UserRepository:
    """Repository for User database operations.

    Handles all database interactions for the User model.
    All queries are scoped to a tenant when appropriate.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User instance to create

        Returns:
            The created user with ID populated
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_email(self, email: str, tenant_id: str) -> User | None:
        """Get a user by email address inside one tenant.

        Args:
            email: The user's email
            tenant_id: The tenant to search

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.email == email, User.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """Check whether an email is taken in any tenant.

        Emails are globally unique, so this is a system-level query.
        """
        stmt = select(User.id).where(User.email == email).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

