"""Authentication service for tenant-scoped login."""

from typing import Annotated

import structlog
from fastapi import Depends

from chronos.api.dependencies import DBSession
from chronos.core.auth.backend import create_access_token, verify_password
from chronos.core.errors import NotFoundError, UnauthorizedError
from chronos.modules.users.models import User
from chronos.modules.users.repos import UserRepository


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def login(
        self,
        tenant_id: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        """Authenticate a user inside a tenant with email and password.

        Args:
            tenant_id: The tenant the user is logging into
            email: User's email address
            password: Plain text password

        Returns:
            Tuple of (user, access token)

        Raises:
            NotFoundError: If no user with that email exists in the tenant
            UnauthorizedError: If the password does not match
        """
        user = await self.user_repo.get_by_email(email, tenant_id)
        if not user:
            raise NotFoundError(
                "User not found",
                error_code="user_not_found",
                resource="user",
            )

        if not user.password_hash or not verify_password(password, user.password_hash):
            logger.info("login_failed", tenant_id=tenant_id, user_id=user.id)
            raise UnauthorizedError(
                "Invalid credentials",
                error_code="invalid_credentials",
            )

        token = create_access_token(user.id, user.tenant_id, user.role)
        logger.info("login_succeeded", tenant_id=tenant_id, user_id=user.id)

        return user, token


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
