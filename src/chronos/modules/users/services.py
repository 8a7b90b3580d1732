"""User service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from chronos.api.dependencies import DBSession
from chronos.core.auth.backend import hash_password
from chronos.core.auth.membership import MembershipVerifier
from chronos.core.auth.schemas import TokenData
from chronos.core.database import generate_id, transaction, utcnow
from chronos.core.errors import ConflictError, NotFoundError
from chronos.core.utils.text import username_from_email
from chronos.modules.tenants.repos import TenantRepository
from chronos.modules.users.models import User
from chronos.modules.users.repos import UserRepository
from chronos.modules.users.schemas import UserCreate


logger = structlog.get_logger()


class UserService:
    """Service for user management operations.

    Users are created by an admin of the tenant they join.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = UserRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.membership = MembershipVerifier(db)

    async def create_user(self, identity: TokenData, data: UserCreate) -> User:
        """Create a user in the caller's tenant.

        Args:
            identity: The acting admin
            data: User creation data

        Returns:
            The created user

        Raises:
            NotFoundError: If the caller's tenant does not exist
            ForbiddenError: If the caller is not a member of the tenant
            ConflictError: If the email exists in any tenant
        """
        async with transaction(self.db):
            tenant = await self.tenant_repo.get_by_id(identity.tenant_id)
            if tenant is None:
                raise NotFoundError(
                    "Tenant not found",
                    resource="tenant",
                    resource_id=identity.tenant_id,
                )

            await self.membership.ensure_member(tenant.id, identity.user_id)

            if await self.repo.email_exists(data.email):
                raise ConflictError(
                    "Email already exists",
                    error_code="email_exists",
                    details={"email": data.email},
                )

            user = User(
                id=generate_id(),
                tenant_id=tenant.id,
                username=username_from_email(data.email),
                email=data.email,
                full_name=data.full_name,
                password_hash=hash_password(data.password),
                role=data.role.value,
                created_at=utcnow(),
            )
            try:
                await self.repo.create(user)
            except IntegrityError as e:
                # Lost a race with a concurrent insert of the same email
                raise ConflictError(
                    "Email already exists",
                    error_code="email_exists",
                    details={"email": data.email},
                ) from e

        logger.info(
            "user_created",
            user_id=user.id,
            tenant_id=user.tenant_id,
            role=user.role,
            created_by=identity.user_id,
        )
        return user


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
