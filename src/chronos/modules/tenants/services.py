"""Tenant service: lookup and invite-gated provisioning."""

from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from chronos.api.dependencies import DBSession
from chronos.core.auth.backend import hash_password
from chronos.core.auth.schemas import Role
from chronos.core.database import generate_id, transaction, utcnow
from chronos.core.errors import ConflictError, InvalidInviteError, NotFoundError
from chronos.core.utils.text import username_from_email
from chronos.modules.tenants.models import Tenant
from chronos.modules.tenants.repos import InviteKeyRepository, TenantRepository
from chronos.modules.tenants.schemas import TenantCreateRequest
from chronos.modules.users.models import User
from chronos.modules.users.repos import UserRepository


logger = structlog.get_logger()


class TenantService:
    """Service for resolving and provisioning tenants.

    Neither operation requires authentication: both run before login.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = TenantRepository(db)
        self.invite_repo = InviteKeyRepository(db)
        self.user_repo = UserRepository(db)

    async def lookup(self, name_or_slug: str) -> Tenant:
        """Resolve an active tenant by exact name or slug.

        Raises:
            NotFoundError: If no active tenant matches
        """
        tenant = await self.repo.get_active_by_name_or_slug(name_or_slug)
        if tenant is None:
            raise NotFoundError("Tenant not found", resource="tenant")
        return tenant

    async def create_tenant(self, data: TenantCreateRequest) -> tuple[Tenant, User]:
        """Provision a tenant and its first admin, consuming an invite key.

        The uniqueness checks, tenant insert, admin insert and invite key
        consumption share one transaction: either all of them commit or
        none does.

        Args:
            data: Validated provisioning request

        Returns:
            Tuple of (tenant, admin user)

        Raises:
            ConflictError: If the slug or email already exists anywhere
            InvalidInviteError: If the invite key is unknown or already used
        """
        async with transaction(self.db):
            if await self.repo.slug_or_email_taken(data.slug, data.email):
                raise self._conflict(data)

            if await self.invite_repo.get_unused(data.invite_key) is None:
                raise InvalidInviteError(details={"invite_key": data.invite_key})

            now = utcnow()
            tenant = Tenant(
                id=generate_id(),
                name=data.name,
                slug=data.slug,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            admin = User(
                id=generate_id(),
                tenant_id=tenant.id,
                username=username_from_email(data.email),
                email=data.email,
                full_name=data.full_name,
                password_hash=hash_password(data.password),
                role=Role.ADMIN.value,
                created_at=now,
            )

            try:
                await self.repo.create(tenant)
                await self.user_repo.create(admin)
            except IntegrityError as e:
                raise self._conflict(data) from e

            # Authoritative single-use check; a concurrent provisioning
            # request may have consumed the key since get_unused
            claimed = await self.invite_repo.claim(
                data.invite_key,
                used_by=admin.id,
                tenant_id=tenant.id,
                used_at=now,
            )
            if not claimed:
                raise InvalidInviteError(details={"invite_key": data.invite_key})

        logger.info(
            "tenant_created",
            tenant_id=tenant.id,
            slug=tenant.slug,
            admin_id=admin.id,
        )
        return tenant, admin

    @staticmethod
    def _conflict(data: TenantCreateRequest) -> ConflictError:
        return ConflictError(
            "Tenant slug or email already exists",
            error_code="tenant_exists",
            details={"slug": data.slug, "email": data.email},
        )


# Type alias for dependency injection
TenantSvc = Annotated[TenantService, Depends(TenantService)]
