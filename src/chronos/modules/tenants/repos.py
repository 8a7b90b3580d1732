"""Tenant and invite key repositories for database operations."""

from datetime import datetime

from sqlalchemy import or_, select, update

from chronos.api.dependencies import DBSession
from chronos.modules.tenants.models import InviteKey, Tenant
from chronos.modules.users.models import User


class TenantRepository:
    """Repository for Tenant database operations.

    Tenant lookups are system-level: they run before any identity exists.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant.

        Args:
            tenant: Tenant instance to create

        Returns:
            The created tenant
        """
        self.session.add(tenant)
        await self.session.flush()
        return tenant

    async def get_by_id(self, tenant_id: str) -> Tenant | None:
        """Get a tenant by id."""
        return await self.session.get(Tenant, tenant_id)

    async def get_active_by_name_or_slug(self, name_or_slug: str) -> Tenant | None:
        """Find an active tenant whose exact name or slug matches.

        Args:
            name_or_slug: Tenant display name or slug

        Returns:
            The first matching active tenant, or None
        """
        stmt = (
            select(Tenant)
            .where(
                or_(Tenant.name == name_or_slug, Tenant.slug == name_or_slug),
                Tenant.is_active == True,  # noqa: E712
            )
            .order_by(Tenant.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def slug_or_email_taken(self, slug: str, email: str) -> bool:
        """Check global uniqueness of a tenant slug and a user email.

        Args:
            slug: Candidate tenant slug
            email: Candidate admin email

        Returns:
            True if either value already exists anywhere in the system
        """
        slug_stmt = select(Tenant.id).where(Tenant.slug == slug).limit(1)
        if (await self.session.execute(slug_stmt)).first() is not None:
            return True

        email_stmt = select(User.id).where(User.email == email).limit(1)
        return (await self.session.execute(email_stmt)).first() is not None


class InviteKeyRepository:
    """Repository for InviteKey database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_unused(self, key: str) -> InviteKey | None:
        """Get an invite key if it exists and has not been consumed."""
        stmt = select(InviteKey).where(
            InviteKey.key == key,
            InviteKey.is_used == False,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def claim(
        self,
        key: str,
        *,
        used_by: str,
        tenant_id: str,
        used_at: datetime,
    ) -> bool:
        """Consume an invite key.

        A single conditional UPDATE guarded by ``is_used = false``; of any
        number of concurrent claims on one key, exactly one affects a row.

        Args:
            key: The invite key
            used_by: Id of the admin user created with this key
            tenant_id: Id of the tenant created with this key
            used_at: Consumption timestamp

        Returns:
            True if this call consumed the key, False if it was unknown or
            already used
        """
        stmt = (
            update(InviteKey)
            .where(
                InviteKey.key == key,
                InviteKey.is_used == False,  # noqa: E712
            )
            .values(
                is_used=True,
                used_at=used_at,
                used_by=used_by,
                tenant_id=tenant_id,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def upsert_unused(self, key: str) -> InviteKey:
        """Create an invite key or reset an existing one to unused.

        Used by seeding only.
        """
        invite = await self.session.get(InviteKey, key)
        if invite is None:
            invite = InviteKey(key=key, is_used=False)
            self.session.add(invite)
        else:
            invite.is_used = False
            invite.used_at = None
            invite.used_by = None
            invite.tenant_id = None
        await self.session.flush()
        return invite

