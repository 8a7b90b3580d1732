"""Tenant membership verification.

Every tenant-scoped mutation re-checks against the database that the
token's user is still linked to the token's tenant before acting, so a
stale or forged pairing of claims is refused even when the signature holds.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chronos.core.errors import ForbiddenError
from chronos.modules.users.models import User


logger = structlog.get_logger()


class MembershipVerifier:
    """Confirms a user is linked to a tenant."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def verify(self, tenant_id: str, user_id: str) -> bool:
        """Check whether ``user_id`` belongs to ``tenant_id``.

        Args:
            tenant_id: The claimed tenant's id
            user_id: The claimed user's id

        Returns:
            True if the user exists and belongs to the tenant
        """
        stmt = select(User.id).where(
            User.id == user_id,
            User.tenant_id == tenant_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def ensure_member(self, tenant_id: str, user_id: str) -> None:
        """Require membership.

        Raises:
            ForbiddenError: If the user does not belong to the tenant
        """
        if not await self.verify(tenant_id, user_id):
            logger.warning(
                "membership_denied",
                tenant_id=tenant_id,
                user_id=user_id,
            )
            raise ForbiddenError(
                "User does not belong to this tenant",
                error_code="not_tenant_member",
            )
