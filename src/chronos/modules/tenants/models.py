"""Tenant and invite key database models."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from chronos.core.constants import (
    ID_LENGTH,
    MAX_INVITE_KEY_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TENANT_NAME_LENGTH,
)
from chronos.core.database.base import Base, IdMixin, TimestampMixin


class Tenant(Base, IdMixin, TimestampMixin):
    """Tenant model representing an isolated workspace.

    All tenant-scoped data references this table via tenant_id.
    Tenants are only created through invite-gated provisioning and the
    slug never changes afterwards.
    """

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(
        String(MAX_TENANT_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    slug: Mapped[str] = mapped_column(
        String(MAX_SLUG_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name}, slug={self.slug})>"


class InviteKey(Base):
    """Single-use key that permits provisioning one tenant.

    Seeded out-of-band. ``is_used`` only ever moves from False to True,
    at which point ``used_by`` names the admin user created with it and
    ``tenant_id`` the tenant.
    """

    __tablename__ = "invite_keys"

    key: Mapped[str] = mapped_column(
        String(MAX_INVITE_KEY_LENGTH),
        primary_key=True,
    )
    is_used: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    used_by: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    tenant_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("tenants.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<InviteKey(key={self.key}, is_used={self.is_used})>"
