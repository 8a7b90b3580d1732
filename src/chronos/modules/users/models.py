"""User database models."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chronos.core.auth.schemas import Role
from chronos.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_ROLE_LENGTH
from chronos.core.database.base import Base, CreatedAtMixin, IdMixin, TenantMixin


class User(Base, IdMixin, CreatedAtMixin, TenantMixin):
    """User model representing an authenticated member of one tenant.

    A user belongs to exactly one tenant for its lifetime; the tenant_id
    link is the tenant's HAS_USER relationship.

    Attributes:
        username: Local part of the email address
        email: Globally unique email address (unique across all tenants)
        full_name: User's full name
        password_hash: Bcrypt-hashed password, never serialized outward
        role: ``admin`` or ``member``
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    password_hash: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    role: Mapped[str] = mapped_column(
        String(MAX_ROLE_LENGTH),
        default=Role.MEMBER.value,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, tenant_id={self.tenant_id})>"
