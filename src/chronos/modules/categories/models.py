"""Category database models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from chronos.core.constants import MAX_CATEGORY_NAME_LENGTH, MAX_ICON_LENGTH
from chronos.core.database.base import (
    Base,
    CreatedAtMixin,
    IdMixin,
    OwnerMixin,
    TenantMixin,
)


class Category(Base, IdMixin, CreatedAtMixin, TenantMixin, OwnerMixin):
    """A user's label for grouping todos.

    Owned by the creating user inside one tenant.

    Attributes:
        name: Display name
        color: ``#RRGGBB`` hex color
        icon: Optional icon identifier
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(MAX_CATEGORY_NAME_LENGTH),
        nullable=False,
    )
    color: Mapped[str] = mapped_column(
        String(7),
        nullable=False,
    )
    icon: Mapped[str | None] = mapped_column(
        String(MAX_ICON_LENGTH),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, user_id={self.user_id})>"
