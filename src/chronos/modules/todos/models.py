"""Todo database models."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chronos.core.constants import ID_LENGTH, MAX_DUE_DATE_LENGTH, MAX_PRIORITY_LENGTH
from chronos.core.database.base import (
    Base,
    IdMixin,
    OwnerMixin,
    TenantMixin,
    TimestampMixin,
)


class Priority(StrEnum):
    """Todo priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Todo(Base, IdMixin, TimestampMixin, TenantMixin, OwnerMixin):
    """A task owned by the user who created it.

    ``completed_at`` is set exactly when ``is_completed`` is true at the
    last write. ``category_id`` is either null or names a category that
    existed when it was assigned; deleting that category clears it.

    Attributes:
        title: Short task title
        description: Optional longer text
        is_completed: Completion flag
        due_date: Optional due date as sent by the client
        completed_at: When the todo was last marked complete
        priority: low, medium or high
        category_id: Optional category reference
    """

    __tablename__ = "todos"

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    is_completed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    due_date: Mapped[str | None] = mapped_column(
        String(MAX_DUE_DATE_LENGTH),
        nullable=True,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    priority: Mapped[str] = mapped_column(
        String(MAX_PRIORITY_LENGTH),
        default=Priority.MEDIUM.value,
        nullable=False,
    )
    category_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, title={self.title!r}, user_id={self.user_id})>"
