"""Pydantic schemas for todo operations."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chronos.core.constants import MAX_DUE_DATE_LENGTH
from chronos.modules.todos.models import Priority


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class TodoCreate(BaseModel):
    """Schema for creating a todo."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    is_completed: bool
    priority: Priority
    due_date: str | None = Field(
        None,
        max_length=MAX_DUE_DATE_LENGTH,
        description="ISO 8601 date string",
    )
    category_id: str | None = None

    @field_validator("category_id", "due_date", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        """Treat an empty string as no value."""
        return _blank_to_none(v)


class TodoUpdate(BaseModel):
    """Schema for a partial todo update.

    Only fields present in the request body are applied. ``due_date`` and
    ``category_id`` accept an explicit null, which clears them.
    """

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    is_completed: bool | None = None
    priority: Priority | None = None
    due_date: str | None = Field(None, max_length=MAX_DUE_DATE_LENGTH)
    category_id: str | None = None

    @field_validator("category_id", "due_date", mode="before")
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        """Treat an empty string as an explicit clear."""
        return _blank_to_none(v)

    @field_validator("title", "description", "is_completed", "priority")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        """Reject explicit nulls for fields that cannot be cleared."""
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v


class TodoResponse(BaseModel):
    """Schema for todo response data."""

    id: str
    user_id: str
    tenant_id: str
    category_id: str | None = None
    title: str
    description: str | None = None
    is_completed: bool
    due_date: str | None = None
    completed_at: datetime | None = None
    priority: Priority
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TodoEnvelope(BaseModel):
    """Envelope for a single todo."""

    success: bool = True
    todo: TodoResponse


class TodoListResponse(BaseModel):
    """Envelope for the caller's todos."""

    success: bool = True
    todos: list[TodoResponse]
