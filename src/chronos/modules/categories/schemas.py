"""Pydantic schemas for category operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chronos.core.constants import (
    HEX_COLOR_PATTERN,
    MAX_CATEGORY_NAME_LENGTH,
    MAX_ICON_LENGTH,
)


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=MAX_CATEGORY_NAME_LENGTH)
    color: str = Field(
        ...,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color code such as #1A2B3C",
    )
    icon: str | None = Field(None, max_length=MAX_ICON_LENGTH)


class CategoryUpdate(BaseModel):
    """Schema for a partial category update.

    Only fields present in the request body are applied.
    """

    name: str | None = Field(None, min_length=1, max_length=MAX_CATEGORY_NAME_LENGTH)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    icon: str | None = Field(None, max_length=MAX_ICON_LENGTH)

    @field_validator("name", "color")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        """Reject explicit nulls for required columns."""
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v


class CategoryResponse(BaseModel):
    """Schema for category response data."""

    id: str
    user_id: str
    tenant_id: str
    name: str
    color: str
    icon: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryEnvelope(BaseModel):
    """Envelope for a single category."""

    success: bool = True
    category: CategoryResponse


class CategoryListResponse(BaseModel):
    """Envelope for the caller's categories."""

    success: bool = True
    categories: list[CategoryResponse]
