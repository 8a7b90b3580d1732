"""Pydantic schemas for user operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from chronos.core.auth.schemas import Role
from chronos.core.constants import MAX_NAME_LENGTH, MIN_PASSWORD_LENGTH


# ============================================================
# User Schemas
# ============================================================


class UserCreate(BaseModel):
    """Schema for an admin creating a user in their own tenant."""

    email: EmailStr
    full_name: str = Field(
        ..., alias="fullName", min_length=1, max_length=MAX_NAME_LENGTH
    )
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    role: Role

    model_config = ConfigDict(populate_by_name=True)


class UserSummary(BaseModel):
    """Minimal user view returned by tenant provisioning."""

    id: str
    email: str
    role: Role

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """Schema for user response data. Never includes the password hash."""

    id: str
    tenant_id: str
    username: str
    email: str
    full_name: str
    role: Role
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreateResponse(BaseModel):
    """Envelope for a created user."""

    success: bool = True
    user: UserResponse


# ============================================================
# Authentication Schemas
# ============================================================


class LoginRequest(BaseModel):
    """Schema for email/password login into a known tenant."""

    tenant_id: str = Field(..., alias="tenantId", min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    success: bool = True
    token: str
    user: UserResponse
