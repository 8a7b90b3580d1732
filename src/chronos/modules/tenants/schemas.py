"""Pydantic schemas for tenant operations."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from chronos.core.constants import (
    MAX_SLUG_LENGTH,
    MAX_TENANT_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    SLUG_PATTERN,
)
from chronos.modules.users.schemas import UserSummary


class TenantLookupRequest(BaseModel):
    """Schema for resolving a tenant by name or slug."""

    tenant_name: str = Field(
        ...,
        alias="tenantName",
        min_length=1,
        max_length=MAX_TENANT_NAME_LENGTH,
    )

    model_config = ConfigDict(populate_by_name=True)


class TenantLookupResponse(BaseModel):
    """Schema for a resolved tenant."""

    success: bool = True
    tenant_id: str = Field(..., serialization_alias="tenantId")
    redirect_to: str = Field(..., serialization_alias="redirectTo")


class TenantCreateRequest(BaseModel):
    """Schema for provisioning a tenant with its first admin user."""

    name: str = Field(..., min_length=1, max_length=MAX_TENANT_NAME_LENGTH)
    slug: str = Field(
        ...,
        min_length=1,
        max_length=MAX_SLUG_LENGTH,
        pattern=SLUG_PATTERN,
    )
    email: EmailStr
    full_name: str = Field(..., alias="fullName", min_length=1)
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description=f"At least {MIN_PASSWORD_LENGTH} characters",
    )
    invite_key: str = Field(..., alias="inviteKey", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class TenantSummary(BaseModel):
    """Public view of a tenant."""

    id: str
    name: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


class TenantCreateResponse(BaseModel):
    """Schema for a freshly provisioned tenant and its admin."""

    success: bool = True
    tenant: TenantSummary
    user: UserSummary
