"""Authentication schemas for token handling."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class Role(StrEnum):
    """Roles a user can hold inside a tenant."""

    ADMIN = "admin"
    MEMBER = "member"


class TokenData(BaseModel):
    """Verified identity extracted from a JWT.

    Attributes:
        user_id: The user's id (``userId`` claim)
        tenant_id: The tenant's id (``tenantId`` claim)
        role: The user's role inside the tenant
        exp: Token expiration time
    """

    user_id: str
    tenant_id: str
    role: Role
    exp: datetime
