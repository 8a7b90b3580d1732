"""User API routes.

User management (admin only) and tenant-scoped login.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from chronos.core.auth.schemas import TokenData
from chronos.core.auth.service import AuthSvc
from chronos.core.permissions import require_admin
from chronos.modules.users.schemas import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserCreateResponse,
    UserResponse,
)
from chronos.modules.users.services import UserSvc


router = APIRouter(prefix="/user", tags=["user"])


@router.post(
    "/create",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user (Admin only)",
    description="Creates an admin or member user in the caller's tenant.",
)
async def create_user(
    data: UserCreate,
    identity: Annotated[TokenData, Depends(require_admin)],
    service: UserSvc,
) -> UserCreateResponse:
    """Create a user in the current tenant."""
    user = await service.create_user(identity, data)
    return UserCreateResponse(user=UserResponse.model_validate(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Authenticate with email and password inside a tenant to receive a JWT.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> LoginResponse:
    """Login with email and password."""
    user, token = await service.login(
        tenant_id=data.tenant_id,
        email=data.email,
        password=data.password,
    )
    return LoginResponse(token=token, user=UserResponse.model_validate(user))
