"""Tenant API routes.

Both endpoints are unauthenticated: they run before a user has a token.
"""

from fastapi import APIRouter, status

from chronos.modules.tenants.schemas import (
    TenantCreateRequest,
    TenantCreateResponse,
    TenantLookupRequest,
    TenantLookupResponse,
    TenantSummary,
)
from chronos.modules.tenants.services import TenantSvc
from chronos.modules.users.schemas import UserSummary


router = APIRouter(prefix="/tenant", tags=["tenant"])


@router.post(
    "/lookup",
    response_model=TenantLookupResponse,
    summary="Lookup tenant by name or slug",
    description="Resolves an active tenant by exact name or slug for the login flow.",
)
async def lookup_tenant(
    data: TenantLookupRequest,
    service: TenantSvc,
) -> TenantLookupResponse:
    """Lookup a tenant."""
    tenant = await service.lookup(data.tenant_name)
    return TenantLookupResponse(
        tenant_id=tenant.id,
        redirect_to=f"/login?tenant={tenant.id}",
    )


@router.post(
    "/create",
    response_model=TenantCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new tenant with admin user",
    description=(
        "Consumes a single-use invite key to create a tenant and its first "
        "admin user. Slug and email must be unused across all tenants."
    ),
)
async def create_tenant(
    data: TenantCreateRequest,
    service: TenantSvc,
) -> TenantCreateResponse:
    """Provision a tenant."""
    tenant, admin = await service.create_tenant(data)
    return TenantCreateResponse(
        tenant=TenantSummary.model_validate(tenant),
        user=UserSummary.model_validate(admin),
    )
