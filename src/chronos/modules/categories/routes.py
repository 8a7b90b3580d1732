"""Category API routes.

All operations are owner-scoped: a caller only ever sees and changes the
categories they created.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from chronos.api.schemas import MessageResponse
from chronos.core.auth.schemas import TokenData
from chronos.core.permissions import require_policy
from chronos.modules.categories.schemas import (
    CategoryCreate,
    CategoryEnvelope,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from chronos.modules.categories.services import CategorySvc


router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    data: CategoryCreate,
    identity: Annotated[TokenData, Depends(require_policy("categories", "create"))],
    service: CategorySvc,
) -> CategoryEnvelope:
    """Create a category owned by the caller."""
    category = await service.create(identity, data)
    return CategoryEnvelope(category=CategoryResponse.model_validate(category))


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List categories",
)
async def list_categories(
    identity: Annotated[TokenData, Depends(require_policy("categories", "list"))],
    service: CategorySvc,
) -> CategoryListResponse:
    """List the caller's categories, newest first."""
    categories = await service.list(identity)
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c) for c in categories],
    )


@router.get(
    "/{category_id}",
    response_model=CategoryEnvelope,
    summary="Get category",
)
async def get_category(
    category_id: str,
    identity: Annotated[TokenData, Depends(require_policy("categories", "get"))],
    service: CategorySvc,
) -> CategoryEnvelope:
    """Get one of the caller's categories."""
    category = await service.get(identity, category_id)
    return CategoryEnvelope(category=CategoryResponse.model_validate(category))


@router.put(
    "/{category_id}",
    response_model=CategoryEnvelope,
    summary="Update category",
    description="Applies only the fields present in the request body.",
)
async def update_category(
    category_id: str,
    data: CategoryUpdate,
    identity: Annotated[TokenData, Depends(require_policy("categories", "update"))],
    service: CategorySvc,
) -> CategoryEnvelope:
    """Partially update one of the caller's categories."""
    category = await service.update(identity, category_id, data)
    return CategoryEnvelope(category=CategoryResponse.model_validate(category))


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete category",
    description="Clears the category from every todo referencing it, then deletes it.",
)
async def delete_category(
    category_id: str,
    identity: Annotated[TokenData, Depends(require_policy("categories", "delete"))],
    service: CategorySvc,
) -> MessageResponse:
    """Delete one of the caller's categories."""
    await service.delete(identity, category_id)
    return MessageResponse(message="Category deleted")
