"""Todo API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from chronos.api.schemas import MessageResponse
from chronos.core.auth.schemas import TokenData
from chronos.core.permissions import require_policy
from chronos.modules.todos.schemas import (
    TodoCreate,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoUpdate,
)
from chronos.modules.todos.services import TodoSvc


router = APIRouter(prefix="/todos", tags=["todos"])


@router.post(
    "",
    response_model=TodoEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create todo",
)
async def create_todo(
    data: TodoCreate,
    identity: Annotated[TokenData, Depends(require_policy("todos", "create"))],
    service: TodoSvc,
) -> TodoEnvelope:
    """Create a todo owned by the caller."""
    todo = await service.create(identity, data)
    return TodoEnvelope(todo=TodoResponse.model_validate(todo))


@router.get(
    "",
    response_model=TodoListResponse,
    summary="List todos",
    description="Returns the caller's own todos, newest first.",
)
async def list_todos(
    identity: Annotated[TokenData, Depends(require_policy("todos", "list"))],
    service: TodoSvc,
) -> TodoListResponse:
    """List the caller's todos."""
    todos = await service.list(identity)
    return TodoListResponse(todos=[TodoResponse.model_validate(t) for t in todos])


@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Get todo",
)
async def get_todo(
    todo_id: str,
    identity: Annotated[TokenData, Depends(require_policy("todos", "get"))],
    service: TodoSvc,
) -> TodoEnvelope:
    """Get one of the caller's todos."""
    todo = await service.get(identity, todo_id)
    return TodoEnvelope(todo=TodoResponse.model_validate(todo))


@router.put(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Update todo",
    description="Applies only the fields present in the request body.",
)
async def update_todo(
    todo_id: str,
    data: TodoUpdate,
    identity: Annotated[TokenData, Depends(require_policy("todos", "update"))],
    service: TodoSvc,
) -> TodoEnvelope:
    """Partially update one of the caller's todos."""
    todo = await service.update(identity, todo_id, data)
    return TodoEnvelope(todo=TodoResponse.model_validate(todo))


@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    summary="Delete todo (Admin only)",
    description="Any admin may delete any todo in their tenant.",
)
async def delete_todo(
    todo_id: str,
    identity: Annotated[TokenData, Depends(require_policy("todos", "delete"))],
    service: TodoSvc,
) -> MessageResponse:
    """Delete a todo in the caller's tenant."""
    await service.delete(identity, todo_id)
    return MessageResponse(message="Todo deleted")
