"""Error handling module with the success/message/errors envelope."""

from chronos.core.errors.exceptions import (
    AppException,
    ConflictError,
    ForbiddenError,
    InvalidInviteError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from chronos.core.errors.handlers import (
    ErrorResponse,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "ConflictError",
    # Handlers
    "ErrorResponse",
    "FieldError",
    "ForbiddenError",
    "InvalidInviteError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
