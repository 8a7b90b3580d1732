"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to ``{success: false, message, errors?}`` responses by the
exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details (logged, not rendered)
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is absent or outside the caller's scope.

    Both cases render the same response.

    Example:
        raise NotFoundError("Todo not found", resource="todo", resource_id=todo_id)
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when a globally unique field is already taken.

    Rendered as 400 like other client input errors.

    Example:
        raise ConflictError("Email already exists", details={"email": email})
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 400


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid input data",
            errors=[{"path": ["category_id"], "message": "Category does not exist"}],
        )
    """

    message = "Validation failed"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        self.errors = errors or []
        super().__init__(message=message, **kwargs)


class InvalidInviteError(AppException):
    """Raised when an invite key is unknown or has already been consumed."""

    message = "Invalid or already used invite key"
    error_code = "invalid_invite"
    status_code = 400


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Unauthorized: Invalid token")
    """

    message = "Unauthorized"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when an authenticated caller lacks role or tenant membership.

    Example:
        raise ForbiddenError(
            "Forbidden: Admin access required",
            details={"required_role": "admin"},
        )
    """

    message = "Forbidden"
    error_code = "forbidden"
    status_code = 403
