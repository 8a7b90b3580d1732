"""Exception handlers rendering the ``{success: false, ...}`` envelope.

Every error response carries ``success: false`` and a human ``message``.
Validation failures add ``errors``, a list of ``{path, message}`` issues
where ``path`` is the list of keys leading to the offending field.
"""

from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from chronos.core.errors.exceptions import AppException, ValidationError


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()


class FieldError(BaseModel):
    """Represents a single field validation issue."""

    path: list[str | int]
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request.

    Attributes:
        success: Always False
        message: Human-readable explanation
        code: Machine-readable error code
        errors: Field-level issues (validation errors only)
    """

    success: bool = False
    message: str
    code: str | None = None
    errors: list[FieldError] | None = None


def _validation_issues(raw_errors: Any) -> list[FieldError]:
    """Convert Pydantic error dicts into path/message issues."""
    issues: list[FieldError] = []
    for error in raw_errors:
        # Skip the "body" prefix FastAPI adds to request payload locations
        loc = [part for part in error.get("loc", ()) if part != "body"]
        issues.append(
            FieldError(
                path=[p if isinstance(p, int) else str(p) for p in loc],
                message=error.get("msg", "Invalid value"),
            )
        )
    return issues


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application-specific exceptions."""
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
        details=exc.details,
    )

    errors = None
    if isinstance(exc, ValidationError) and exc.errors:
        errors = [FieldError.model_validate(e) for e in exc.errors]

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            message=exc.message,
            code=exc.error_code,
            errors=errors,
        ).model_dump(exclude_none=True),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 with per-field issues."""
    errors = _validation_issues(exc.errors())

    logger.warning(
        "validation_error",
        path=str(request.url.path),
        error_count=len(errors),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            message="Validation failed",
            code="validation_error",
            errors=errors,
        ).model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    The actual error is logged but never exposed to clients.
    """
    logger.exception(
        "unhandled_exception",
        path=str(request.url.path),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            message="Internal server error",
            code="internal_error",
        ).model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Call this function during app initialization:

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(
        AppException, cast("ExceptionHandler", app_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(Exception, generic_exception_handler)
