"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and verifying the bearer JWT
- Exposing the verified identity to route handlers
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chronos.core.auth.backend import decode_token
from chronos.core.auth.schemas import TokenData
from chronos.core.errors import UnauthorizedError


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and verify the caller's identity from the Authorization header.

    On success the identity is attached to ``request.state`` and bound to
    the structlog context for downstream logging.

    Args:
        request: The incoming request
        credentials: Bearer token credentials from the request

    Returns:
        Verified token data

    Raises:
        UnauthorizedError: If the header is missing or malformed, or the
            token is invalid or expired
    """
    if not credentials:
        raise UnauthorizedError(
            "Unauthorized: Missing token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Unauthorized: Invalid token",
            error_code="invalid_token",
        )

    request.state.identity = token_data
    request.state.user_id = token_data.user_id
    request.state.tenant_id = token_data.tenant_id

    structlog.contextvars.bind_contextvars(
        tenant_id=token_data.tenant_id,
        user_id=token_data.user_id,
    )

    return token_data


# Type alias for cleaner dependency injection
CurrentIdentity = Annotated[TokenData, Depends(get_identity)]
