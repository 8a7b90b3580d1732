"""Unit tests for the authentication dependency."""

from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from starlette.requests import Request

from chronos.core.auth.backend import create_access_token
from chronos.core.auth.dependencies import get_identity
from chronos.core.errors import UnauthorizedError
from chronos.core.permissions import Role


def make_request() -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": []})


class TestGetIdentity:
    """Tests for get_identity."""

    async def test_missing_credentials(self):
        """No bearer header is a 401 with the missing-token message."""
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_identity(make_request(), None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Unauthorized: Missing token"

    async def test_invalid_token(self):
        """An undecodable token is a 401 with the invalid-token message."""
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="garbage")

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_identity(make_request(), credentials)

        assert exc_info.value.message == "Unauthorized: Invalid token"

    async def test_valid_token_populates_request_state(self):
        """A valid token yields the identity and records it on the request."""
        user_id, tenant_id = str(uuid4()), str(uuid4())
        token = create_access_token(user_id, tenant_id, Role.ADMIN)
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)
        request = make_request()

        identity = await get_identity(request, credentials)

        assert identity.user_id == user_id
        assert identity.tenant_id == tenant_id
        assert identity.role == Role.ADMIN
        assert request.state.identity == identity
        assert request.state.user_id == user_id
        assert request.state.tenant_id == tenant_id
