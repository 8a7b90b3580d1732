"""Unit tests for the membership verifier."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from chronos.core.auth.membership import MembershipVerifier
from chronos.core.errors import ForbiddenError


def mock_session(found: str | None) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=found)
    session = MagicMock()
    session.execute = AsyncMock(return_value=result)
    return session


class TestMembershipVerifier:
    """Tests for MembershipVerifier."""

    async def test_verify_true_when_linked(self):
        verifier = MembershipVerifier(mock_session("user-1"))

        assert await verifier.verify("tenant-1", "user-1") is True

    async def test_verify_false_when_unlinked(self):
        verifier = MembershipVerifier(mock_session(None))

        assert await verifier.verify("tenant-1", "user-1") is False

    async def test_ensure_member_passes(self):
        session = mock_session("user-1")
        verifier = MembershipVerifier(session)

        await verifier.ensure_member("tenant-1", "user-1")

        session.execute.assert_awaited_once()

    async def test_ensure_member_forbidden(self):
        verifier = MembershipVerifier(mock_session(None))

        with pytest.raises(ForbiddenError) as exc_info:
            await verifier.ensure_member("tenant-1", "user-1")

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "User does not belong to this tenant"
