"""Unit tests for the operation policy table."""

from datetime import UTC, datetime, timedelta

import pytest

from chronos.core.auth.schemas import TokenData
from chronos.core.database import Scope
from chronos.core.errors import ForbiddenError
from chronos.core.permissions import (
    POLICIES,
    OperationPolicy,
    Role,
    check_policy,
    get_policy,
    require_policy,
)


def identity(role: Role) -> TokenData:
    return TokenData(
        user_id="user-1",
        tenant_id="tenant-1",
        role=role,
        exp=datetime.now(UTC) + timedelta(hours=1),
    )


class TestPolicyTable:
    """The registered policies describe the documented access rules."""

    @pytest.mark.parametrize(
        ("resource", "action", "role", "scope"),
        [
            ("users", "create", Role.ADMIN, Scope.TENANT),
            ("todos", "create", None, Scope.OWNER),
            ("todos", "list", None, Scope.OWNER),
            ("todos", "get", None, Scope.OWNER),
            ("todos", "update", None, Scope.OWNER),
            ("todos", "delete", Role.ADMIN, Scope.TENANT),
            ("categories", "create", None, Scope.OWNER),
            ("categories", "list", None, Scope.OWNER),
            ("categories", "get", None, Scope.OWNER),
            ("categories", "update", None, Scope.OWNER),
            ("categories", "delete", None, Scope.OWNER),
        ],
    )
    def test_policy(self, resource, action, role, scope):
        policy = get_policy(resource, action)

        assert policy.required_role == role
        assert policy.scope == scope

    def test_no_extra_policies(self):
        assert len(POLICIES) == 11

    def test_unknown_operation_raises(self):
        with pytest.raises(KeyError):
            get_policy("todos", "archive")

    def test_policy_name(self):
        assert get_policy("todos", "delete").name == "todos:delete"


class TestOperationPolicy:
    """Tests for OperationPolicy.allows."""

    def test_no_required_role_allows_everyone(self):
        policy = OperationPolicy("things", "read")

        assert policy.allows(Role.ADMIN)
        assert policy.allows(Role.MEMBER)

    def test_required_role(self):
        policy = OperationPolicy("things", "purge", Role.ADMIN, Scope.TENANT)

        assert policy.allows(Role.ADMIN)
        assert policy.allows("admin")
        assert not policy.allows(Role.MEMBER)


class TestCheckPolicy:
    """Tests for check_policy."""

    def test_member_denied_admin_operation(self):
        with pytest.raises(ForbiddenError) as exc_info:
            check_policy(get_policy("todos", "delete"), identity(Role.MEMBER))

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "Forbidden: Admin access required"

    def test_admin_allowed_admin_operation(self):
        check_policy(get_policy("todos", "delete"), identity(Role.ADMIN))

    def test_member_allowed_owner_operation(self):
        check_policy(get_policy("categories", "delete"), identity(Role.MEMBER))

    def test_missing_identity_is_forbidden(self):
        with pytest.raises(ForbiddenError):
            check_policy(get_policy("todos", "list"), None)


class TestRequirePolicy:
    """Tests for the require_policy dependency factory."""

    def test_unknown_operation_fails_at_construction(self):
        with pytest.raises(KeyError):
            require_policy("todos", "archive")

    async def test_dependency_returns_identity(self):
        dependency = require_policy("users", "create")
        admin = identity(Role.ADMIN)

        assert await dependency(admin) is admin

    async def test_dependency_rejects_member(self):
        dependency = require_policy("users", "create")

        with pytest.raises(ForbiddenError):
            await dependency(identity(Role.MEMBER))
