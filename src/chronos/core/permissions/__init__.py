"""Role-based permissions driven by a per-operation policy table."""

from chronos.core.permissions.dependencies import require_admin, require_policy
from chronos.core.permissions.policy import (
    POLICIES,
    OperationPolicy,
    Role,
    check_policy,
    get_policy,
)


__all__ = [
    "POLICIES",
    "OperationPolicy",
    "Role",
    "check_policy",
    "get_policy",
    "require_admin",
    "require_policy",
]
