"""Role-based operation policies.

Each protected operation is described by an ``OperationPolicy`` keyed by
``(resource, action)``. A policy names the role a caller must hold and the
scope the operation reaches inside the tenant (any row vs. rows the caller
owns). Routes and services read the table instead of hardcoding checks.
"""

from dataclasses import dataclass

from chronos.core.auth.schemas import Role, TokenData
from chronos.core.database.scoped import Scope
from chronos.core.errors import ForbiddenError


@dataclass(frozen=True)
class OperationPolicy:
    """Capability descriptor for one operation on one resource.

    Attributes:
        resource: Resource name (e.g., "todos")
        action: Operation name (e.g., "delete")
        required_role: Role the caller must hold, or None for any member
        scope: Rows the operation may touch inside the caller's tenant
    """

    resource: str
    action: str
    required_role: Role | None = None
    scope: Scope = Scope.OWNER

    @property
    def name(self) -> str:
        return f"{self.resource}:{self.action}"

    def allows(self, role: Role | str) -> bool:
        """Check whether a caller holding ``role`` may perform the operation."""
        if self.required_role is None:
            return True
        return role == self.required_role


_POLICY_LIST = [
    OperationPolicy("users", "create", Role.ADMIN, Scope.TENANT),
    OperationPolicy("todos", "create"),
    OperationPolicy("todos", "list"),
    OperationPolicy("todos", "get"),
    OperationPolicy("todos", "update"),
    # Any admin may remove any todo in the tenant
    OperationPolicy("todos", "delete", Role.ADMIN, Scope.TENANT),
    OperationPolicy("categories", "create"),
    OperationPolicy("categories", "list"),
    OperationPolicy("categories", "get"),
    OperationPolicy("categories", "update"),
    # Owner-only, no role requirement
    OperationPolicy("categories", "delete"),
]

POLICIES: dict[tuple[str, str], OperationPolicy] = {
    (p.resource, p.action): p for p in _POLICY_LIST
}


def get_policy(resource: str, action: str) -> OperationPolicy:
    """Look up the policy for an operation.

    Raises:
        KeyError: If no policy is registered for the operation
    """
    try:
        return POLICIES[(resource, action)]
    except KeyError:
        raise KeyError(f"No policy registered for {resource}:{action}") from None


def check_policy(policy: OperationPolicy, identity: TokenData | None) -> None:
    """Enforce a policy against the caller's identity.

    A missing identity means the authentication dependency did not run,
    which is treated as forbidden rather than trusted.

    Raises:
        ForbiddenError: If the caller may not perform the operation
    """
    if identity is None:
        raise ForbiddenError(
            "Forbidden: Authentication required",
            error_code="auth_required",
            details={"policy": policy.name},
        )

    if not policy.allows(identity.role):
        raise ForbiddenError(
            f"Forbidden: {str(policy.required_role).capitalize()} access required",
            error_code="permission_denied",
            details={
                "policy": policy.name,
                "required_role": policy.required_role,
                "role": identity.role,
            },
        )
