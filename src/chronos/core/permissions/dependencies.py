"""Permission dependencies for route protection.

This module turns entries of the policy table into FastAPI dependencies
that run after authentication and before the route handler.
"""

from collections.abc import Awaitable, Callable

from chronos.core.auth.dependencies import CurrentIdentity
from chronos.core.auth.schemas import TokenData
from chronos.core.permissions.policy import check_policy, get_policy


def require_policy(
    resource: str, action: str
) -> Callable[[TokenData], Awaitable[TokenData]]:
    """Dependency factory enforcing the policy for ``resource:action``.

    The policy is resolved when the route module is imported, so a typo in
    a resource or action name fails at startup rather than per request.

    Usage:
        @router.delete("/{todo_id}")
        async def delete_todo(
            identity: Annotated[TokenData, Depends(require_policy("todos", "delete"))],
        ):
            ...

    Args:
        resource: The resource being accessed (e.g., "todos")
        action: The action being performed (e.g., "delete")

    Returns:
        Dependency returning the verified identity

    Raises:
        KeyError: If no policy is registered for the operation
    """
    policy = get_policy(resource, action)

    async def dependency(identity: CurrentIdentity) -> TokenData:
        check_policy(policy, identity)
        return identity

    dependency.__name__ = f"require_{resource}_{action}"
    return dependency


# Guard for admin-only user management
require_admin = require_policy("users", "create")
