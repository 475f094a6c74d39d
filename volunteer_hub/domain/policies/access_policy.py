"""Access policy (authorization guard).

Pure functions, no I/O and no side effects. Two decision tables keyed by
the closed ``UserRole`` enum:

    Ownership: who may act on a resource owned by someone else.
        ADMIN      any resource
        ORGANIZER  own resources only
        VOLUNTEER  own resources only

    Capabilities: role gates that do not depend on a resource.
        PROPOSE_EVENT       organizer, admin
        REVIEW_EVENT        admin
        REGISTER_FOR_EVENT  volunteer, organizer, admin
        MANAGE_USERS        admin

Ordering rule for callers: capability gates first (they do not look at the
resource), then the lookup (NotFoundError if absent), then ownership
(ForbiddenError). Every operation follows the same order, so whether a 404
or a 403 comes back never depends on a resource the caller cannot see
through some other operation.
"""

from collections.abc import Callable
from enum import Enum
from uuid import UUID

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import ForbiddenError
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.domain.value_objects.actor import Actor


class Capability(str, Enum):
    """Role-gated actions."""

    PROPOSE_EVENT = "events:propose"
    REVIEW_EVENT = "events:review"
    REGISTER_FOR_EVENT = "registrations:create"
    MANAGE_USERS = "users:manage"


def _any_resource(actor_id: UUID, owner_id: UUID) -> bool:
    return True


def _own_resource(actor_id: UUID, owner_id: UUID) -> bool:
    return actor_id == owner_id


_OWNERSHIP_RULES: dict[UserRole, Callable[[UUID, UUID], bool]] = {
    UserRole.ADMIN: _any_resource,
    UserRole.ORGANIZER: _own_resource,
    UserRole.VOLUNTEER: _own_resource,
}

_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.ADMIN: frozenset(Capability),
    UserRole.ORGANIZER: frozenset(
        {Capability.PROPOSE_EVENT, Capability.REGISTER_FOR_EVENT}
    ),
    UserRole.VOLUNTEER: frozenset({Capability.REGISTER_FOR_EVENT}),
}


def can_act_on(actor_role: UserRole, actor_id: UUID, resource_owner_id: UUID) -> bool:
    """Decide whether an actor may act on a resource owned by someone.

    Args:
        actor_role: Role of the caller.
        actor_id: Caller's user id.
        resource_owner_id: Owner of the resource (event creator,
            registering volunteer).

    Returns:
        True if allowed. Unknown roles are denied.
    """
    rule = _OWNERSHIP_RULES.get(actor_role)
    if rule is None:
        return False
    return rule(actor_id, resource_owner_id)


def has_capability(role: UserRole, capability: Capability) -> bool:
    """Return True if ``role`` is granted ``capability``."""
    return capability in _CAPABILITIES.get(role, frozenset())


def authorize_owner(
    actor: Actor, owner_id: UUID, resource: str
) -> Result[None, ForbiddenError]:
    """Ownership check wrapped as a Result."""
    if can_act_on(actor.role, actor.user_id, owner_id):
        return Success(value=None)
    return Failure(
        error=ForbiddenError(
            code=ErrorCode.RESOURCE_NOT_OWNED,
            message=f"You don't have permission to manage this {resource.lower()}",
            required_permission=f"{resource.lower()}:owner",
            details={"actor_id": str(actor.user_id), "role": actor.role.value},
        )
    )


def authorize_capability(
    actor: Actor, capability: Capability
) -> Result[None, ForbiddenError]:
    """Role-gate check wrapped as a Result."""
    if has_capability(actor.role, capability):
        return Success(value=None)
    return Failure(
        error=ForbiddenError(
            code=ErrorCode.PERMISSION_DENIED,
            message="You don't have permission to perform this action",
            required_permission=capability.value,
            details={"actor_id": str(actor.user_id), "role": actor.role.value},
        )
    )
