"""Failure kinds returned by lifecycle operations.

Each kind maps to one presentation-layer status; the mapping itself lives
with the presentation layer.

Error Types:
- ValidationError: malformed or out-of-range input (past event date)
- NotFoundError: referenced entity absent
- ForbiddenError: authenticated actor lacks permission
- UnauthorizedError: missing, invalid, expired or revoked credential
- ConflictError: state already satisfies the requested transition
- CapacityExceededError: approval would exceed an event's capacity
- BadRequestError: any other business-rule violation
"""

from dataclasses import dataclass

from volunteer_hub.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input field, if any.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced resource does not exist.

    Attributes:
        resource_type: Kind of resource (Event, Registration, User).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource already in the requested state, or a duplicate.

    Attributes:
        resource_type: Kind of resource in conflict.
        conflicting_field: Field carrying the conflict (status, email).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityExceededError(ConflictError):
    """Approving would push an event past its participant limit.

    Attributes:
        max_participants: The event's configured capacity.
        approved_count: Approved registrations at decision time.
    """

    max_participants: int
    approved_count: int


@dataclass(frozen=True, slots=True, kw_only=True)
class UnauthorizedError(DomainError):
    """Credential missing, malformed, expired or revoked."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ForbiddenError(DomainError):
    """Authenticated actor is not permitted to perform the action.

    Attributes:
        required_permission: Capability or ownership rule that failed.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BadRequestError(DomainError):
    """Business-rule violation not covered by a more specific kind."""

    pass
