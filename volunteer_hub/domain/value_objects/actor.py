"""Authenticated actor.

The presentation layer builds an Actor from verified access token claims and
passes it explicitly into every lifecycle call. Nothing in the core reads an
ambient "current user".
"""

from dataclasses import dataclass
from uuid import UUID

from volunteer_hub.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Actor:
    """Identity and role of the caller.

    Attributes:
        user_id: Authenticated user's id (token subject).
        role: Role carried by the access token.
    """

    user_id: UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
