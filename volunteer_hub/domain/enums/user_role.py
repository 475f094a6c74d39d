"""User roles.

Closed set of roles consumed by the access policy decision table
(``volunteer_hub.domain.policies.access_policy``). Call sites compare enum
members, never raw strings.

Roles:
    - volunteer: registers for approved events
    - organizer: proposes events and manages registrations for own events
    - admin: reviews events, manages any registration and user accounts
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so the value can travel inside access token claims
        and database columns unchanged.
    """

    VOLUNTEER = "volunteer"
    ORGANIZER = "organizer"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings."""
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string names a role."""
        return value in cls.values()
