"""Registration lifecycle states.

State Machine:
    PENDING → APPROVED       (event creator or admin, capacity-checked)
    PENDING → REJECTED       (event creator or admin)
    APPROVED → completed     (flag, not a status; monotonic)
    any non-completed, non-cancelled → CANCELLED (volunteer unregisters)

Only APPROVED registrations consume event capacity.
"""

from enum import Enum


class RegistrationStatus(str, Enum):
    """Registration lifecycle states."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    @classmethod
    def active(cls) -> tuple["RegistrationStatus", ...]:
        """Statuses that occupy the (user, event) pair."""
        return (cls.PENDING, cls.APPROVED, cls.REJECTED)
