"""Event approval lifecycle states.

State Machine:
    PENDING → APPROVED
    PENDING → REJECTED
    REJECTED → APPROVED (admin overturns a rejection)

    No transition re-enters PENDING. APPROVED is the only state in which
    the event accepts registrations.
"""

from enum import Enum


class EventStatus(str, Enum):
    """Event lifecycle states."""

    PENDING = "pending"
    """Proposed by an organizer, awaiting admin review."""

    APPROVED = "approved"
    """Published; open for registrations until deadline or capacity."""

    REJECTED = "rejected"
    """Declined by an admin."""
