"""Event commands.

Immutable inputs for event lifecycle operations. Commands are data
containers; validation happens in the lifecycle manager so that it can
return typed failures.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class EventDraft:
    """Organizer's event proposal.

    Attributes:
        title: Event title (non-blank).
        description: Free-text description.
        location: Where the event takes place (non-blank).
        event_at: Start instant, strictly in the future (timezone-aware).
        registration_deadline: Optional cut-off, not after ``event_at``.
        max_participants: Optional capacity, at least 1.
    """

    title: str
    description: str
    location: str
    event_at: datetime
    registration_deadline: datetime | None = None
    max_participants: int | None = None


@dataclass(frozen=True, kw_only=True)
class EventRevision:
    """Partial update of an event. ``None`` leaves a field unchanged."""

    title: str | None = None
    description: str | None = None
    location: str | None = None
    event_at: datetime | None = None
    registration_deadline: datetime | None = None
    max_participants: int | None = None
