"""Event domain entity.

Owns the approval state machine and the scheduling rules. The capacity
predicate is a module-level pure function so callers always pass a freshly
read approved count instead of trusting a cached field on the entity.

State Machine:
    PENDING → APPROVED | REJECTED, REJECTED → APPROVED

Invariant:
    ``approved_at`` and ``approved_by`` are set if and only if
    ``status == APPROVED``.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import ConflictError, ValidationError
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.enums import EventStatus


@dataclass
class Event:
    """Volunteer event proposed by an organizer.

    Attributes:
        id: Unique event identifier.
        title: Event title.
        description: Free-text description.
        location: Where the event takes place.
        event_at: When the event starts (UTC).
        creator_id: Organizer (or admin) who proposed the event.
        status: Approval lifecycle status.
        registration_deadline: Registrations close at this instant, if set.
        max_participants: Capacity in approved registrations, if limited.
        approved_by: Admin who approved the event.
        approved_at: When the event was approved.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    title: str
    description: str
    location: str
    event_at: datetime
    creator_id: UUID
    status: EventStatus = EventStatus.PENDING
    registration_deadline: datetime | None = None
    max_participants: int | None = None
    approved_by: UUID | None = None
    approved_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_approved(self) -> bool:
        return self.status == EventStatus.APPROVED

    def has_started(self, now: datetime) -> bool:
        """True once the event start time is reached."""
        return self.event_at <= now

    def registration_window_open(self, now: datetime) -> bool:
        """True while the registration deadline (if any) lies ahead."""
        return self.registration_deadline is None or now < self.registration_deadline

    def approve(self, admin_id: UUID, now: datetime) -> Result[None, ConflictError]:
        """Publish the event.

        Returns:
            Failure(ConflictError) if the event is already approved.
        """
        if self.status == EventStatus.APPROVED:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EVENT_ALREADY_APPROVED,
                    message="Event is already approved",
                    resource_type="Event",
                    conflicting_field="status",
                    details={"event_id": str(self.id)},
                )
            )
        self.status = EventStatus.APPROVED
        self.approved_by = admin_id
        self.approved_at = now
        self.updated_at = now
        return Success(value=None)

    def reject(self, now: datetime) -> Result[None, ConflictError]:
        """Decline a pending event.

        Rejecting twice is a conflict, and so is rejecting a published
        event: approved registrations may already hold seats.
        """
        if self.status == EventStatus.REJECTED:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EVENT_ALREADY_REJECTED,
                    message="Event is already rejected",
                    resource_type="Event",
                    conflicting_field="status",
                    details={"event_id": str(self.id)},
                )
            )
        if self.status == EventStatus.APPROVED:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EVENT_ALREADY_PUBLISHED,
                    message="Approved events cannot be rejected",
                    resource_type="Event",
                    conflicting_field="status",
                    details={"event_id": str(self.id)},
                )
            )
        self.status = EventStatus.REJECTED
        self.approved_by = None
        self.approved_at = None
        self.updated_at = now
        return Success(value=None)


def accepts_registrations(event: Event, approved_count: int, now: datetime) -> bool:
    """Whether ``event`` can take a new registration right now.

    Args:
        event: Event snapshot.
        approved_count: Approved registrations, read just before the call.
        now: Decision instant.

    Returns:
        True when the event is approved, the deadline has not passed and
        capacity (if limited) is not exhausted.
    """
    if event.status != EventStatus.APPROVED:
        return False
    if not event.registration_window_open(now):
        return False
    if event.max_participants is None:
        return True
    return approved_count < event.max_participants


def validate_schedule(
    *,
    event_at: datetime,
    registration_deadline: datetime | None,
    max_participants: int | None,
    now: datetime,
) -> Result[None, ValidationError]:
    """Check event timing and capacity input.

    Rules:
        - ``event_at`` strictly after ``now``
        - deadline, when given, not after ``event_at``
        - capacity, when given, at least 1
    """
    if event_at <= now:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EVENT_DATE_NOT_IN_FUTURE,
                message="Event date must be in the future",
                field="event_at",
            )
        )
    if registration_deadline is not None and registration_deadline > event_at:
        return Failure(
            error=ValidationError(
                code=ErrorCode.REGISTRATION_DEADLINE_AFTER_EVENT,
                message="Registration deadline must be before event date",
                field="registration_deadline",
            )
        )
    if max_participants is not None and max_participants < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_CAPACITY,
                message="Maximum participants must be at least 1",
                field="max_participants",
            )
        )
    return Success(value=None)
