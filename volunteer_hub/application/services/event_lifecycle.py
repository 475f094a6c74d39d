"""Event lifecycle manager.

Owns the event approval state machine:

    propose (organizer) → PENDING
    approve (admin)     → APPROVED   (ConflictError if already approved)
    reject  (admin)     → REJECTED   (ConflictError if rejected or published)

Plus revision and withdrawal of events by their creator or an admin.

Concurrency:
    Every mutation of an existing event runs under the per-event lock shared
    with the registration lifecycle manager (key ``("event", event_id)``).
    Approving a registration and shrinking the event's capacity therefore
    cannot interleave.

Architecture:
    - Depends on store protocols only (no infrastructure imports)
    - Returns Result types; never raises for business failures
    - Actor identity and role are explicit parameters
"""

from uuid import UUID

from uuid_extensions import uuid7

from volunteer_hub.application.commands.event_commands import EventDraft, EventRevision
from volunteer_hub.core.clock import Clock, utc_now
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import (
    BadRequestError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.entities.event import (
    Event,
    accepts_registrations,
    validate_schedule,
)
from volunteer_hub.domain.enums import EventStatus
from volunteer_hub.domain.policies import (
    Capability,
    authorize_capability,
    authorize_owner,
)
from volunteer_hub.domain.protocols import (
    EventRepository,
    LoggerProtocol,
    RegistrationRepository,
)
from volunteer_hub.domain.value_objects import Actor, Page, PageRequest


def event_lock_key(event_id: UUID) -> tuple[str, UUID]:
    """Lock key shared by every mutation scoped to one event."""
    return ("event", event_id)


class EventLifecycleManager:
    """Event approval lifecycle.

    Dependencies (injected via constructor):
        - EventRepository: event persistence
        - RegistrationRepository: approved counts and cascade delete
        - KeyedLock: per-event serialization (shared instance)
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        locks: KeyedLock,
        logger: LoggerProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._locks = locks
        self._logger = logger
        self._clock = clock

    async def propose(
        self, actor: Actor, draft: EventDraft
    ) -> Result[Event, DomainError]:
        """Create a PENDING event.

        Returns:
            Success(Event) with status PENDING.
            Failure(ForbiddenError) if the actor cannot propose events.
            Failure(ValidationError) for past dates, a deadline after the
            event, a capacity below 1, or a blank title/location.
        """
        gate = authorize_capability(actor, Capability.PROPOSE_EVENT)
        if isinstance(gate, Failure):
            self._logger.warning(
                "event_propose_forbidden",
                actor_id=str(actor.user_id),
                role=actor.role.value,
            )
            return gate

        now = self._clock()
        blank = _blank_field(title=draft.title, location=draft.location)
        if blank is not None:
            return Failure(error=blank)
        schedule = validate_schedule(
            event_at=draft.event_at,
            registration_deadline=draft.registration_deadline,
            max_participants=draft.max_participants,
            now=now,
        )
        if isinstance(schedule, Failure):
            return schedule

        event = Event(
            id=uuid7(),
            title=draft.title.strip(),
            description=draft.description,
            location=draft.location.strip(),
            event_at=draft.event_at,
            registration_deadline=draft.registration_deadline,
            max_participants=draft.max_participants,
            creator_id=actor.user_id,
            status=EventStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        await self._event_repo.save(event)
        self._logger.info(
            "event_proposed",
            event_id=str(event.id),
            creator_id=str(actor.user_id),
        )
        return Success(value=event)

    async def get(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Result[Event, NotFoundError]:
        """Fetch an event or return NotFoundError.

        ``for_update`` also row-locks the event where the store supports it;
        callers pass it while holding the event lock.
        """
        event = await self._event_repo.find_by_id(event_id, for_update=for_update)
        if event is None:
            return Failure(error=_event_not_found(event_id))
        return Success(value=event)

    async def approve(self, actor: Actor, event_id: UUID) -> Result[Event, DomainError]:
        """Publish an event (admin only).

        Returns:
            Failure(ForbiddenError) for non-admins.
            Failure(NotFoundError) if the event does not exist.
            Failure(ConflictError) if the event is already approved.
        """
        gate = authorize_capability(actor, Capability.REVIEW_EVENT)
        if isinstance(gate, Failure):
            return gate

        async with self._locks.hold(event_lock_key(event_id)):
            event = await self._event_repo.find_by_id(event_id, for_update=True)
            if event is None:
                return Failure(error=_event_not_found(event_id))

            transition = event.approve(actor.user_id, self._clock())
            if isinstance(transition, Failure):
                self._logger.info(
                    "event_approve_conflict",
                    event_id=str(event_id),
                    status=event.status.value,
                )
                return transition

            await self._event_repo.update(event)

        self._logger.info(
            "event_approved", event_id=str(event_id), admin_id=str(actor.user_id)
        )
        return Success(value=event)

    async def reject(self, actor: Actor, event_id: UUID) -> Result[Event, DomainError]:
        """Decline a pending event (admin only).

        Returns:
            Failure(ForbiddenError) for non-admins.
            Failure(NotFoundError) if the event does not exist.
            Failure(ConflictError) if the event is already rejected or
            already approved.
        """
        gate = authorize_capability(actor, Capability.REVIEW_EVENT)
        if isinstance(gate, Failure):
            return gate

        async with self._locks.hold(event_lock_key(event_id)):
            event = await self._event_repo.find_by_id(event_id, for_update=True)
            if event is None:
                return Failure(error=_event_not_found(event_id))

            transition = event.reject(self._clock())
            if isinstance(transition, Failure):
                return transition

            await self._event_repo.update(event)

        self._logger.info(
            "event_rejected", event_id=str(event_id), admin_id=str(actor.user_id)
        )
        return Success(value=event)

    async def approved_count(self, event_id: UUID) -> int:
        """Approved registrations for the event, read fresh from the store."""
        return await self._registration_repo.count_approved_by_event(event_id)

    async def can_accept_registrations(self, event: Event) -> bool:
        """Approved, before deadline and below capacity, as of now.

        The approved count is read from the store on every call.
        """
        count = 0
        if event.max_participants is not None:
            count = await self.approved_count(event.id)
        return accepts_registrations(event, count, self._clock())

    async def revise(
        self, actor: Actor, event_id: UUID, revision: EventRevision
    ) -> Result[Event, DomainError]:
        """Update event details (creator or admin).

        Non-admins cannot revise an approved event. Capacity can never be
        lowered below the number of already approved registrations.
        """
        async with self._locks.hold(event_lock_key(event_id)):
            event = await self._event_repo.find_by_id(event_id, for_update=True)
            if event is None:
                return Failure(error=_event_not_found(event_id))

            owner = authorize_owner(actor, event.creator_id, "Event")
            if isinstance(owner, Failure):
                return owner

            if event.is_approved and not actor.is_admin:
                return Failure(
                    error=BadRequestError(
                        code=ErrorCode.EVENT_LOCKED_FOR_EDITS,
                        message="Cannot update approved events. Please contact admin.",
                    )
                )

            blank = _blank_field(title=revision.title, location=revision.location)
            if blank is not None:
                return Failure(error=blank)

            now = self._clock()
            if revision.event_at is not None and revision.event_at <= now:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.EVENT_DATE_NOT_IN_FUTURE,
                        message="Event date must be in the future",
                        field="event_at",
                    )
                )

            event_at = revision.event_at or event.event_at
            deadline = (
                revision.registration_deadline
                if revision.registration_deadline is not None
                else event.registration_deadline
            )
            capacity = (
                revision.max_participants
                if revision.max_participants is not None
                else event.max_participants
            )
            if deadline is not None and deadline > event_at:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.REGISTRATION_DEADLINE_AFTER_EVENT,
                        message="Registration deadline must be before event date",
                        field="registration_deadline",
                    )
                )
            if revision.max_participants is not None:
                approved = await self.approved_count(event_id)
                if capacity is not None and capacity < max(approved, 1):
                    return Failure(
                        error=ValidationError(
                            code=ErrorCode.INVALID_CAPACITY,
                            message=(
                                "Maximum participants must be at least 1 and not "
                                "below the number of approved registrations"
                            ),
                            field="max_participants",
                            details={"approved_count": str(approved)},
                        )
                    )

            if revision.title is not None:
                event.title = revision.title.strip()
            if revision.description is not None:
                event.description = revision.description
            if revision.location is not None:
                event.location = revision.location.strip()
            event.event_at = event_at
            event.registration_deadline = deadline
            event.max_participants = capacity
            event.updated_at = now
            await self._event_repo.update(event)

        self._logger.info(
            "event_revised", event_id=str(event_id), actor_id=str(actor.user_id)
        )
        return Success(value=event)

    async def withdraw(self, actor: Actor, event_id: UUID) -> Result[None, DomainError]:
        """Delete an event and its registrations (creator or admin).

        Non-admins cannot delete an event that has approved registrations.
        Registrations are deleted first, then the event.
        """
        async with self._locks.hold(event_lock_key(event_id)):
            event = await self._event_repo.find_by_id(event_id, for_update=True)
            if event is None:
                return Failure(error=_event_not_found(event_id))

            owner = authorize_owner(actor, event.creator_id, "Event")
            if isinstance(owner, Failure):
                return owner

            if not actor.is_admin and await self.approved_count(event_id) > 0:
                return Failure(
                    error=BadRequestError(
                        code=ErrorCode.EVENT_HAS_PARTICIPANTS,
                        message=(
                            "Cannot delete events with registrations. "
                            "Please contact admin."
                        ),
                    )
                )

            removed = await self._registration_repo.delete_by_event(event_id)
            await self._event_repo.delete(event_id)

        self._logger.info(
            "event_withdrawn",
            event_id=str(event_id),
            actor_id=str(actor.user_id),
            registrations_removed=removed,
        )
        return Success(value=None)

    async def list_for_creator(
        self, actor: Actor, page: PageRequest
    ) -> Result[Page[Event], DomainError]:
        """Events proposed by the actor, newest first."""
        items, total = await self._event_repo.find_by_creator(
            actor.user_id, limit=page.limit, offset=page.offset
        )
        return Success(value=Page.of(items, total, page))

    async def list_by_status(
        self, status: EventStatus, page: PageRequest
    ) -> Result[Page[Event], DomainError]:
        """Events in ``status``, soonest first."""
        items, total = await self._event_repo.find_by_status(
            status, limit=page.limit, offset=page.offset
        )
        return Success(value=Page.of(items, total, page))

    async def count_by_status(self, status: EventStatus) -> int:
        return await self._event_repo.count_by_status(status)


def _event_not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message="Event not found",
        resource_type="Event",
        resource_id=str(event_id),
    )


def _blank_field(**fields: str | None) -> ValidationError | None:
    """Error for the first provided field that is empty after stripping."""
    for field_name, value in fields.items():
        if value is not None and not value.strip():
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"Event {field_name} must not be blank",
                field=field_name,
            )
    return None
