"""Registration lifecycle manager.

State Machine:
    register   (volunteer)       → PENDING
    approve    (event manager)   PENDING → APPROVED   (capacity checked)
    reject     (event manager)   PENDING → REJECTED
    unregister (volunteer)       any active, not completed → CANCELLED
    mark_completed (manager)     APPROVED, completed=False → completed=True

Concurrency:
    ``register`` and every manager transition run under the per-event lock
    (key ``("event", event_id)``) shared with EventLifecycleManager. Approval
    reads the approved count from the store inside that lock, so two
    concurrent approvals for the last seat cannot both succeed.

Authorization order:
    capability gate → lookup (NotFoundError) → ownership (ForbiddenError).
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from uuid_extensions import uuid7

from volunteer_hub.application.services.event_lifecycle import (
    EventLifecycleManager,
    event_lock_key,
)
from volunteer_hub.core.clock import Clock, utc_now
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import (
    BadRequestError,
    CapacityExceededError,
    DomainError,
    NotFoundError,
)
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.entities import Event, Registration
from volunteer_hub.domain.enums import RegistrationStatus
from volunteer_hub.domain.policies import (
    Capability,
    authorize_capability,
    authorize_owner,
)
from volunteer_hub.domain.protocols import LoggerProtocol, RegistrationRepository
from volunteer_hub.domain.value_objects import Actor, Page, PageRequest


class RegistrationLifecycleManager:
    """Registration lifecycle.

    Dependencies (injected via constructor):
        - RegistrationRepository: registration persistence
        - EventLifecycleManager: event lookup and fresh approved counts
        - KeyedLock: the same instance the event manager uses
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        registration_repo: RegistrationRepository,
        events: EventLifecycleManager,
        locks: KeyedLock,
        logger: LoggerProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self._registration_repo = registration_repo
        self._events = events
        self._locks = locks
        self._logger = logger
        self._clock = clock

    async def register(
        self, actor: Actor, event_id: UUID, notes: str | None = None
    ) -> Result[Registration, DomainError]:
        """Register the actor for an event.

        Returns:
            Success(Registration) with status PENDING.
            Failure(ForbiddenError) if the role cannot register.
            Failure(NotFoundError) if the event does not exist.
            Failure(BadRequestError) if the event is not approved, has
            started, is past its deadline, is full, or the actor already
            holds an active registration for it.
        """
        gate = authorize_capability(actor, Capability.REGISTER_FOR_EVENT)
        if isinstance(gate, Failure):
            return gate

        self._logger.debug(
            "registration_attempted",
            event_id=str(event_id),
            user_id=str(actor.user_id),
        )

        async with self._locks.hold(event_lock_key(event_id)):
            found = await self._events.get(event_id, for_update=True)
            if isinstance(found, Failure):
                return found
            event = found.value
            now = self._clock()

            refusal = await self._refuse_registration(event, actor.user_id)
            if refusal is not None:
                self._logger.info(
                    "registration_refused",
                    event_id=str(event_id),
                    user_id=str(actor.user_id),
                    reason=refusal.code.value,
                )
                return Failure(error=refusal)

            registration = Registration(
                id=uuid7(),
                user_id=actor.user_id,
                event_id=event_id,
                status=RegistrationStatus.PENDING,
                notes=notes,
                registered_at=now,
                updated_at=now,
            )
            await self._registration_repo.save(registration)

        self._logger.info(
            "registration_created",
            registration_id=str(registration.id),
            event_id=str(event_id),
            user_id=str(actor.user_id),
        )
        return Success(value=registration)

    async def _refuse_registration(
        self, event: Event, user_id: UUID
    ) -> BadRequestError | None:
        """First business rule that forbids registering, if any."""
        now = self._clock()
        if not event.is_approved:
            return BadRequestError(
                code=ErrorCode.EVENT_NOT_APPROVED,
                message="Cannot register for unapproved event",
            )
        if event.has_started(now):
            return BadRequestError(
                code=ErrorCode.EVENT_ALREADY_STARTED,
                message="Cannot register for past event",
            )
        if not await self._events.can_accept_registrations(event):
            reason = (
                "Registration deadline has passed"
                if not event.registration_window_open(now)
                else "Event is full"
            )
            return BadRequestError(code=ErrorCode.REGISTRATION_CLOSED, message=reason)
        if await self._registration_repo.exists_active_by_user_and_event(
            user_id, event.id
        ):
            return BadRequestError(
                code=ErrorCode.ALREADY_REGISTERED,
                message="Already registered for this event",
            )
        return None

    async def unregister(
        self, actor: Actor, event_id: UUID
    ) -> Result[Registration, DomainError]:
        """Cancel the actor's active registration for an event.

        The registration is kept as CANCELLED; the (user, event) pair is
        free for a new registration afterwards.
        """
        async with self._locks.hold(event_lock_key(event_id)):
            found = await self._events.get(event_id, for_update=True)
            if isinstance(found, Failure):
                return found
            event = found.value

            registration = await self._registration_repo.find_active_by_user_and_event(
                actor.user_id, event_id
            )
            if registration is None:
                return Failure(
                    error=BadRequestError(
                        code=ErrorCode.NOT_REGISTERED,
                        message="You are not registered for this event",
                    )
                )

            now = self._clock()
            if event.has_started(now):
                return Failure(
                    error=BadRequestError(
                        code=ErrorCode.EVENT_ALREADY_STARTED,
                        message="Cannot unregister from past event",
                    )
                )

            cancelled = registration.cancel(now)
            if isinstance(cancelled, Failure):
                return cancelled
            await self._registration_repo.update(registration)

        self._logger.info(
            "registration_cancelled",
            registration_id=str(registration.id),
            event_id=str(event_id),
            user_id=str(actor.user_id),
        )
        return Success(value=registration)

    async def approve(
        self, actor: Actor, registration_id: UUID
    ) -> Result[Registration, DomainError]:
        """Approve a pending registration (event creator or admin).

        Returns:
            Failure(NotFoundError) if the registration or event is absent.
            Failure(ForbiddenError) if the actor does not manage the event.
            Failure(ConflictError) if already approved.
            Failure(BadRequestError) if rejected or cancelled.
            Failure(CapacityExceededError) if the event is full.
        """
        async with self._managed(actor, registration_id) as managed:
            if isinstance(managed, Failure):
                return managed
            registration, event = managed.value

            # Capacity is only consulted for a transition that would take a seat
            if (
                registration.status == RegistrationStatus.PENDING
                and event.max_participants is not None
            ):
                approved = await self._events.approved_count(event.id)
                if approved >= event.max_participants:
                    self._logger.warning(
                        "registration_capacity_exceeded",
                        registration_id=str(registration_id),
                        event_id=str(event.id),
                        max_participants=event.max_participants,
                        approved_count=approved,
                    )
                    return Failure(
                        error=CapacityExceededError(
                            code=ErrorCode.EVENT_CAPACITY_EXCEEDED,
                            message=(
                                "Event has reached maximum capacity "
                                f"({event.max_participants} participants)"
                            ),
                            resource_type="Event",
                            conflicting_field="max_participants",
                            max_participants=event.max_participants,
                            approved_count=approved,
                        )
                    )

            transition = registration.approve(self._clock())
            if isinstance(transition, Failure):
                return transition
            await self._registration_repo.update(registration)

        self._logger.info(
            "registration_approved",
            registration_id=str(registration_id),
            event_id=str(registration.event_id),
            manager_id=str(actor.user_id),
        )
        return Success(value=registration)

    async def reject(
        self, actor: Actor, registration_id: UUID
    ) -> Result[Registration, DomainError]:
        """Reject a pending registration (event creator or admin)."""
        async with self._managed(actor, registration_id) as managed:
            if isinstance(managed, Failure):
                return managed
            registration, _ = managed.value

            transition = registration.reject(self._clock())
            if isinstance(transition, Failure):
                return transition
            await self._registration_repo.update(registration)

        self._logger.info(
            "registration_rejected",
            registration_id=str(registration_id),
            manager_id=str(actor.user_id),
        )
        return Success(value=registration)

    async def mark_completed(
        self, actor: Actor, registration_id: UUID
    ) -> Result[Registration, DomainError]:
        """Flag an approved registration as completed (event creator or admin)."""
        async with self._managed(actor, registration_id) as managed:
            if isinstance(managed, Failure):
                return managed
            registration, _ = managed.value

            transition = registration.mark_completed(self._clock())
            if isinstance(transition, Failure):
                return transition
            await self._registration_repo.update(registration)

        self._logger.info(
            "registration_completed",
            registration_id=str(registration_id),
            manager_id=str(actor.user_id),
        )
        return Success(value=registration)

    async def list_for_event(
        self,
        actor: Actor,
        event_id: UUID,
        page: PageRequest,
        status: RegistrationStatus | None = None,
    ) -> Result[Page[Registration], DomainError]:
        """Registrations of an event, visible to its creator and admins."""
        found = await self._events.get(event_id)
        if isinstance(found, Failure):
            return found
        owner = authorize_owner(actor, found.value.creator_id, "Event")
        if isinstance(owner, Failure):
            return owner

        items, total = await self._registration_repo.find_by_event(
            event_id, status=status, limit=page.limit, offset=page.offset
        )
        return Success(value=Page.of(items, total, page))

    async def list_for_user(
        self, actor: Actor, page: PageRequest
    ) -> Result[Page[Registration], DomainError]:
        """The actor's own registrations, newest first."""
        items, total = await self._registration_repo.find_by_user(
            actor.user_id, limit=page.limit, offset=page.offset
        )
        return Success(value=Page.of(items, total, page))

    async def history(
        self, actor: Actor, page: PageRequest
    ) -> Result[Page[Registration], DomainError]:
        """The actor's approved registrations, latest event first."""
        items, total = await self._registration_repo.find_history_by_user(
            actor.user_id, limit=page.limit, offset=page.offset
        )
        return Success(value=Page.of(items, total, page))

    @asynccontextmanager
    async def _managed(
        self, actor: Actor, registration_id: UUID
    ) -> AsyncIterator[Result[tuple[Registration, Event], DomainError]]:
        """Hold the event lock, then load registration and event fresh.

        The registration is read once to learn its (immutable) event id, the
        lock for that event is taken, and both rows are re-read inside it.
        """
        registration = await self._registration_repo.find_by_id(registration_id)
        if registration is None:
            yield Failure(error=_registration_not_found(registration_id))
            return

        async with self._locks.hold(event_lock_key(registration.event_id)):
            yield await self._load_managed(actor, registration_id)

    async def _load_managed(
        self, actor: Actor, registration_id: UUID
    ) -> Result[tuple[Registration, Event], DomainError]:
        registration = await self._registration_repo.find_by_id(registration_id)
        if registration is None:
            return Failure(error=_registration_not_found(registration_id))
        found = await self._events.get(registration.event_id, for_update=True)
        if isinstance(found, Failure):
            return found
        owner = authorize_owner(actor, found.value.creator_id, "Event")
        if isinstance(owner, Failure):
            return owner
        return Success(value=(registration, found.value))


def _registration_not_found(registration_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.REGISTRATION_NOT_FOUND,
        message="Registration not found",
        resource_type="Registration",
        resource_id=str(registration_id),
    )
