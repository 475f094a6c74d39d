"""Shared test helpers: a controllable clock and entity builders."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from uuid_extensions import uuid7

from volunteer_hub.application.commands import EventDraft
from volunteer_hub.application.services import EventLifecycleManager
from volunteer_hub.core.result import Success
from volunteer_hub.domain.entities import Event, User
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.domain.value_objects import Actor

START = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class MutableClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now += timedelta(**delta)


def make_actor(role: UserRole, user_id: UUID | None = None) -> Actor:
    return Actor(user_id=user_id or uuid7(), role=role)


def make_user(
    role: UserRole = UserRole.VOLUNTEER,
    *,
    email: str | None = None,
    password_hash: str = "$2b$04$notarealhashnotarealhashnotarealhashnotarealhashnot",
    is_active: bool = True,
    is_locked: bool = False,
) -> User:
    user_id = uuid7()
    return User(
        id=user_id,
        email=email or f"{uuid4().hex[:12]}@example.org",
        password_hash=password_hash,
        full_name="Test User",
        role=role,
        is_active=is_active,
        is_locked=is_locked,
    )


def make_draft(
    now: datetime = START,
    *,
    days_ahead: int = 14,
    max_participants: int | None = None,
    deadline_days_ahead: int | None = None,
    title: str = "Beach cleanup",
) -> EventDraft:
    return EventDraft(
        title=title,
        description="Bring gloves.",
        location="North Beach",
        event_at=now + timedelta(days=days_ahead),
        registration_deadline=(
            now + timedelta(days=deadline_days_ahead)
            if deadline_days_ahead is not None
            else None
        ),
        max_participants=max_participants,
    )


async def propose_event(
    events: EventLifecycleManager, organizer: Actor, draft: EventDraft
) -> Event:
    result = await events.propose(organizer, draft)
    assert isinstance(result, Success), result
    return result.value


async def published_event(
    events: EventLifecycleManager,
    organizer: Actor,
    admin: Actor,
    draft: EventDraft,
) -> Event:
    event = await propose_event(events, organizer, draft)
    result = await events.approve(admin, event.id)
    assert isinstance(result, Success), result
    return result.value
