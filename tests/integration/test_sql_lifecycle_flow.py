"""End-to-end lifecycle flows over the SQLAlchemy repositories.

Services are wired on one session, the way the container builders do it.
"""

import pytest

from tests.helpers import make_draft, make_user
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import CapacityExceededError
from volunteer_hub.core.result import Success
from volunteer_hub.domain.enums import RegistrationStatus, UserRole
from volunteer_hub.domain.value_objects import Actor, PageRequest
from volunteer_hub.infrastructure.persistence.repositories import UserRepository

PASSWORD = "Secure123"


async def sign_up(auth, email, role=UserRole.VOLUNTEER):
    result = await auth.register_account(email, PASSWORD, "Test Person", role)
    assert isinstance(result, Success), result
    user = result.value.user
    return Actor(user_id=user.id, role=user.role)


@pytest.fixture
async def admin(session):
    user = make_user(UserRole.ADMIN)
    await UserRepository(session).save(user)
    return Actor(user_id=user.id, role=user.role)


@pytest.mark.integration
class TestEventAndRegistrationFlow:
    async def test_capacity_one_event(
        self, sql_auth, sql_events, sql_registrations, admin, clock
    ):
        # Arrange
        organizer = await sign_up(sql_auth, "org@example.org", UserRole.ORGANIZER)
        alice = await sign_up(sql_auth, "alice@example.org")
        bob = await sign_up(sql_auth, "bob@example.org")
        proposed = await sql_events.propose(
            organizer, make_draft(clock(), max_participants=1)
        )
        clock.advance(minutes=1)
        approved_event = await sql_events.approve(admin, proposed.value.id)
        assert isinstance(approved_event, Success)
        event_id = proposed.value.id

        clock.advance(minutes=1)
        a = (await sql_registrations.register(alice, event_id)).value
        clock.advance(minutes=1)
        b = (await sql_registrations.register(bob, event_id)).value

        # Act
        clock.advance(minutes=1)
        first = await sql_registrations.approve(organizer, a.id)
        clock.advance(minutes=1)
        second = await sql_registrations.approve(organizer, b.id)

        # Assert
        assert isinstance(first, Success)
        assert isinstance(second.error, CapacityExceededError)
        pending = await sql_registrations.list_for_event(
            organizer, event_id, PageRequest(), status=RegistrationStatus.PENDING
        )
        assert [r.id for r in pending.value.items] == [b.id]
        assert await sql_events.approved_count(event_id) == 1

        # A seat freed by unregistering can be given to the next volunteer
        clock.advance(minutes=1)
        assert isinstance(await sql_registrations.unregister(alice, event_id), Success)
        clock.advance(minutes=1)
        assert isinstance(await sql_registrations.approve(organizer, b.id), Success)

        history = await sql_registrations.history(bob, PageRequest())
        assert [r.id for r in history.value.items] == [b.id]

    async def test_withdraw_cascades(
        self, sql_auth, sql_events, sql_registrations, admin, clock
    ):
        organizer = await sign_up(sql_auth, "org@example.org", UserRole.ORGANIZER)
        volunteer = await sign_up(sql_auth, "vol@example.org")
        event = (await sql_events.propose(organizer, make_draft(clock()))).value
        clock.advance(minutes=1)
        await sql_events.approve(admin, event.id)
        clock.advance(minutes=1)
        registration = (await sql_registrations.register(volunteer, event.id)).value
        clock.advance(minutes=1)
        await sql_registrations.approve(organizer, registration.id)

        blocked = await sql_events.withdraw(organizer, event.id)
        withdrawn = await sql_events.withdraw(admin, event.id)

        assert blocked.error.code is ErrorCode.EVENT_HAS_PARTICIPANTS
        assert isinstance(withdrawn, Success)
        assert (await sql_events.get(event.id)).error.code is ErrorCode.EVENT_NOT_FOUND
        history = await sql_registrations.history(volunteer, PageRequest())
        assert history.value.total == 0

    async def test_duplicate_registration_refused(
        self, sql_auth, sql_events, sql_registrations, admin, clock
    ):
        organizer = await sign_up(sql_auth, "org@example.org", UserRole.ORGANIZER)
        volunteer = await sign_up(sql_auth, "vol@example.org")
        event = (await sql_events.propose(organizer, make_draft(clock()))).value
        clock.advance(minutes=1)
        await sql_events.approve(admin, event.id)

        first = await sql_registrations.register(volunteer, event.id)
        second = await sql_registrations.register(volunteer, event.id)

        assert isinstance(first, Success)
        assert second.error.code is ErrorCode.ALREADY_REGISTERED


@pytest.mark.integration
class TestAuthenticationFlow:
    async def test_second_login_replaces_first_session(
        self, sql_auth, sql_credentials
    ):
        await sign_up(sql_auth, "ana@example.org")

        first = (await sql_auth.login("ana@example.org", PASSWORD)).value
        second = (await sql_auth.login("ana@example.org", PASSWORD)).value

        stale = await sql_credentials.refresh(first.credentials.refresh_token)
        fresh = await sql_credentials.refresh(second.credentials.refresh_token)
        assert stale.error.code is ErrorCode.TOKEN_INVALID
        assert fresh.value.refresh_token == second.credentials.refresh_token

    async def test_logout_then_sweep(self, sql_auth, sql_credentials):
        signed_up = await sql_auth.register_account(
            "ana@example.org", PASSWORD, "Ana Lopez"
        )
        refresh_token = signed_up.value.credentials.refresh_token

        await sql_auth.logout(refresh_token)
        removed = await sql_credentials.sweep_expired()

        assert removed == 1
        refreshed = await sql_credentials.refresh(refresh_token)
        assert refreshed.error.code is ErrorCode.TOKEN_INVALID

    async def test_duplicate_email(self, sql_auth):
        await sign_up(sql_auth, "ana@example.org")

        result = await sql_auth.register_account(
            "Ana@Example.org", PASSWORD, "Ana Again"
        )

        assert result.error.code is ErrorCode.EMAIL_ALREADY_EXISTS
