"""Pytest configuration and shared fixtures.

Services are wired over the in-memory store with a controllable clock and a
mocked logger; the SQL integration tests build their own fixtures on SQLite.
"""

from unittest.mock import Mock

import pytest

from tests.helpers import MutableClock, make_actor
from volunteer_hub.application.services import (
    AccountAdministration,
    AuthenticationService,
    CredentialService,
    EventLifecycleManager,
    RegistrationLifecycleManager,
)
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.infrastructure.persistence.memory import (
    InMemoryEventRepository,
    InMemoryRefreshTokenRepository,
    InMemoryRegistrationRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from volunteer_hub.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    RefreshTokenService,
)

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-characters"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with in-memory stores")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real database"
    )


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock()


@pytest.fixture
def logger() -> Mock:
    return Mock()


@pytest.fixture
def locks() -> KeyedLock:
    return KeyedLock()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def event_repo(store):
    return InMemoryEventRepository(store)


@pytest.fixture
def registration_repo(store):
    return InMemoryRegistrationRepository(store)


@pytest.fixture
def refresh_token_repo(store):
    return InMemoryRefreshTokenRepository(store)


@pytest.fixture
def token_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET_KEY, expiration_minutes=15)


@pytest.fixture
def refresh_token_service() -> RefreshTokenService:
    return RefreshTokenService(expiration_days=7)


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def events(event_repo, registration_repo, locks, logger, clock):
    return EventLifecycleManager(
        event_repo=event_repo,
        registration_repo=registration_repo,
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def registrations(registration_repo, events, locks, logger, clock):
    return RegistrationLifecycleManager(
        registration_repo=registration_repo,
        events=events,
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def credentials(
    refresh_token_repo,
    user_repo,
    token_service,
    refresh_token_service,
    locks,
    logger,
    clock,
):
    return CredentialService(
        refresh_token_repo=refresh_token_repo,
        user_repo=user_repo,
        token_service=token_service,
        refresh_token_service=refresh_token_service,
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def auth(user_repo, password_service, credentials, logger, clock):
    return AuthenticationService(
        user_repo=user_repo,
        password_service=password_service,
        credentials=credentials,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def account_admin(user_repo, refresh_token_repo, locks, logger):
    return AccountAdministration(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        locks=locks,
        logger=logger,
    )


@pytest.fixture
def admin():
    return make_actor(UserRole.ADMIN)


@pytest.fixture
def organizer():
    return make_actor(UserRole.ORGANIZER)


@pytest.fixture
def other_organizer():
    return make_actor(UserRole.ORGANIZER)


@pytest.fixture
def volunteer():
    return make_actor(UserRole.VOLUNTEER)


@pytest.fixture
def other_volunteer():
    return make_actor(UserRole.VOLUNTEER)
