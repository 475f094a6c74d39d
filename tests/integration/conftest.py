"""Integration fixtures: a fresh SQLite database per test.

The schema is created from the SQLAlchemy models, so the partial unique
index and check constraints are the ones PostgreSQL gets as well.
"""

import pytest
import pytest_asyncio

from tests.conftest import TEST_SECRET_KEY
from volunteer_hub.application.services import (
    AuthenticationService,
    CredentialService,
    EventLifecycleManager,
    RegistrationLifecycleManager,
)
from volunteer_hub.infrastructure.persistence.database import Database
from volunteer_hub.infrastructure.persistence.repositories import (
    EventRepository,
    RefreshTokenRepository,
    RegistrationRepository,
    UserRepository,
)
from volunteer_hub.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    RefreshTokenService,
)


@pytest_asyncio.fixture
async def test_database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'volunteer_hub.db'}")
    await database.create_all()
    yield database
    await database.drop_all()
    await database.close()


@pytest_asyncio.fixture
async def session(test_database):
    async with test_database.get_session() as session:
        yield session


@pytest.fixture
def sql_events(session, locks, logger, clock):
    return EventLifecycleManager(
        event_repo=EventRepository(session),
        registration_repo=RegistrationRepository(session),
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def sql_registrations(session, sql_events, locks, logger, clock):
    return RegistrationLifecycleManager(
        registration_repo=RegistrationRepository(session),
        events=sql_events,
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def sql_credentials(session, locks, logger, clock):
    return CredentialService(
        refresh_token_repo=RefreshTokenRepository(session),
        user_repo=UserRepository(session),
        token_service=JWTService(secret_key=TEST_SECRET_KEY),
        refresh_token_service=RefreshTokenService(),
        locks=locks,
        logger=logger,
        clock=clock,
    )


@pytest.fixture
def sql_auth(session, sql_credentials, logger, clock):
    return AuthenticationService(
        user_repo=UserRepository(session),
        password_service=BcryptPasswordService(cost_factor=4),
        credentials=sql_credentials,
        logger=logger,
        clock=clock,
    )
