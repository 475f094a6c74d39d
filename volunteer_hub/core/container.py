# mypy: disable-error-code="arg-type"
"""Dependency container (composition root).

Application-scoped singletons (``lru_cache``):
- Logger (structlog console adapter)
- Access token service (JWT)
- Refresh token service
- Password hashing (bcrypt)
- Keyed lock registry (shared by every lifecycle service)
- Database (SQLAlchemy async engine)

Request-scoped builders take an ``AsyncSession`` and wire repositories on
that one session, so the row lock taken while approving a registration covers
the approved-count read.

Usage:
    async with get_database().get_session() as session:
        registrations = build_registration_lifecycle(session)
        result = await registrations.approve(actor, registration_id)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_hub.core.config import get_settings
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from volunteer_hub.application.services import (
        AccountAdministration,
        AuthenticationService,
        CredentialService,
        EventLifecycleManager,
        RegistrationLifecycleManager,
    )
    from volunteer_hub.domain.protocols import (
        AccessTokenProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        RefreshTokenServiceProtocol,
    )
    from volunteer_hub.infrastructure.jobs import RefreshTokenSweeper


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Structured logger singleton.

    Human-readable console output in development, JSON everywhere else.
    """
    from volunteer_hub.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development, level=settings.log_level
    )


@lru_cache()
def get_token_service() -> "AccessTokenProtocol":
    from volunteer_hub.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_refresh_token_service() -> "RefreshTokenServiceProtocol":
    from volunteer_hub.infrastructure.security import RefreshTokenService

    return RefreshTokenService(
        expiration_days=get_settings().refresh_token_expire_days
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    from volunteer_hub.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_lock_registry() -> KeyedLock:
    """The one KeyedLock instance every lifecycle service shares.

    Event and registration managers serialize on the same ``("event", id)``
    keys, so they must see the same registry.
    """
    return KeyedLock()


@lru_cache()
def get_database() -> Database:
    """Database manager singleton. Prefer ``get_db_session`` for sessions."""
    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    async with get_database().get_session() as session:
        yield session


def build_event_lifecycle(session: AsyncSession) -> "EventLifecycleManager":
    from volunteer_hub.application.services import EventLifecycleManager
    from volunteer_hub.infrastructure.persistence.repositories import (
        EventRepository,
        RegistrationRepository,
    )

    return EventLifecycleManager(
        event_repo=EventRepository(session),
        registration_repo=RegistrationRepository(session),
        locks=get_lock_registry(),
        logger=get_logger(),
    )


def build_registration_lifecycle(
    session: AsyncSession,
) -> "RegistrationLifecycleManager":
    from volunteer_hub.application.services import RegistrationLifecycleManager
    from volunteer_hub.infrastructure.persistence.repositories import (
        RegistrationRepository,
    )

    return RegistrationLifecycleManager(
        registration_repo=RegistrationRepository(session),
        events=build_event_lifecycle(session),
        locks=get_lock_registry(),
        logger=get_logger(),
    )


def build_credential_service(session: AsyncSession) -> "CredentialService":
    from volunteer_hub.application.services import CredentialService
    from volunteer_hub.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return CredentialService(
        refresh_token_repo=RefreshTokenRepository(session),
        user_repo=UserRepository(session),
        token_service=get_token_service(),
        refresh_token_service=get_refresh_token_service(),
        locks=get_lock_registry(),
        logger=get_logger(),
    )


def build_authentication_service(session: AsyncSession) -> "AuthenticationService":
    from volunteer_hub.application.services import AuthenticationService
    from volunteer_hub.infrastructure.persistence.repositories import UserRepository

    return AuthenticationService(
        user_repo=UserRepository(session),
        password_service=get_password_service(),
        credentials=build_credential_service(session),
        logger=get_logger(),
    )


def build_account_administration(session: AsyncSession) -> "AccountAdministration":
    from volunteer_hub.application.services import AccountAdministration
    from volunteer_hub.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
        UserRepository,
    )

    return AccountAdministration(
        user_repo=UserRepository(session),
        refresh_token_repo=RefreshTokenRepository(session),
        locks=get_lock_registry(),
        logger=get_logger(),
    )


def build_refresh_token_sweeper() -> "RefreshTokenSweeper":
    """Sweeper that opens a fresh session for every run."""
    from volunteer_hub.infrastructure.jobs import RefreshTokenSweeper

    async def sweep() -> int:
        async with get_database().get_session() as session:
            return await build_credential_service(session).sweep_expired()

    return RefreshTokenSweeper(
        sweep,
        interval_seconds=get_settings().refresh_token_sweep_interval_seconds,
        logger=get_logger(),
    )
