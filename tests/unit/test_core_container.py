"""Unit tests for the dependency container.

Tests cover:
- Logger renderer selection by environment
- Singleton factories (lru_cache)
- Request-scoped builders sharing one lock registry and one session

Architecture:
- Settings are patched; no database connection is opened
"""

from unittest.mock import MagicMock, patch

import pytest

from tests.conftest import TEST_SECRET_KEY
from volunteer_hub.core import container
from volunteer_hub.core.config import Settings
from volunteer_hub.core.enums import Environment

FACTORIES = (
    container.get_logger,
    container.get_token_service,
    container.get_refresh_token_service,
    container.get_password_service,
    container.get_lock_registry,
    container.get_database,
)


def make_settings(**overrides) -> Settings:
    values = {
        "secret_key": TEST_SECRET_KEY,
        "database_url": "sqlite+aiosqlite:///:memory:",
        "bcrypt_rounds": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in FACTORIES:
        factory.cache_clear()
    yield
    for factory in FACTORIES:
        factory.cache_clear()


@pytest.fixture
def settings():
    settings = make_settings(access_token_expire_minutes=30)
    with patch("volunteer_hub.core.container.get_settings", return_value=settings):
        yield settings


@pytest.mark.unit
class TestGetLogger:
    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renderer_by_environment(self, environment, use_json):
        settings = make_settings(environment=environment, log_level="DEBUG")
        with (
            patch("volunteer_hub.core.container.get_settings", return_value=settings),
            patch("volunteer_hub.infrastructure.logging.ConsoleAdapter") as adapter,
        ):
            adapter.return_value = MagicMock()

            logger = container.get_logger()

            adapter.assert_called_once_with(use_json=use_json, level="DEBUG")
            assert logger is adapter.return_value


@pytest.mark.unit
class TestSingletons:
    def test_lock_registry_is_shared(self):
        assert container.get_lock_registry() is container.get_lock_registry()

    def test_token_service_uses_settings(self, settings):
        service = container.get_token_service()

        assert service.expires_in_seconds == 30 * 60
        assert service is container.get_token_service()

    def test_database_uses_settings(self, settings):
        database = container.get_database()

        assert database.engine.url.drivername == "sqlite+aiosqlite"
        assert database.engine.url.database == ":memory:"
        assert database is container.get_database()


@pytest.mark.unit
class TestBuilders:
    def test_registration_lifecycle_shares_locks_with_events(self, settings):
        session = MagicMock()

        registrations = container.build_registration_lifecycle(session)

        assert registrations._locks is container.get_lock_registry()
        assert registrations._events._locks is container.get_lock_registry()
        assert registrations._registration_repo.session is session
        assert registrations._events._event_repo.session is session

    def test_authentication_service_wires_credentials(self, settings):
        session = MagicMock()

        auth = container.build_authentication_service(session)

        assert auth._credentials._user_repo.session is session
        assert auth._credentials._locks is container.get_lock_registry()

    def test_account_administration_shares_user_locks(self, settings):
        admin = container.build_account_administration(MagicMock())
        credentials = container.build_credential_service(MagicMock())

        assert admin._locks is credentials._locks

    def test_sweeper_interval_from_settings(self, settings):
        with patch(
            "volunteer_hub.infrastructure.logging.ConsoleAdapter"
        ) as adapter:
            adapter.return_value = MagicMock()

            sweeper = container.build_refresh_token_sweeper()

        assert sweeper._interval == settings.refresh_token_sweep_interval_seconds
        assert not sweeper.running
