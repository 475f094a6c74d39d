"""Unit tests for Settings (pydantic-settings).

Tests cover:
- Loading from environment variables
- Validation of secret length, bcrypt rounds and lifetimes
- Environment helpers
"""

import pytest
from pydantic import ValidationError

from volunteer_hub.core.config import Settings
from volunteer_hub.core.enums import Environment

VALID_SECRET = "s" * 32


@pytest.mark.unit
class TestSettings:
    def test_loads_values_from_environment(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("SECRET_KEY", VALID_SECRET)
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.secret_key == VALID_SECRET
        assert settings.environment is Environment.PRODUCTION
        assert settings.access_token_expire_minutes == 5
        assert settings.is_production
        assert not settings.is_development

    def test_defaults(self):
        settings = Settings(_env_file=None, secret_key=VALID_SECRET)

        assert settings.refresh_token_expire_days == 7
        assert settings.access_token_expire_minutes == 15
        assert settings.bcrypt_rounds == 12
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_secret_key_is_required(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError, match="at least 32"):
            Settings(_env_file=None, secret_key="short")

    @pytest.mark.parametrize("rounds", [3, 21])
    def test_bcrypt_rounds_out_of_range_rejected(self, rounds):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, secret_key=VALID_SECRET, bcrypt_rounds=rounds)

    @pytest.mark.parametrize(
        "field",
        [
            "access_token_expire_minutes",
            "refresh_token_expire_days",
            "refresh_token_sweep_interval_seconds",
        ],
    )
    def test_non_positive_lifetimes_rejected(self, field):
        with pytest.raises(ValidationError, match="positive"):
            Settings(_env_file=None, secret_key=VALID_SECRET, **{field: 0})
