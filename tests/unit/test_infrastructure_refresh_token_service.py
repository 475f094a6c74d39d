"""Unit tests for RefreshTokenService."""

import hashlib
from datetime import timedelta

import pytest

from tests.helpers import START
from volunteer_hub.infrastructure.security import RefreshTokenService


@pytest.mark.unit
class TestRefreshTokenService:
    def test_generate_returns_token_and_digest(self):
        token, token_hash = RefreshTokenService().generate_token()

        assert len(token) >= 43
        assert token_hash == hashlib.sha256(token.encode()).hexdigest()

    def test_tokens_are_unique(self):
        service = RefreshTokenService()

        tokens = {service.generate_token()[0] for _ in range(50)}

        assert len(tokens) == 50

    def test_hash_is_deterministic(self):
        service = RefreshTokenService()

        assert service.hash_token("abc") == service.hash_token("abc")
        assert service.hash_token("abc") != service.hash_token("abd")

    def test_expiration_from_issue_time(self):
        service = RefreshTokenService(expiration_days=30)

        assert service.calculate_expiration(START) == START + timedelta(days=30)
