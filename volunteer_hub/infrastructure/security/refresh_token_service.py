"""Refresh token service.

Token Strategy:
    - Opaque tokens (not JWT)
    - 32 random bytes, urlsafe base64
    - Stored as a SHA-256 hex digest (deterministic, indexed lookup)
    - Expiry tracked in the store, not in the token
"""

import hashlib
import secrets
from datetime import datetime, timedelta


class RefreshTokenService:
    """Refresh token generation and digesting.

    Usage:
        service = RefreshTokenService(expiration_days=7)
        token, token_hash = service.generate_token()
        # store token_hash, return token to the client
        record = await repo.find_by_token_hash(service.hash_token(presented))
    """

    def __init__(self, expiration_days: int = 7) -> None:
        self._expiration_days = expiration_days

    def generate_token(self) -> tuple[str, str]:
        """Generate refresh token and its digest.

        Example:
            >>> token, token_hash = RefreshTokenService().generate_token()
            >>> len(token_hash)
            64
        """
        token = secrets.token_urlsafe(32)
        return token, self.hash_token(token)

    def hash_token(self, token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def calculate_expiration(self, issued_at: datetime) -> datetime:
        return issued_at + timedelta(days=self._expiration_days)
