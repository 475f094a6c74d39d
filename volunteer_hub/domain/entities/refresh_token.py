"""Refresh token record.

The plaintext refresh token is handed to the client once and never stored;
the record keeps a SHA-256 digest for lookup. Validity is decided from
``expires_at`` and ``revoked`` at read time, so an expired record that the
sweeper has not removed yet is still rejected.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class RefreshTokenRecord:
    """Persisted half of a credential pair.

    Attributes:
        id: Record identifier.
        user_id: Owner of the session.
        token_hash: SHA-256 hex digest of the opaque token.
        expires_at: Instant after which the token is invalid.
        revoked: Set on logout.
        created_at: Issuance timestamp.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    revoked: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def is_valid(self, now: datetime) -> bool:
        return not self.revoked and not self.is_expired(now)
