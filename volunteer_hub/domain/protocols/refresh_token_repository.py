"""RefreshTokenRepository protocol (refresh credential store port).

Token Lifecycle:
    1. Saved on login/registration; prior records of the same user deleted
    2. Looked up by digest on refresh
    3. Revoked on logout
    4. Expired or revoked records removed by the periodic sweep
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from volunteer_hub.domain.entities.refresh_token import RefreshTokenRecord


class RefreshTokenRepository(Protocol):
    """Refresh credential store."""

    async def save(self, record: RefreshTokenRecord) -> None: ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        """Find a record by digest, including expired and revoked ones.

        Callers decide validity from the returned record.
        """
        ...

    async def revoke(self, record_id: UUID) -> None: ...

    async def delete(self, record_id: UUID) -> None: ...

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every record owned by ``user_id``. Returns rows removed."""
        ...

    async def delete_expired_and_revoked(self, now: datetime) -> int:
        """Housekeeping delete. Returns rows removed."""
        ...
