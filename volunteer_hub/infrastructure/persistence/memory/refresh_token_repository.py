"""In-memory RefreshTokenRepository."""

from datetime import datetime
from uuid import UUID

from volunteer_hub.domain.entities import RefreshTokenRecord
from volunteer_hub.infrastructure.persistence.memory.store import (
    InMemoryStore,
    checkpoint,
    detached,
)


class InMemoryRefreshTokenRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, record: RefreshTokenRecord) -> None:
        await checkpoint()
        self._store.refresh_tokens[record.id] = detached(record)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        await checkpoint()
        for record in self._store.refresh_tokens.values():
            if record.token_hash == token_hash:
                return detached(record)
        return None

    async def revoke(self, record_id: UUID) -> None:
        await checkpoint()
        record = self._store.refresh_tokens.get(record_id)
        if record is not None:
            record.revoked = True

    async def delete(self, record_id: UUID) -> None:
        await checkpoint()
        self._store.refresh_tokens.pop(record_id, None)

    async def delete_by_user(self, user_id: UUID) -> int:
        await checkpoint()
        return self._delete_where(lambda r: r.user_id == user_id)

    async def delete_expired_and_revoked(self, now: datetime) -> int:
        await checkpoint()
        return self._delete_where(lambda r: r.revoked or r.is_expired(now))

    def _delete_where(self, predicate) -> int:
        doomed = [rid for rid, r in self._store.refresh_tokens.items() if predicate(r)]
        for rid in doomed:
            del self._store.refresh_tokens[rid]
        return len(doomed)
