"""In-memory EventRepository."""

from uuid import UUID

from volunteer_hub.domain.entities import Event
from volunteer_hub.domain.enums import EventStatus
from volunteer_hub.infrastructure.persistence.memory.store import (
    InMemoryStore,
    checkpoint,
    detached,
    paginate,
)


class InMemoryEventRepository:
    """Events table. ``for_update`` is accepted and ignored; callers
    serialize with the keyed lock."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, event: Event) -> None:
        await checkpoint()
        self._store.events[event.id] = detached(event)

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Event | None:
        await checkpoint()
        event = self._store.events.get(event_id)
        return detached(event) if event else None

    async def update(self, event: Event) -> None:
        await checkpoint()
        if event.id not in self._store.events:
            raise KeyError(event.id)
        self._store.events[event.id] = detached(event)

    async def delete(self, event_id: UUID) -> None:
        await checkpoint()
        self._store.events.pop(event_id, None)

    async def find_by_creator(
        self, creator_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        await checkpoint()
        matches = sorted(
            (e for e in self._store.events.values() if e.creator_id == creator_id),
            key=lambda e: e.created_at,
            reverse=True,
        )
        return paginate(matches, limit, offset)

    async def find_by_status(
        self, status: EventStatus, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        await checkpoint()
        matches = sorted(
            (e for e in self._store.events.values() if e.status == status),
            key=lambda e: e.event_at,
        )
        return paginate(matches, limit, offset)

    async def count_by_status(self, status: EventStatus) -> int:
        await checkpoint()
        return sum(1 for e in self._store.events.values() if e.status == status)
