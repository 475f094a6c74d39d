"""EventRepository protocol (event store port)."""

from typing import Protocol
from uuid import UUID

from volunteer_hub.domain.entities.event import Event
from volunteer_hub.domain.enums import EventStatus


class EventRepository(Protocol):
    """Event store.

    Paginated finders return ``(items, total)``.
    """

    async def save(self, event: Event) -> None:
        """Persist a new event."""
        ...

    async def find_by_id(self, event_id: UUID, *, for_update: bool = False) -> Event | None:
        """Find an event.

        Args:
            event_id: Event identifier.
            for_update: Lock the row until the current transaction ends,
                where the backend supports row locks.
        """
        ...

    async def update(self, event: Event) -> None: ...

    async def delete(self, event_id: UUID) -> None: ...

    async def find_by_creator(
        self, creator_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        """Events proposed by ``creator_id``, newest first."""
        ...

    async def find_by_status(
        self, status: EventStatus, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        """Events in ``status``, ordered by event date ascending."""
        ...

    async def count_by_status(self, status: EventStatus) -> int: ...
