"""RegistrationRepository protocol (registration store port)."""

from typing import Protocol
from uuid import UUID

from volunteer_hub.domain.entities.registration import Registration
from volunteer_hub.domain.enums import RegistrationStatus


class RegistrationRepository(Protocol):
    """Registration store.

    "Active" means any status other than CANCELLED. Paginated finders return
    ``(items, total)``.
    """

    async def save(self, registration: Registration) -> None:
        """Persist a new registration."""
        ...

    async def find_by_id(self, registration_id: UUID) -> Registration | None: ...

    async def find_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> Registration | None: ...

    async def exists_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> bool: ...

    async def find_by_event(
        self,
        event_id: UUID,
        *,
        status: RegistrationStatus | None = None,
        limit: int,
        offset: int,
    ) -> tuple[list[Registration], int]:
        """Registrations for an event, oldest first, optionally by status."""
        ...

    async def find_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        """All registrations of a user, newest first."""
        ...

    async def find_history_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        """Approved registrations of a user, latest event date first."""
        ...

    async def count_approved_by_event(self, event_id: UUID) -> int:
        """Approved registrations for an event, read from the store."""
        ...

    async def update(self, registration: Registration) -> None: ...

    async def delete_by_event(self, event_id: UUID) -> int:
        """Delete every registration of an event. Returns rows removed."""
        ...
