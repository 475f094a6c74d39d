"""In-memory RegistrationRepository."""

from uuid import UUID

from volunteer_hub.domain.entities import Registration
from volunteer_hub.domain.enums import RegistrationStatus
from volunteer_hub.infrastructure.persistence.memory.store import (
    InMemoryStore,
    checkpoint,
    detached,
    paginate,
)


class InMemoryRegistrationRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, registration: Registration) -> None:
        await checkpoint()
        if registration.is_active and self._active(
            registration.user_id, registration.event_id
        ):
            # Mirrors the partial unique index of the SQL schema
            raise ValueError(
                f"Active registration exists for user {registration.user_id} "
                f"and event {registration.event_id}"
            )
        self._store.registrations[registration.id] = detached(registration)

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        await checkpoint()
        registration = self._store.registrations.get(registration_id)
        return detached(registration) if registration else None

    async def find_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> Registration | None:
        await checkpoint()
        registration = self._active(user_id, event_id)
        return detached(registration) if registration else None

    async def exists_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> bool:
        await checkpoint()
        return self._active(user_id, event_id) is not None

    async def find_by_event(
        self,
        event_id: UUID,
        *,
        status: RegistrationStatus | None = None,
        limit: int,
        offset: int,
    ) -> tuple[list[Registration], int]:
        await checkpoint()
        matches = sorted(
            (
                r
                for r in self._store.registrations.values()
                if r.event_id == event_id and (status is None or r.status == status)
            ),
            key=lambda r: r.registered_at,
        )
        return paginate(matches, limit, offset)

    async def find_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        await checkpoint()
        matches = sorted(
            (r for r in self._store.registrations.values() if r.user_id == user_id),
            key=lambda r: r.registered_at,
            reverse=True,
        )
        return paginate(matches, limit, offset)

    async def find_history_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        await checkpoint()
        events = self._store.events
        matches = sorted(
            (
                r
                for r in self._store.registrations.values()
                if r.user_id == user_id
                and r.status == RegistrationStatus.APPROVED
                and r.event_id in events
            ),
            key=lambda r: events[r.event_id].event_at,
            reverse=True,
        )
        return paginate(matches, limit, offset)

    async def count_approved_by_event(self, event_id: UUID) -> int:
        await checkpoint()
        return sum(
            1
            for r in self._store.registrations.values()
            if r.event_id == event_id and r.status == RegistrationStatus.APPROVED
        )

    async def update(self, registration: Registration) -> None:
        await checkpoint()
        if registration.id not in self._store.registrations:
            raise KeyError(registration.id)
        self._store.registrations[registration.id] = detached(registration)

    async def delete_by_event(self, event_id: UUID) -> int:
        await checkpoint()
        doomed = [
            rid
            for rid, r in self._store.registrations.items()
            if r.event_id == event_id
        ]
        for rid in doomed:
            del self._store.registrations[rid]
        return len(doomed)

    def _active(self, user_id: UUID, event_id: UUID) -> Registration | None:
        for registration in self._store.registrations.values():
            if (
                registration.user_id == user_id
                and registration.event_id == event_id
                and registration.is_active
            ):
                return registration
        return None
