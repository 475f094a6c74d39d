"""In-memory UserRepository."""

from uuid import UUID

from volunteer_hub.domain.entities import User
from volunteer_hub.infrastructure.persistence.memory.store import (
    InMemoryStore,
    checkpoint,
    detached,
)


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UUID) -> User | None:
        await checkpoint()
        user = self._store.users.get(user_id)
        return detached(user) if user else None

    async def find_by_email(self, email: str) -> User | None:
        await checkpoint()
        wanted = email.lower()
        for user in self._store.users.values():
            if user.email.lower() == wanted:
                return detached(user)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> None:
        await checkpoint()
        if any(
            u.email.lower() == user.email.lower() for u in self._store.users.values()
        ):
            raise ValueError(f"Duplicate email for user {user.id}")
        self._store.users[user.id] = detached(user)

    async def update(self, user: User) -> None:
        await checkpoint()
        if user.id not in self._store.users:
            raise KeyError(user.id)
        self._store.users[user.id] = detached(user)
