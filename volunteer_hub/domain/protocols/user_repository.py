"""UserRepository protocol (identity store port)."""

from typing import Protocol
from uuid import UUID

from volunteer_hub.domain.entities.user import User


class UserRepository(Protocol):
    """Identity store.

    Emails are compared case-insensitively.
    """

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def exists_by_email(self, email: str) -> bool: ...

    async def save(self, user: User) -> None:
        """Persist a new user."""
        ...

    async def update(self, user: User) -> None:
        """Persist changed account flags and profile fields."""
        ...
