"""Shared in-memory tables.

Repositories hand out copies of stored entities and write copies back, so a
caller mutating an entity sees no effect until it calls ``update``, the same
as with a database session. Every repository method awaits
``checkpoint()`` first, giving other tasks a chance to run between a read and
the write that depends on it.
"""

import asyncio
from dataclasses import dataclass, field, replace
from typing import TypeVar
from uuid import UUID

from volunteer_hub.domain.entities import Event, RefreshTokenRecord, Registration, User

T = TypeVar("T")


@dataclass
class InMemoryStore:
    """Tables keyed by primary key."""

    users: dict[UUID, User] = field(default_factory=dict)
    events: dict[UUID, Event] = field(default_factory=dict)
    registrations: dict[UUID, Registration] = field(default_factory=dict)
    refresh_tokens: dict[UUID, RefreshTokenRecord] = field(default_factory=dict)


async def checkpoint() -> None:
    await asyncio.sleep(0)


def detached(entity: T) -> T:
    """Copy of a stored entity."""
    return replace(entity)  # type: ignore[type-var]


def paginate(items: list[T], limit: int, offset: int) -> tuple[list[T], int]:
    return [detached(item) for item in items[offset : offset + limit]], len(items)
