"""In-memory store adapters (single node, tests).

All four repositories share one ``InMemoryStore`` so the registration
history can order by event date the way a SQL join would.
"""

from volunteer_hub.infrastructure.persistence.memory.event_repository import (
    InMemoryEventRepository,
)
from volunteer_hub.infrastructure.persistence.memory.refresh_token_repository import (
    InMemoryRefreshTokenRepository,
)
from volunteer_hub.infrastructure.persistence.memory.registration_repository import (
    InMemoryRegistrationRepository,
)
from volunteer_hub.infrastructure.persistence.memory.store import InMemoryStore
from volunteer_hub.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryEventRepository",
    "InMemoryRefreshTokenRepository",
    "InMemoryRegistrationRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
