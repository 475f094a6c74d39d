"""SQLAlchemy repository adapters.

Each repository takes an ``AsyncSession`` and commits inside its write
methods. Build the repositories of one operation on the same session so a
row lock taken by ``find_by_id(..., for_update=True)`` covers the reads that
follow it.
"""

from volunteer_hub.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from volunteer_hub.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from volunteer_hub.infrastructure.persistence.repositories.registration_repository import (
    RegistrationRepository,
)
from volunteer_hub.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "EventRepository",
    "RefreshTokenRepository",
    "RegistrationRepository",
    "UserRepository",
]
