"""Domain entities package.

Usage:
    from volunteer_hub.domain.entities import Event, Registration, User
"""

from volunteer_hub.domain.entities.event import Event, accepts_registrations
from volunteer_hub.domain.entities.refresh_token import RefreshTokenRecord
from volunteer_hub.domain.entities.registration import Registration
from volunteer_hub.domain.entities.user import User

__all__ = [
    "Event",
    "accepts_registrations",
    "Registration",
    "RefreshTokenRecord",
    "User",
]
