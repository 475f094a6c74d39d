"""Domain enums package.

Usage:
    from volunteer_hub.domain.enums import EventStatus, RegistrationStatus, UserRole
"""

from volunteer_hub.domain.enums.event_status import EventStatus
from volunteer_hub.domain.enums.registration_status import RegistrationStatus
from volunteer_hub.domain.enums.user_role import UserRole

__all__ = ["EventStatus", "RegistrationStatus", "UserRole"]
