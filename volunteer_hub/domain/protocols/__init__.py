"""Domain protocols (ports).

Application services depend on these; infrastructure provides adapters.
Adapters satisfy the protocols structurally and do not inherit from them.
"""

from volunteer_hub.domain.protocols.event_repository import EventRepository
from volunteer_hub.domain.protocols.logger_protocol import LoggerProtocol
from volunteer_hub.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from volunteer_hub.domain.protocols.refresh_token_repository import (
    RefreshTokenRepository,
)
from volunteer_hub.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from volunteer_hub.domain.protocols.registration_repository import (
    RegistrationRepository,
)
from volunteer_hub.domain.protocols.token_generation_protocol import (
    AccessTokenProtocol,
)
from volunteer_hub.domain.protocols.user_repository import UserRepository

__all__ = [
    "AccessTokenProtocol",
    "EventRepository",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenRepository",
    "RefreshTokenServiceProtocol",
    "RegistrationRepository",
    "UserRepository",
]
