"""Application services: the operations the presentation layer calls."""

from volunteer_hub.application.services.account_admin import AccountAdministration
from volunteer_hub.application.services.authentication_service import (
    AuthenticationService,
)
from volunteer_hub.application.services.credential_service import CredentialService
from volunteer_hub.application.services.event_lifecycle import EventLifecycleManager
from volunteer_hub.application.services.registration_lifecycle import (
    RegistrationLifecycleManager,
)

__all__ = [
    "AccountAdministration",
    "AuthenticationService",
    "CredentialService",
    "EventLifecycleManager",
    "RegistrationLifecycleManager",
]
