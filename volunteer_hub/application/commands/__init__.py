"""Application command and response data."""

from volunteer_hub.application.commands.auth_commands import (
    AccessClaims,
    AuthenticatedSession,
    CredentialPair,
)
from volunteer_hub.application.commands.event_commands import EventDraft, EventRevision

__all__ = [
    "AccessClaims",
    "AuthenticatedSession",
    "CredentialPair",
    "EventDraft",
    "EventRevision",
]
