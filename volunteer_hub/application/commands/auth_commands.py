"""Credential response data."""

from dataclasses import dataclass
from uuid import UUID

from volunteer_hub.domain.entities import User
from volunteer_hub.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CredentialPair:
    """Tokens handed to the client after login, registration or refresh.

    Attributes:
        access_token: Signed JWT (short-lived).
        refresh_token: Opaque refresh token (plaintext, shown once).
        token_type: Always "bearer".
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "bearer"


@dataclass(frozen=True, kw_only=True)
class AccessClaims:
    """Verified identity extracted from an access token."""

    user_id: UUID
    role: UserRole


@dataclass(frozen=True, kw_only=True)
class AuthenticatedSession:
    """Result of a successful login or account registration."""

    user: User
    credentials: CredentialPair
