"""Access token protocol.

Access tokens are short-lived, stateless and never persisted. They carry the
subject id and role; verification needs no store round-trip.
"""

from typing import Protocol
from uuid import UUID

from volunteer_hub.core.errors import UnauthorizedError
from volunteer_hub.core.result import Result


class AccessTokenProtocol(Protocol):
    """Signed access token generation and validation.

    Implementations:
        - JWTService: HMAC-SHA256 (PyJWT)
    """

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of generated tokens."""
        ...

    def generate_access_token(self, user_id: UUID, role: str) -> str:
        """Mint a token with sub, role, iat, exp and jti claims."""
        ...

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], UnauthorizedError]:
        """Verify signature and expiry and return the claims.

        Returns:
            Failure(UnauthorizedError) for malformed, tampered or expired
            tokens.
        """
        ...
