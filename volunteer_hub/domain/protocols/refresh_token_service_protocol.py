"""RefreshTokenServiceProtocol (opaque refresh token port).

Infrastructure provides the concrete implementation (RefreshTokenService).
"""

from datetime import datetime
from typing import Protocol


class RefreshTokenServiceProtocol(Protocol):
    """Generate opaque refresh tokens and their storage digests.

    Implementations:
        - RefreshTokenService: volunteer_hub/infrastructure/security/refresh_token_service.py
    """

    def generate_token(self) -> tuple[str, str]:
        """Generate a refresh token and its digest.

        Returns:
            Tuple of (token, token_hash):
                - token: Plain token to return to the client
                - token_hash: Deterministic digest to store
        """
        ...

    def hash_token(self, token: str) -> str:
        """Digest a client-supplied token for lookup."""
        ...

    def calculate_expiration(self, issued_at: datetime) -> datetime:
        """Expiry instant for a token issued at ``issued_at``."""
        ...
