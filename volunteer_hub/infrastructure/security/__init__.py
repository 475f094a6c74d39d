"""Security adapters: access tokens, refresh tokens, password hashing."""

from volunteer_hub.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from volunteer_hub.infrastructure.security.jwt_service import JWTService
from volunteer_hub.infrastructure.security.refresh_token_service import (
    RefreshTokenService,
)

__all__ = ["BcryptPasswordService", "JWTService", "RefreshTokenService"]
