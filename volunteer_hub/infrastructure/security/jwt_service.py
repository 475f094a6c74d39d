"""JWT access token service (adapter).

Implements AccessTokenProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256, secret of at least 256 bits
    - Short expiration (15 minutes by default)
    - Unique JWT ID (jti) per token
    - sub, role, iat and exp claims are required on decode

Performance:
    - Stateless validation (no store lookup)
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import UnauthorizedError
from volunteer_hub.core.result import Failure, Result, Success

_REQUIRED_CLAIMS = ["sub", "role", "iat", "exp"]


class JWTService:
    """Access token generation and validation.

    Usage:
        token_service = JWTService(secret_key=settings.secret_key)
        token = token_service.generate_access_token(user.id, user.role.value)

        match token_service.validate_access_token(token):
            case Success(value=claims):
                user_id = claims["sub"]
            case Failure(error=error):
                ...
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 15) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (>= 32 bytes).
            expiration_minutes: Token lifetime in minutes.

        Raises:
            ValueError: If secret_key is too short.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    @property
    def expires_in_seconds(self) -> int:
        return self._expiration_minutes * 60

    def generate_access_token(self, user_id: UUID, role: str) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(uuid7(), "volunteer")
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(
        self, token: str
    ) -> Result[dict[str, str | int], UnauthorizedError]:
        """Verify signature, expiry and required claims.

        Returns:
            Success(claims) for a valid token.
            Failure(UnauthorizedError) with TOKEN_EXPIRED for an expired token,
            TOKEN_INVALID for anything else.
        """
        try:
            payload: dict[str, str | int] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_EXPIRED, message="Access token expired"
                )
            )
        except InvalidTokenError:
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_INVALID, message="Invalid access token"
                )
            )
        return Success(value=payload)
