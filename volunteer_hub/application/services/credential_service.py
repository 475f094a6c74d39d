"""Credential service.

Issues, verifies, refreshes and revokes credential pairs:

    - Access token: signed JWT, short-lived, never persisted
    - Refresh token: opaque random string handed to the client once; the
      store keeps only its digest, owner and expiry

Session Singularity:
    ``issue`` runs "delete prior records, save new record" under a per-user
    lock (key ``("user", user_id)``), so concurrent logins leave exactly one
    valid refresh record for the user.

Refresh Flow:
    1. Digest the presented token and look the record up
    2. Expired → delete it, fail
    3. Revoked → fail
    4. Owner missing, inactive or locked → fail
    5. Mint a new access token; the refresh token itself is not rotated

Housekeeping:
    ``sweep_expired`` deletes expired and revoked records. It takes no lock;
    validity never depends on the sweep having run.
"""

from uuid import UUID

from uuid_extensions import uuid7

from volunteer_hub.application.commands.auth_commands import (
    AccessClaims,
    CredentialPair,
)
from volunteer_hub.core.clock import Clock, utc_now
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import UnauthorizedError
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.entities import RefreshTokenRecord
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.domain.protocols import (
    AccessTokenProtocol,
    LoggerProtocol,
    RefreshTokenRepository,
    RefreshTokenServiceProtocol,
    UserRepository,
)


def user_lock_key(user_id: UUID) -> tuple[str, UUID]:
    return ("user", user_id)


class CredentialService:
    """Credential pair lifecycle.

    Dependencies (injected via constructor):
        - RefreshTokenRepository: refresh record persistence
        - UserRepository: owner status checks on refresh
        - AccessTokenProtocol: JWT generation/validation
        - RefreshTokenServiceProtocol: opaque token generation and digests
        - KeyedLock: per-user serialization of ``issue``
        - LoggerProtocol: structured logging (tokens are never logged)
    """

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        user_repo: UserRepository,
        token_service: AccessTokenProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
        locks: KeyedLock,
        logger: LoggerProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._user_repo = user_repo
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service
        self._locks = locks
        self._logger = logger
        self._clock = clock

    async def issue(
        self, user_id: UUID, role: UserRole
    ) -> Result[CredentialPair, UnauthorizedError]:
        """Mint a credential pair, replacing any prior refresh records.

        Returns:
            Success(CredentialPair) with a fresh access and refresh token.
        """
        async with self._locks.hold(user_lock_key(user_id)):
            # Step 1: End prior sessions of the same user
            removed = await self._refresh_token_repo.delete_by_user(user_id)

            # Step 2: Persist the digest of a new opaque token
            now = self._clock()
            refresh_token, token_hash = self._refresh_token_service.generate_token()
            record = RefreshTokenRecord(
                id=uuid7(),
                user_id=user_id,
                token_hash=token_hash,
                expires_at=self._refresh_token_service.calculate_expiration(now),
                created_at=now,
            )
            await self._refresh_token_repo.save(record)

        access_token = self._token_service.generate_access_token(user_id, role.value)
        self._logger.info(
            "credentials_issued",
            user_id=str(user_id),
            role=role.value,
            replaced_sessions=removed,
        )
        return Success(
            value=CredentialPair(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )

    def verify_access(self, token: str) -> Result[AccessClaims, UnauthorizedError]:
        """Check an access token and extract the caller's identity.

        Returns:
            Failure(UnauthorizedError) for a malformed, tampered or expired
            token, or one whose subject or role cannot be parsed.
        """
        validated = self._token_service.validate_access_token(token)
        if isinstance(validated, Failure):
            return validated

        claims = validated.value
        try:
            user_id = UUID(str(claims["sub"]))
            role = UserRole(str(claims["role"]))
        except (KeyError, ValueError):
            self._logger.warning("access_token_claims_invalid")
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid token claims",
                )
            )
        return Success(value=AccessClaims(user_id=user_id, role=role))

    async def refresh(
        self, refresh_token: str
    ) -> Result[CredentialPair, UnauthorizedError]:
        """Exchange a refresh token for a new access token.

        The same refresh token is returned; it stays valid until it expires
        or is revoked.
        """
        token_hash = self._refresh_token_service.hash_token(refresh_token)
        record = await self._refresh_token_repo.find_by_token_hash(token_hash)
        if record is None:
            self._logger.info("token_refresh_failed", reason="token_invalid")
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid refresh token",
                )
            )

        now = self._clock()
        if record.is_expired(now):
            await self._refresh_token_repo.delete(record.id)
            self._logger.info(
                "token_refresh_failed",
                reason="token_expired",
                user_id=str(record.user_id),
            )
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Refresh token expired",
                )
            )
        if record.revoked:
            self._logger.warning(
                "token_refresh_failed",
                reason="token_revoked",
                user_id=str(record.user_id),
            )
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.TOKEN_REVOKED,
                    message="Refresh token has been revoked",
                )
            )

        user = await self._user_repo.find_by_id(record.user_id)
        if user is None or not user.can_login():
            if user is None:
                code = ErrorCode.TOKEN_INVALID
            elif user.is_locked:
                code = ErrorCode.ACCOUNT_LOCKED
            else:
                code = ErrorCode.ACCOUNT_INACTIVE
            self._logger.warning(
                "token_refresh_failed",
                reason=code.value,
                user_id=str(record.user_id),
            )
            return Failure(
                error=UnauthorizedError(
                    code=code,
                    message="Account is not allowed to authenticate",
                )
            )

        access_token = self._token_service.generate_access_token(
            user.id, user.role.value
        )
        self._logger.info("token_refreshed", user_id=str(user.id))
        return Success(
            value=CredentialPair(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_in=self._token_service.expires_in_seconds,
            )
        )

    async def revoke(self, refresh_token: str) -> Result[None, UnauthorizedError]:
        """Revoke a refresh token. Unknown or already revoked tokens succeed."""
        token_hash = self._refresh_token_service.hash_token(refresh_token)
        record = await self._refresh_token_repo.find_by_token_hash(token_hash)
        if record is not None and not record.revoked:
            await self._refresh_token_repo.revoke(record.id)
            self._logger.info("refresh_token_revoked", user_id=str(record.user_id))
        return Success(value=None)

    async def sweep_expired(self) -> int:
        """Delete expired and revoked refresh records. Returns rows removed."""
        removed = await self._refresh_token_repo.delete_expired_and_revoked(
            self._clock()
        )
        if removed:
            self._logger.info("refresh_tokens_swept", removed=removed)
        return removed
