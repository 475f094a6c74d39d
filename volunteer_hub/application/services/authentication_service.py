"""Authentication service: account registration, login and logout.

Flow (login):
1. Look up the user by normalized email
2. Verify the password hash
3. Refuse locked, then inactive accounts
4. Issue a credential pair (replaces any prior session)

Self-service registration can create volunteers and organizers only; admin
accounts are provisioned out of band.
"""

from uuid_extensions import uuid7

from volunteer_hub.application.commands.auth_commands import AuthenticatedSession
from volunteer_hub.application.services.credential_service import CredentialService
from volunteer_hub.core.clock import Clock, utc_now
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import (
    ConflictError,
    DomainError,
    UnauthorizedError,
    ValidationError,
)
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.entities import User
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from volunteer_hub.domain.value_objects import Email, Password

_SELF_SERVICE_ROLES = frozenset({UserRole.VOLUNTEER, UserRole.ORGANIZER})


class AuthenticationService:
    """Account registration and session entry/exit."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        credentials: CredentialService,
        logger: LoggerProtocol,
        clock: Clock = utc_now,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._credentials = credentials
        self._logger = logger
        self._clock = clock

    async def register_account(
        self,
        email: str,
        password: str,
        full_name: str,
        role: UserRole = UserRole.VOLUNTEER,
    ) -> Result[AuthenticatedSession, DomainError]:
        """Create an account and log it in.

        Returns:
            Success(AuthenticatedSession) for the new user.
            Failure(ValidationError) for a bad email, weak password, blank
            name or a role that cannot be self-assigned.
            Failure(ConflictError) if the email is already registered.
        """
        if role not in _SELF_SERVICE_ROLES:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ROLE,
                    message="Role must be volunteer or organizer",
                    field="role",
                )
            )
        try:
            normalized = Email(email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )
        try:
            Password(password)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_TOO_WEAK, message=str(e), field="password"
                )
            )
        name = full_name.strip()
        if not 2 <= len(name) <= 100:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Full name must be between 2 and 100 characters",
                    field="full_name",
                )
            )

        if await self._user_repo.exists_by_email(normalized.value):
            self._logger.info("account_registration_duplicate_email")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email address already in use",
                    resource_type="User",
                    conflicting_field="email",
                )
            )

        now = self._clock()
        user = User(
            id=uuid7(),
            email=normalized.value,
            password_hash=self._password_service.hash_password(password),
            full_name=name,
            role=role,
            created_at=now,
            updated_at=now,
        )
        await self._user_repo.save(user)
        self._logger.info("account_registered", user_id=str(user.id), role=role.value)

        issued = await self._credentials.issue(user.id, user.role)
        if isinstance(issued, Failure):
            return issued
        return Success(value=AuthenticatedSession(user=user, credentials=issued.value))

    async def login(
        self, email: str, password: str
    ) -> Result[AuthenticatedSession, DomainError]:
        """Authenticate with email and password.

        Returns:
            Failure(UnauthorizedError) for unknown email, wrong password, or
            a locked or inactive account.
        """
        user = await self._user_repo.find_by_email(email.strip().lower())
        if user is None or not self._password_service.verify_password(
            password, user.password_hash
        ):
            self._logger.warning("login_failed", reason="invalid_credentials")
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid email or password",
                )
            )

        if user.is_locked:
            self._logger.warning(
                "login_failed", reason="account_locked", user_id=str(user.id)
            )
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.ACCOUNT_LOCKED,
                    message="Account is locked. Please contact administrator.",
                )
            )
        if not user.is_active:
            self._logger.warning(
                "login_failed", reason="account_inactive", user_id=str(user.id)
            )
            return Failure(
                error=UnauthorizedError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message="Account is inactive. Please contact administrator.",
                )
            )

        issued = await self._credentials.issue(user.id, user.role)
        if isinstance(issued, Failure):
            return issued
        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(value=AuthenticatedSession(user=user, credentials=issued.value))

    async def logout(self, refresh_token: str) -> Result[None, DomainError]:
        """Revoke the session's refresh token (idempotent)."""
        return await self._credentials.revoke(refresh_token)
