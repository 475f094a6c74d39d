"""User domain entity.

Pure business rules, no framework dependencies. Account flags are changed by
account administration only; lifecycle managers read users, never write them.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import BadRequestError, ConflictError, DomainError
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.enums import UserRole


@dataclass
class User:
    """Platform user.

    Attributes:
        id: Unique user identifier.
        email: Login email (stored lowercase).
        password_hash: Bcrypt hash, never plaintext.
        full_name: Display name.
        role: Closed role enum.
        is_active: Deactivated users cannot authenticate.
        is_locked: Locked users cannot authenticate.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).

    Example:
        >>> user = User(id=uuid7(), email="a@b.org", password_hash="$2b$...",
        ...             full_name="Ana", role=UserRole.VOLUNTEER)
        >>> user.can_login()
        True
    """

    id: UUID
    email: str
    password_hash: str
    full_name: str
    role: UserRole
    is_active: bool = True
    is_locked: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def can_login(self) -> bool:
        """Active and not locked."""
        return self.is_active and not self.is_locked

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def lock(self) -> Result[None, DomainError]:
        """Lock the account. Admin accounts cannot be locked."""
        if self.is_admin:
            return Failure(error=self._admin_protected("locked"))
        if self.is_locked:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ACCOUNT_ALREADY_LOCKED,
                    message="User account is already locked",
                    resource_type="User",
                    conflicting_field="is_locked",
                )
            )
        self.is_locked = True
        self._touch()
        return Success(value=None)

    def unlock(self) -> Result[None, DomainError]:
        if not self.is_locked:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ACCOUNT_NOT_LOCKED,
                    message="User account is not locked",
                    resource_type="User",
                    conflicting_field="is_locked",
                )
            )
        self.is_locked = False
        self._touch()
        return Success(value=None)

    def deactivate(self) -> Result[None, DomainError]:
        """Deactivate the account. Admin accounts cannot be deactivated."""
        if self.is_admin:
            return Failure(error=self._admin_protected("deactivated"))
        if not self.is_active:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ACCOUNT_ALREADY_INACTIVE,
                    message="User account is already inactive",
                    resource_type="User",
                    conflicting_field="is_active",
                )
            )
        self.is_active = False
        self._touch()
        return Success(value=None)

    def activate(self) -> Result[None, DomainError]:
        if self.is_active:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ACCOUNT_ALREADY_ACTIVE,
                    message="User account is already active",
                    resource_type="User",
                    conflicting_field="is_active",
                )
            )
        self.is_active = True
        self._touch()
        return Success(value=None)

    def _admin_protected(self, verb: str) -> BadRequestError:
        return BadRequestError(
            code=ErrorCode.ADMIN_ACCOUNT_PROTECTED,
            message=f"Admin accounts cannot be {verb}",
            details={"user_id": str(self.id)},
        )

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
