"""Registration domain entity.

A volunteer's registration for one event. Transition methods return Result
types; the capacity check on approval belongs to the registration lifecycle
manager because it needs a fresh count read under the event lock.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import BadRequestError, ConflictError, DomainError
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.enums import RegistrationStatus


@dataclass
class Registration:
    """Registration of a user for an event.

    Attributes:
        id: Unique registration identifier.
        user_id: Registering volunteer.
        event_id: Target event.
        status: Lifecycle status.
        notes: Free-text notes from the volunteer.
        completed: Set once the volunteer finished the assignment.
        completed_at: When ``completed`` was set.
        registered_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    user_id: UUID
    event_id: UUID
    status: RegistrationStatus = RegistrationStatus.PENDING
    notes: str | None = None
    completed: bool = False
    completed_at: datetime | None = None
    registered_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_active(self) -> bool:
        return self.status != RegistrationStatus.CANCELLED

    def approve(self, now: datetime) -> Result[None, DomainError]:
        """PENDING → APPROVED (capacity already verified by the caller)."""
        if self.status == RegistrationStatus.APPROVED:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_ALREADY_APPROVED,
                    message="Registration is already approved",
                    resource_type="Registration",
                    conflicting_field="status",
                    details={"registration_id": str(self.id)},
                )
            )
        if self.status != RegistrationStatus.PENDING:
            return Failure(error=self._not_pending("approved"))
        self.status = RegistrationStatus.APPROVED
        self.updated_at = now
        return Success(value=None)

    def reject(self, now: datetime) -> Result[None, DomainError]:
        """PENDING → REJECTED."""
        if self.status == RegistrationStatus.REJECTED:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_ALREADY_REJECTED,
                    message="Registration is already rejected",
                    resource_type="Registration",
                    conflicting_field="status",
                    details={"registration_id": str(self.id)},
                )
            )
        if self.status != RegistrationStatus.PENDING:
            return Failure(error=self._not_pending("rejected"))
        self.status = RegistrationStatus.REJECTED
        self.updated_at = now
        return Success(value=None)

    def mark_completed(self, now: datetime) -> Result[None, DomainError]:
        """Flag an approved registration as completed. Never unset."""
        if self.status != RegistrationStatus.APPROVED:
            return Failure(
                error=BadRequestError(
                    code=ErrorCode.REGISTRATION_NOT_APPROVED,
                    message="Only approved registrations can be marked as completed",
                    details={"status": self.status.value},
                )
            )
        if self.completed:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.REGISTRATION_ALREADY_COMPLETED,
                    message="Registration is already marked as completed",
                    resource_type="Registration",
                    conflicting_field="completed",
                )
            )
        self.completed = True
        self.completed_at = now
        self.updated_at = now
        return Success(value=None)

    def cancel(self, now: datetime) -> Result[None, BadRequestError]:
        """Any non-completed, non-cancelled state → CANCELLED (terminal)."""
        if self.status == RegistrationStatus.CANCELLED:
            return Failure(
                error=BadRequestError(
                    code=ErrorCode.NOT_REGISTERED,
                    message="You are not registered for this event",
                )
            )
        if self.completed:
            return Failure(
                error=BadRequestError(
                    code=ErrorCode.REGISTRATION_ALREADY_COMPLETED,
                    message="Cannot unregister from completed event",
                )
            )
        self.status = RegistrationStatus.CANCELLED
        self.updated_at = now
        return Success(value=None)

    def _not_pending(self, verb: str) -> BadRequestError:
        return BadRequestError(
            code=ErrorCode.REGISTRATION_NOT_PENDING,
            message=f"Only pending registrations can be {verb}",
            details={"status": self.status.value},
        )
