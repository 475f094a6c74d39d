"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and are the stable strings
the presentation layer exposes to clients. Each error class in
``volunteer_hub.core.errors`` carries one of these.
"""

from enum import Enum


class ErrorCode(Enum):
    """Stable error codes shared by every lifecycle operation."""

    # Validation
    VALIDATION_FAILED = "validation_failed"
    EVENT_DATE_NOT_IN_FUTURE = "event_date_not_in_future"
    REGISTRATION_DEADLINE_AFTER_EVENT = "registration_deadline_after_event"
    INVALID_CAPACITY = "invalid_capacity"
    INVALID_ROLE = "invalid_role"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"

    # Missing resources
    USER_NOT_FOUND = "user_not_found"
    EVENT_NOT_FOUND = "event_not_found"
    REGISTRATION_NOT_FOUND = "registration_not_found"

    # Conflicts
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    EVENT_ALREADY_APPROVED = "event_already_approved"
    EVENT_ALREADY_REJECTED = "event_already_rejected"
    EVENT_ALREADY_PUBLISHED = "event_already_published"
    REGISTRATION_ALREADY_APPROVED = "registration_already_approved"
    REGISTRATION_ALREADY_REJECTED = "registration_already_rejected"
    REGISTRATION_ALREADY_COMPLETED = "registration_already_completed"
    ACCOUNT_ALREADY_LOCKED = "account_already_locked"
    ACCOUNT_NOT_LOCKED = "account_not_locked"
    ACCOUNT_ALREADY_ACTIVE = "account_already_active"
    ACCOUNT_ALREADY_INACTIVE = "account_already_inactive"
    EVENT_CAPACITY_EXCEEDED = "event_capacity_exceeded"

    # Business rules
    EVENT_NOT_APPROVED = "event_not_approved"
    REGISTRATION_CLOSED = "registration_closed"
    EVENT_ALREADY_STARTED = "event_already_started"
    ALREADY_REGISTERED = "already_registered"
    NOT_REGISTERED = "not_registered"
    REGISTRATION_NOT_PENDING = "registration_not_pending"
    REGISTRATION_NOT_APPROVED = "registration_not_approved"
    EVENT_HAS_PARTICIPANTS = "event_has_participants"
    EVENT_LOCKED_FOR_EDITS = "event_locked_for_edits"
    ADMIN_ACCOUNT_PROTECTED = "admin_account_protected"

    # Authentication
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_REVOKED = "token_revoked"
    ACCOUNT_LOCKED = "account_locked"
    ACCOUNT_INACTIVE = "account_inactive"

    # Authorization
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"
