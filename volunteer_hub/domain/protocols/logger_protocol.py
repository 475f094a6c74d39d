"""LoggerProtocol for structured logging.

Backend-agnostic structured logging: a message plus key-value context.
Implementations must never receive secrets; callers do not pass passwords,
access tokens or refresh tokens as context.

Usage:
    logger.info("event_approved", event_id=str(event.id), admin_id=str(admin_id))

    scoped = logger.bind(operation="registration_approve")
    scoped.warning("capacity_exceeded", event_id=str(event_id))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            error: Optional exception; adapters add error_type / error_message.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with ``context`` included in every call.

        The original logger is unchanged.
        """
        ...
