"""Base error type for railway-oriented programming.

DomainError is the root of every failure a lifecycle operation can return.
It is plain data: it does NOT inherit from Exception and is never raised.
Operations hand it back inside ``Failure(error=...)``.
"""

from dataclasses import dataclass

from volunteer_hub.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base failure value.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to the actor.
        details: Optional string context for logs and debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
