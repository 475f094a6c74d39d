"""Core errors package.

Usage:
    from volunteer_hub.core.errors import (
        CapacityExceededError,
        DomainError,
        NotFoundError,
    )
"""

from volunteer_hub.core.errors.common_errors import (
    BadRequestError,
    CapacityExceededError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from volunteer_hub.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "CapacityExceededError",
    "UnauthorizedError",
    "ForbiddenError",
    "BadRequestError",
]
