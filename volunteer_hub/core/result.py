"""Result types for railway-oriented error handling.

Lifecycle operations never raise for business failures. They return either
``Success(value=...)`` or ``Failure(error=...)`` and callers branch on it:

    result = await events.approve(admin, event_id)
    match result:
        case Success(value=event):
            ...
        case Failure(error=CapacityExceededError() as error):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying a typed ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
