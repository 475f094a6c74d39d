"""Unit tests for Result types and domain errors."""

import pytest

from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import (
    CapacityExceededError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from volunteer_hub.core.result import Failure, Success


@pytest.mark.unit
class TestResult:
    def test_pattern_matching(self):
        result = Success(value=3)

        match result:
            case Success(value=v):
                matched = v
            case Failure(error=_):
                matched = None

        assert matched == 3

    def test_results_are_immutable(self):
        result = Failure(error="x")

        with pytest.raises(AttributeError):
            result.error = "y"  # type: ignore[misc]


@pytest.mark.unit
class TestDomainErrors:
    def test_str_includes_code_and_message(self):
        error = NotFoundError(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
            resource_type="Event",
            resource_id="42",
        )

        assert str(error) == "event_not_found: Event not found"

    def test_capacity_exceeded_is_a_conflict(self):
        error = CapacityExceededError(
            code=ErrorCode.EVENT_CAPACITY_EXCEEDED,
            message="full",
            resource_type="Event",
            max_participants=3,
            approved_count=3,
        )

        assert isinstance(error, ConflictError)
        assert isinstance(error, DomainError)
        assert error.max_participants == 3
