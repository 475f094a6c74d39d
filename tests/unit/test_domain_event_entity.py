"""Unit tests for the Event entity, the capacity predicate and schedule rules.

Tests cover:
- Approval state machine and the approved_at/approved_by invariant
- accepts_registrations for status, deadline and capacity
- validate_schedule edge cases
"""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from tests.helpers import START
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import ConflictError, ValidationError
from volunteer_hub.core.result import Failure, Success
from volunteer_hub.domain.entities import Event, accepts_registrations
from volunteer_hub.domain.entities.event import validate_schedule
from volunteer_hub.domain.enums import EventStatus


def make_event(**overrides) -> Event:
    fields = dict(
        id=uuid7(),
        title="Food drive",
        description="",
        location="Hall",
        event_at=START + timedelta(days=7),
        creator_id=uuid7(),
    )
    fields.update(overrides)
    return Event(**fields)


@pytest.mark.unit
class TestEventApproval:
    def test_approve_pending_sets_audit_fields(self):
        # Arrange
        event = make_event()
        admin_id = uuid7()

        # Act
        result = event.approve(admin_id, START)

        # Assert
        assert isinstance(result, Success)
        assert event.status is EventStatus.APPROVED
        assert event.approved_by == admin_id
        assert event.approved_at == START

    def test_approve_twice_is_conflict(self):
        event = make_event()
        event.approve(uuid7(), START)

        result = event.approve(uuid7(), START + timedelta(hours=1))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code is ErrorCode.EVENT_ALREADY_APPROVED
        assert event.approved_at == START

    def test_rejected_event_can_be_approved(self):
        event = make_event()
        event.reject(START)

        result = event.approve(uuid7(), START)

        assert isinstance(result, Success)
        assert event.status is EventStatus.APPROVED

    def test_reject_clears_audit_fields(self):
        event = make_event()

        result = event.reject(START)

        assert isinstance(result, Success)
        assert event.status is EventStatus.REJECTED
        assert event.approved_by is None
        assert event.approved_at is None

    def test_reject_twice_is_conflict(self):
        event = make_event()
        event.reject(START)

        result = event.reject(START)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.EVENT_ALREADY_REJECTED

    def test_reject_approved_is_conflict_and_keeps_approval(self):
        event = make_event()
        admin_id = uuid7()
        event.approve(admin_id, START)

        result = event.reject(START)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.EVENT_ALREADY_PUBLISHED
        assert event.status is EventStatus.APPROVED
        assert event.approved_by == admin_id


@pytest.mark.unit
class TestAcceptsRegistrations:
    def test_pending_event_does_not_accept(self):
        assert not accepts_registrations(make_event(), 0, START)

    def test_approved_unlimited_event_accepts(self):
        event = make_event(status=EventStatus.APPROVED)

        assert accepts_registrations(event, 10_000, START)

    def test_full_event_does_not_accept(self):
        event = make_event(status=EventStatus.APPROVED, max_participants=2)

        assert accepts_registrations(event, 1, START)
        assert not accepts_registrations(event, 2, START)

    def test_deadline_is_exclusive(self):
        deadline = START + timedelta(days=1)
        event = make_event(status=EventStatus.APPROVED, registration_deadline=deadline)

        assert accepts_registrations(event, 0, deadline - timedelta(seconds=1))
        assert not accepts_registrations(event, 0, deadline)


@pytest.mark.unit
class TestValidateSchedule:
    def test_valid_schedule(self):
        result = validate_schedule(
            event_at=START + timedelta(days=1),
            registration_deadline=START + timedelta(hours=1),
            max_participants=1,
            now=START,
        )

        assert isinstance(result, Success)

    def test_event_at_now_is_not_future(self):
        result = validate_schedule(
            event_at=START, registration_deadline=None, max_participants=None, now=START
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code is ErrorCode.EVENT_DATE_NOT_IN_FUTURE

    def test_deadline_after_event_rejected(self):
        event_at = START + timedelta(days=1)

        result = validate_schedule(
            event_at=event_at,
            registration_deadline=event_at + timedelta(minutes=1),
            max_participants=None,
            now=START,
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.REGISTRATION_DEADLINE_AFTER_EVENT

    def test_deadline_equal_to_event_allowed(self):
        event_at = START + timedelta(days=1)

        result = validate_schedule(
            event_at=event_at,
            registration_deadline=event_at,
            max_participants=None,
            now=START,
        )

        assert isinstance(result, Success)

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_below_one_rejected(self, capacity):
        result = validate_schedule(
            event_at=START + timedelta(days=1),
            registration_deadline=None,
            max_participants=capacity,
            now=START,
        )

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.INVALID_CAPACITY
