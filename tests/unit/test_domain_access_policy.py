"""Unit tests for the access policy decision tables."""

import pytest
from uuid_extensions import uuid7

from tests.helpers import make_actor
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import ForbiddenError
from volunteer_hub.core.result import Failure, Success
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.domain.policies import (
    Capability,
    authorize_capability,
    authorize_owner,
    can_act_on,
    has_capability,
)


@pytest.mark.unit
class TestOwnership:
    def test_admin_acts_on_any_resource(self):
        assert can_act_on(UserRole.ADMIN, uuid7(), uuid7())

    @pytest.mark.parametrize("role", [UserRole.ORGANIZER, UserRole.VOLUNTEER])
    def test_non_admin_acts_on_own_resource_only(self, role):
        actor_id = uuid7()

        assert can_act_on(role, actor_id, actor_id)
        assert not can_act_on(role, actor_id, uuid7())

    def test_authorize_owner_failure_names_resource(self):
        actor = make_actor(UserRole.ORGANIZER)

        result = authorize_owner(actor, uuid7(), "Event")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ForbiddenError)
        assert result.error.code is ErrorCode.RESOURCE_NOT_OWNED
        assert result.error.required_permission == "event:owner"

    def test_authorize_owner_success(self):
        actor = make_actor(UserRole.VOLUNTEER)

        assert isinstance(authorize_owner(actor, actor.user_id, "Registration"), Success)


@pytest.mark.unit
class TestCapabilities:
    @pytest.mark.parametrize(
        ("role", "capability", "expected"),
        [
            (UserRole.ADMIN, Capability.PROPOSE_EVENT, True),
            (UserRole.ADMIN, Capability.REVIEW_EVENT, True),
            (UserRole.ADMIN, Capability.MANAGE_USERS, True),
            (UserRole.ORGANIZER, Capability.PROPOSE_EVENT, True),
            (UserRole.ORGANIZER, Capability.REVIEW_EVENT, False),
            (UserRole.ORGANIZER, Capability.REGISTER_FOR_EVENT, True),
            (UserRole.VOLUNTEER, Capability.PROPOSE_EVENT, False),
            (UserRole.VOLUNTEER, Capability.REGISTER_FOR_EVENT, True),
            (UserRole.VOLUNTEER, Capability.MANAGE_USERS, False),
        ],
    )
    def test_capability_table(self, role, capability, expected):
        assert has_capability(role, capability) is expected

    def test_authorize_capability_reports_permission(self):
        actor = make_actor(UserRole.VOLUNTEER)

        result = authorize_capability(actor, Capability.REVIEW_EVENT)

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.PERMISSION_DENIED
        assert result.error.required_permission == "events:review"
        assert result.error.details == {
            "actor_id": str(actor.user_id),
            "role": "volunteer",
        }
