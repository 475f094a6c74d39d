"""Domain policies package."""

from volunteer_hub.domain.policies.access_policy import (
    Capability,
    authorize_capability,
    authorize_owner,
    can_act_on,
    has_capability,
)

__all__ = [
    "Capability",
    "authorize_capability",
    "authorize_owner",
    "can_act_on",
    "has_capability",
]
