"""SQLAlchemy table models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from volunteer_hub.infrastructure.persistence.models.event import EventModel
from volunteer_hub.infrastructure.persistence.models.refresh_token import (
    RefreshTokenModel,
)
from volunteer_hub.infrastructure.persistence.models.registration import (
    RegistrationModel,
)
from volunteer_hub.infrastructure.persistence.models.user import UserModel

__all__ = ["EventModel", "RefreshTokenModel", "RegistrationModel", "UserModel"]
