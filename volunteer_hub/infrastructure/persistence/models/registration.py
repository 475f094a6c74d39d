"""Event registration table.

At most one non-cancelled registration per (user, event), enforced by a
partial unique index on both PostgreSQL and SQLite.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from volunteer_hub.infrastructure.persistence.base import BaseMutableModel, UTCDateTime

_ACTIVE = text("status <> 'cancelled'")


class RegistrationModel(BaseMutableModel):
    """Registration of a user for an event.

    ``created_at`` holds the domain ``registered_at``.
    """

    __tablename__ = "event_registrations"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index(
            "uq_event_registrations_active_user_event",
            "user_id",
            "event_id",
            unique=True,
            postgresql_where=_ACTIVE,
            sqlite_where=_ACTIVE,
        ),
        Index("idx_event_registrations_event_status", "event_id", "status"),
    )
