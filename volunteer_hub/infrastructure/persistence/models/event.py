"""Event table."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from volunteer_hub.infrastructure.persistence.base import BaseMutableModel, UTCDateTime


class EventModel(BaseMutableModel):
    """Volunteer event.

    Indexes:
        - status: approval queues and public listings
        - creator_id: organizer's own events
        - event_at: date ordering
    """

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    event_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    registration_deadline: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True
    )
    max_participants: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    creator_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    approved_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    approved_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "max_participants IS NULL OR max_participants >= 1",
            name="ck_events_max_participants_positive",
        ),
    )
