"""EventRepository - SQLAlchemy implementation of the EventRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_hub.domain.entities import Event
from volunteer_hub.domain.enums import EventStatus
from volunteer_hub.infrastructure.persistence.models import EventModel


class EventRepository:
    """SQLAlchemy implementation of the EventRepository protocol.

    ``find_by_id(..., for_update=True)`` issues ``SELECT ... FOR UPDATE`` on
    PostgreSQL; SQLite ignores the clause.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, event: Event) -> None:
        self.session.add(self._to_model(event))
        await self.session.commit()

    async def find_by_id(
        self, event_id: UUID, *, for_update: bool = False
    ) -> Event | None:
        stmt = select(EventModel).where(EventModel.id == event_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def update(self, event: Event) -> None:
        """Persist changed fields.

        Raises:
            NoResultFound: If the event doesn't exist.
        """
        stmt = select(EventModel).where(EventModel.id == event.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.title = event.title
        model.description = event.description
        model.location = event.location
        model.event_at = event.event_at
        model.registration_deadline = event.registration_deadline
        model.max_participants = event.max_participants
        model.status = event.status.value
        model.approved_by = event.approved_by
        model.approved_at = event.approved_at
        model.updated_at = event.updated_at

        await self.session.commit()

    async def delete(self, event_id: UUID) -> None:
        await self.session.execute(delete(EventModel).where(EventModel.id == event_id))
        await self.session.commit()

    async def find_by_creator(
        self, creator_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        condition = EventModel.creator_id == creator_id
        stmt = (
            select(EventModel)
            .where(condition)
            .order_by(EventModel.created_at.desc(), EventModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._page(stmt, condition)

    async def find_by_status(
        self, status: EventStatus, *, limit: int, offset: int
    ) -> tuple[list[Event], int]:
        condition = EventModel.status == status.value
        stmt = (
            select(EventModel)
            .where(condition)
            .order_by(EventModel.event_at.asc(), EventModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return await self._page(stmt, condition)

    async def count_by_status(self, status: EventStatus) -> int:
        stmt = (
            select(func.count())
            .select_from(EventModel)
            .where(EventModel.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _page(self, stmt, condition) -> tuple[list[Event], int]:
        result = await self.session.execute(stmt)
        items = [self._to_domain(m) for m in result.scalars().all()]
        total = await self.session.execute(
            select(func.count()).select_from(EventModel).where(condition)
        )
        return items, total.scalar_one()

    def _to_domain(self, model: EventModel) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            description=model.description,
            location=model.location,
            event_at=model.event_at,
            creator_id=model.creator_id,
            status=EventStatus(model.status),
            registration_deadline=model.registration_deadline,
            max_participants=model.max_participants,
            approved_by=model.approved_by,
            approved_at=model.approved_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, event: Event) -> EventModel:
        return EventModel(
            id=event.id,
            title=event.title,
            description=event.description,
            location=event.location,
            event_at=event.event_at,
            creator_id=event.creator_id,
            status=event.status.value,
            registration_deadline=event.registration_deadline,
            max_participants=event.max_participants,
            approved_by=event.approved_by,
            approved_at=event.approved_at,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
