"""RegistrationRepository - SQLAlchemy implementation of the
RegistrationRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_hub.domain.entities import Registration
from volunteer_hub.domain.enums import RegistrationStatus
from volunteer_hub.infrastructure.persistence.models import (
    EventModel,
    RegistrationModel,
)

_CANCELLED = RegistrationStatus.CANCELLED.value


class RegistrationRepository:
    """SQLAlchemy implementation of the RegistrationRepository protocol.

    ``save`` raises IntegrityError if an active registration already exists
    for the same (user, event), via the partial unique index.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, registration: Registration) -> None:
        self.session.add(self._to_model(registration))
        await self.session.commit()

    async def find_by_id(self, registration_id: UUID) -> Registration | None:
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> Registration | None:
        stmt = select(RegistrationModel).where(
            RegistrationModel.user_id == user_id,
            RegistrationModel.event_id == event_id,
            RegistrationModel.status != _CANCELLED,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_active_by_user_and_event(
        self, user_id: UUID, event_id: UUID
    ) -> bool:
        stmt = select(RegistrationModel.id).where(
            RegistrationModel.user_id == user_id,
            RegistrationModel.event_id == event_id,
            RegistrationModel.status != _CANCELLED,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_event(
        self,
        event_id: UUID,
        *,
        status: RegistrationStatus | None = None,
        limit: int,
        offset: int,
    ) -> tuple[list[Registration], int]:
        conditions = [RegistrationModel.event_id == event_id]
        if status is not None:
            conditions.append(RegistrationModel.status == status.value)
        stmt = (
            select(RegistrationModel)
            .where(*conditions)
            .order_by(RegistrationModel.created_at.asc(), RegistrationModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return await self._page(stmt, select(RegistrationModel).where(*conditions))

    async def find_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        condition = RegistrationModel.user_id == user_id
        stmt = (
            select(RegistrationModel)
            .where(condition)
            .order_by(RegistrationModel.created_at.desc(), RegistrationModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._page(stmt, select(RegistrationModel).where(condition))

    async def find_history_by_user(
        self, user_id: UUID, *, limit: int, offset: int
    ) -> tuple[list[Registration], int]:
        """Approved registrations joined to events, latest event date first."""
        base = (
            select(RegistrationModel)
            .join(EventModel, EventModel.id == RegistrationModel.event_id)
            .where(
                RegistrationModel.user_id == user_id,
                RegistrationModel.status == RegistrationStatus.APPROVED.value,
            )
        )
        stmt = (
            base.order_by(EventModel.event_at.desc(), RegistrationModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._page(stmt, base)

    async def count_approved_by_event(self, event_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(RegistrationModel)
            .where(
                RegistrationModel.event_id == event_id,
                RegistrationModel.status == RegistrationStatus.APPROVED.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update(self, registration: Registration) -> None:
        """Persist status, notes and completion.

        Raises:
            NoResultFound: If the registration doesn't exist.
        """
        stmt = select(RegistrationModel).where(RegistrationModel.id == registration.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.status = registration.status.value
        model.notes = registration.notes
        model.completed = registration.completed
        model.completed_at = registration.completed_at
        model.updated_at = registration.updated_at

        await self.session.commit()

    async def delete_by_event(self, event_id: UUID) -> int:
        result = await self.session.execute(
            delete(RegistrationModel).where(RegistrationModel.event_id == event_id)
        )
        await self.session.commit()
        return result.rowcount

    async def _page(self, stmt, counted) -> tuple[list[Registration], int]:
        result = await self.session.execute(stmt)
        items = [self._to_domain(m) for m in result.scalars().all()]
        total = await self.session.execute(
            select(func.count()).select_from(counted.subquery())
        )
        return items, total.scalar_one()

    def _to_domain(self, model: RegistrationModel) -> Registration:
        return Registration(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            status=RegistrationStatus(model.status),
            notes=model.notes,
            completed=model.completed,
            completed_at=model.completed_at,
            registered_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, registration: Registration) -> RegistrationModel:
        return RegistrationModel(
            id=registration.id,
            user_id=registration.user_id,
            event_id=registration.event_id,
            status=registration.status.value,
            notes=registration.notes,
            completed=registration.completed,
            completed_at=registration.completed_at,
            created_at=registration.registered_at,
            updated_at=registration.updated_at,
        )
