"""RefreshTokenRepository - SQLAlchemy implementation for refresh records."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_hub.domain.entities import RefreshTokenRecord
from volunteer_hub.infrastructure.persistence.models import RefreshTokenModel


def _to_domain(model: RefreshTokenModel) -> RefreshTokenRecord:
    return RefreshTokenRecord(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        expires_at=model.expires_at,
        revoked=model.revoked,
        created_at=model.created_at,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation for refresh token persistence.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     record = await repo.find_by_token_hash(token_hash)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, record: RefreshTokenRecord) -> None:
        self.session.add(
            RefreshTokenModel(
                id=record.id,
                user_id=record.user_id,
                token_hash=record.token_hash,
                expires_at=record.expires_at,
                revoked=record.revoked,
                created_at=record.created_at,
            )
        )
        await self.session.commit()

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenRecord | None:
        """Find a record by digest, expired and revoked ones included."""
        stmt = select(RefreshTokenModel).where(
            RefreshTokenModel.token_hash == token_hash
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def revoke(self, record_id: UUID) -> None:
        await self.session.execute(
            update(RefreshTokenModel)
            .where(RefreshTokenModel.id == record_id)
            .values(revoked=True)
        )
        await self.session.commit()

    async def delete(self, record_id: UUID) -> None:
        await self.session.execute(
            delete(RefreshTokenModel).where(RefreshTokenModel.id == record_id)
        )
        await self.session.commit()

    async def delete_by_user(self, user_id: UUID) -> int:
        result = await self.session.execute(
            delete(RefreshTokenModel).where(RefreshTokenModel.user_id == user_id)
        )
        await self.session.commit()
        return result.rowcount

    async def delete_expired_and_revoked(self, now: datetime) -> int:
        result = await self.session.execute(
            delete(RefreshTokenModel).where(
                or_(
                    RefreshTokenModel.expires_at <= now,
                    RefreshTokenModel.revoked.is_(True),
                )
            )
        )
        await self.session.commit()
        return result.rowcount
