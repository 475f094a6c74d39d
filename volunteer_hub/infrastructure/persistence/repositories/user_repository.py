"""UserRepository - SQLAlchemy implementation of the UserRepository protocol.

Maps between domain User entities and UserModel rows.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_hub.domain.entities import User
from volunteer_hub.domain.enums import UserRole
from volunteer_hub.infrastructure.persistence.models import UserModel


class UserRepository:
    """SQLAlchemy implementation of the UserRepository protocol.

    Does not inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("ana@example.org")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> None:
        """Create new user.

        Raises:
            IntegrityError: If the email already exists.
        """
        self.session.add(self._to_model(user))
        await self.session.commit()

    async def update(self, user: User) -> None:
        """Persist account flags and profile fields.

        Raises:
            NoResultFound: If the user doesn't exist.
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one()

        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.full_name = user.full_name
        user_model.role = user.role.value
        user_model.is_active = user.is_active
        user_model.is_locked = user.is_locked
        user_model.updated_at = user.updated_at

        await self.session.commit()

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            full_name=user_model.full_name,
            role=UserRole(user_model.role),
            is_active=user_model.is_active,
            is_locked=user_model.is_locked,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            full_name=user.full_name,
            role=user.role.value,
            is_active=user.is_active,
            is_locked=user.is_locked,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
