"""User table."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from volunteer_hub.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Platform user.

    Fields:
        email: Login email, stored lowercase (unique)
        password_hash: Bcrypt hash (never plaintext)
        full_name: Display name
        role: volunteer | organizer | admin
        is_active / is_locked: Account flags checked on login and refresh
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
