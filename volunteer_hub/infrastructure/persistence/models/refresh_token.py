"""Refresh token table.

Security:
    - token_hash: SHA-256 hex digest of the opaque token (never plaintext)
    - expires_at: checked on every refresh, independent of cleanup
    - revoked: set on logout
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from volunteer_hub.infrastructure.persistence.base import BaseModel, UTCDateTime


class RefreshTokenModel(BaseModel):
    """Persisted half of a credential pair.

    Indexes:
        - token_hash: unique lookup on refresh
        - user_id: delete prior sessions on issue
        - (expires_at, revoked): housekeeping sweep
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token_hash: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    revoked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_refresh_tokens_cleanup", "expires_at", "revoked"),
    )
