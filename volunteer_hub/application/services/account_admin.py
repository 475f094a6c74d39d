"""Account administration (admin only).

Locking or deactivating an account also deletes the user's refresh records,
so the next refresh fails immediately. Access tokens already issued stay
valid until they expire.
"""

from collections.abc import Callable
from uuid import UUID

from volunteer_hub.application.services.credential_service import user_lock_key
from volunteer_hub.core.enums import ErrorCode
from volunteer_hub.core.errors import DomainError, NotFoundError
from volunteer_hub.core.keyed_lock import KeyedLock
from volunteer_hub.core.result import Failure, Result, Success
from volunteer_hub.domain.entities import User
from volunteer_hub.domain.policies import Capability, authorize_capability
from volunteer_hub.domain.protocols import (
    LoggerProtocol,
    RefreshTokenRepository,
    UserRepository,
)
from volunteer_hub.domain.value_objects import Actor

type _Transition = Callable[[User], Result[None, DomainError]]


class AccountAdministration:
    """Lock, unlock, activate and deactivate user accounts."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        locks: KeyedLock,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._locks = locks
        self._logger = logger

    async def lock(self, actor: Actor, user_id: UUID) -> Result[User, DomainError]:
        return await self._apply(
            actor, user_id, "account_locked", User.lock, end_sessions=True
        )

    async def unlock(self, actor: Actor, user_id: UUID) -> Result[User, DomainError]:
        return await self._apply(actor, user_id, "account_unlocked", User.unlock)

    async def deactivate(
        self, actor: Actor, user_id: UUID
    ) -> Result[User, DomainError]:
        return await self._apply(
            actor, user_id, "account_deactivated", User.deactivate, end_sessions=True
        )

    async def activate(self, actor: Actor, user_id: UUID) -> Result[User, DomainError]:
        return await self._apply(actor, user_id, "account_activated", User.activate)

    async def _apply(
        self,
        actor: Actor,
        user_id: UUID,
        log_event: str,
        transition: _Transition,
        *,
        end_sessions: bool = False,
    ) -> Result[User, DomainError]:
        gate = authorize_capability(actor, Capability.MANAGE_USERS)
        if isinstance(gate, Failure):
            return gate

        # Same key as CredentialService.issue
        async with self._locks.hold(user_lock_key(user_id)):
            user = await self._user_repo.find_by_id(user_id)
            if user is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                        resource_type="User",
                        resource_id=str(user_id),
                    )
                )

            changed = transition(user)
            if isinstance(changed, Failure):
                return changed
            await self._user_repo.update(user)

            removed = 0
            if end_sessions:
                removed = await self._refresh_token_repo.delete_by_user(user_id)

        self._logger.info(
            log_event,
            user_id=str(user_id),
            admin_id=str(actor.user_id),
            sessions_ended=removed,
        )
        return Success(value=user)
