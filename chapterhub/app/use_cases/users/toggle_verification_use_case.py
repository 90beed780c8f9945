from uuid import UUID

from chapterhub.app.authorization import can_verify_users, user_scope_filter
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.libs.result import Result, Return

from .dtos import UserResponse, UserStatusResponse


class ToggleVerificationUseCase:
    """Flips User.is_verified (SUPER_ADMIN / STATE_DIRECTOR, target in scope)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, user_id: UUID) -> Result[UserStatusResponse]:
        if not can_verify_users(actor):
            return Return.err(forbidden("You cannot verify users"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user_scope_filter(actor).matches(user):
                return Return.err(not_found("User not found"))

            user.is_verified = not user.is_verified
            await self.uow.users.update(user)

            action = AuditAction.USER_VERIFIED if user.is_verified else AuditAction.USER_UNVERIFIED
            await self.uow.audit_logs.record(action, actor.user_id, user.id)

            await self.uow.commit()

            return Return.ok(UserStatusResponse(user=UserResponse.from_entity(user)))
