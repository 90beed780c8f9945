from uuid import UUID

from chapterhub.app.authorization import Forbidden, require_role, user_scope_filter
from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.domain.roles import DIRECTOR_ROLES
from chapterhub.libs.result import Result, Return

from .dtos import UserResponse, UserStatusResponse


class ActivateUserUseCase:
    """
    Business Rules:
    - Actor is SUPER_ADMIN, STATE_DIRECTOR or CITY_DIRECTOR
    - Target must be inside the actor's user scope
    - Memberships are not restored; the user rejoins through the usual paths
    - Audited as USER_ACTIVATED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, user_id: UUID) -> Result[UserStatusResponse]:
        try:
            require_role(actor, DIRECTOR_ROLES)
        except Forbidden as exc:
            return Return.err(exc.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user_scope_filter(actor).matches(user):
                return Return.err(not_found("User not found"))

            user.is_active = True
            await self.uow.users.update(user)

            await self.uow.audit_logs.record(AuditAction.USER_ACTIVATED, actor.user_id, user.id)

            await self.uow.commit()

            return Return.ok(UserStatusResponse(user=UserResponse.from_entity(user)))
