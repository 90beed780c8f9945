"""
Deactivate User Use Case

Marks a user inactive and removes them from every chapter.
"""

from uuid import UUID

from chapterhub.app.authorization import Forbidden, require_role, user_scope_filter
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.chapter_auto_join import remove_from_all_chapters
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.domain.roles import DIRECTOR_ROLES
from chapterhub.libs.result import Result, Return

from .dtos import UserResponse, UserStatusResponse


class DeactivateUserUseCase:
    """
    Use case for deactivating a user.

    Business Rules:
    - Actor is SUPER_ADMIN, STATE_DIRECTOR or CITY_DIRECTOR
    - Target must be inside the actor's user scope; actors cannot deactivate themselves
    - Every ChapterMember row of the user is deleted (all chapters)
    - User.chapter_id is cleared, upcoming attendee rows in those chapters
      are deleted and any chapter presidency pointing at the user is vacated
    - Global role is never changed
    - Audited as USER_DEACTIVATED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, user_id: UUID) -> Result[UserStatusResponse]:
        try:
            require_role(actor, DIRECTOR_ROLES)
        except Forbidden as exc:
            return Return.err(exc.error)

        if user_id == actor.user_id:
            return Return.err(forbidden("You cannot deactivate yourself"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user_scope_filter(actor).matches(user):
                return Return.err(not_found("User not found"))

            removed = await remove_from_all_chapters(self.uow, user)

            user.is_active = False
            await self.uow.users.update(user)

            await self.uow.audit_logs.record(
                AuditAction.USER_DEACTIVATED,
                actor.user_id,
                user.id,
                {"memberships_removed": removed},
            )

            await self.uow.commit()

            return Return.ok(
                UserStatusResponse(user=UserResponse.from_entity(user), memberships_removed=removed)
            )
