"""
Assign Chapter Role Use Case

Sets a member's chapter role (VICE_PRESIDENT, SECRETARY or plain member) and
keeps the member's global role in step.
"""

from uuid import UUID

from chapterhub.app.authorization import (
    can_assign_role,
    chapter_scope_filter,
    is_chapter_president,
)
from chapterhub.app.errors import conflict, forbidden, invalid, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor, Target
from chapterhub.domain.entities import AuditAction, ChapterRole, Role
from chapterhub.domain.roles import chapter_role_for
from chapterhub.libs.result import Result, Return

from .dtos import AssignChapterRoleResponse

ASSIGNABLE_CHAPTER_ROLES = (Role.VICE_PRESIDENT, Role.SECRETARY, Role.USER)


class AssignChapterRoleUseCase:
    """
    Use case for assigning a chapter role to a member.

    Business Rules:
    - Role is VICE_PRESIDENT, SECRETARY or USER ("MEMBER" is accepted as USER)
    - Chapter must be inside the actor's chapter scope (else NOT_FOUND);
      a PRESIDENT of another chapter gets FORBIDDEN from the ownership check
    - Target must be a member of the chapter
    - The role-assignment predicate is evaluated with the target placed at
      the chapter's location
    - A PRESIDENT actor must also be the president of this chapter
    - The sitting president's role is changed only via president assignment
    - USER maps to chapter role MEMBER; officer roles stamp the chapter's
      state/city on the user
    - Audited as CHAPTER_ROLE_ASSIGNED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, chapter_id: UUID, user_id: UUID, role: str
    ) -> Result[AssignChapterRoleResponse]:
        target_role = Role.USER if role == ChapterRole.MEMBER.value else Role.parse(role)
        if target_role not in ASSIGNABLE_CHAPTER_ROLES:
            return Return.err(
                invalid("Role must be one of VICE_PRESIDENT, SECRETARY, USER")
            )

        async with self.uow:
            chapter = await self.uow.chapters.get_by_id_for_update(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            # Presidents of other chapters fall through to the ownership check below
            if actor.role != Role.PRESIDENT and not chapter_scope_filter(actor).matches(chapter):
                return Return.err(not_found("Chapter not found"))

            membership = await self.uow.chapter_members.get_by_chapter_and_user(
                chapter.id, user_id
            )
            if membership is None:
                return Return.err(not_found("User is not a member of this chapter"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            if not can_assign_role(actor, target_role, Target.of_user(user).at_chapter(chapter)):
                return Return.err(forbidden("You cannot assign this role"))

            if actor.role == Role.PRESIDENT and not is_chapter_president(actor, chapter):
                return Return.err(forbidden("You are not the president of this chapter"))

            if chapter.president_id == user.id or membership.role == ChapterRole.PRESIDENT:
                return Return.err(
                    conflict("The chapter president must be replaced before changing their role")
                )

            old_role = user.role
            chapter_role = chapter_role_for(target_role)

            membership.role = chapter_role
            await self.uow.chapter_members.update(membership)

            user.role = target_role
            if target_role != Role.USER:
                user.state_id = chapter.state_id
                user.city_id = chapter.city_id
            await self.uow.users.update(user)

            await self.uow.audit_logs.record(
                AuditAction.CHAPTER_ROLE_ASSIGNED,
                actor.user_id,
                user.id,
                {
                    "chapter_id": str(chapter.id),
                    "old_role": old_role.value,
                    "new_role": target_role.value,
                },
            )

            await self.uow.commit()

            return Return.ok(
                AssignChapterRoleResponse(
                    chapter_id=chapter.id,
                    user_id=user.id,
                    role=target_role,
                    chapter_role=chapter_role,
                )
            )
