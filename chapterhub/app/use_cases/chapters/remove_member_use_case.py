"""
Remove Member Use Case

Removes one membership from a chapter and undoes what joining did.
"""

from uuid import UUID

from chapterhub.app.authorization import can_manage_chapter_members
from chapterhub.app.errors import conflict, forbidden, not_found
from chapterhub.app.services.attendance import drop_upcoming_attendance
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, ChapterRole, Role
from chapterhub.libs.result import Result, Return

from .dtos import RemoveMemberResponse

RESET_ON_REMOVAL = (Role.VICE_PRESIDENT, Role.SECRETARY)


class RemoveMemberUseCase:
    """
    Use case for removing a member from a chapter.

    Business Rules:
    - Actor manages the chapter (jurisdiction or chapter president)
    - Membership must belong to the chapter
    - The sitting president cannot be removed (CONFLICT, nothing written)
    - VICE_PRESIDENT / SECRETARY global roles fall back to USER
    - User.chapter_id is cleared
    - Attendee rows for the chapter's future events are deleted, past ones kept
    - Audited as MEMBER_REMOVED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, chapter_id: UUID, membership_id: UUID
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            chapter = await self.uow.chapters.get_by_id_for_update(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            if not can_manage_chapter_members(actor, chapter):
                return Return.err(forbidden("You cannot manage members of this chapter"))

            membership = await self.uow.chapter_members.get_by_id(membership_id)
            if membership is None or membership.chapter_id != chapter.id:
                return Return.err(not_found("Membership not found"))

            if (
                chapter.president_id == membership.user_id
                or membership.role == ChapterRole.PRESIDENT
            ):
                return Return.err(
                    conflict("Assign a new president before removing the current one")
                )

            user = await self.uow.users.get_by_id(membership.user_id)

            await self.uow.chapter_members.delete(membership)

            role_reset = False
            if user is not None:
                if user.role in RESET_ON_REMOVAL:
                    user.role = Role.USER
                    role_reset = True
                user.chapter_id = None
                await self.uow.users.update(user)

            removed_rows = await drop_upcoming_attendance(
                self.uow, chapter.id, membership.user_id
            )

            await self.uow.audit_logs.record(
                AuditAction.MEMBER_REMOVED,
                actor.user_id,
                membership.user_id,
                {
                    "chapter_id": str(chapter.id),
                    "chapter_role": membership.role.value,
                    "role_reset": role_reset,
                    "attendee_rows_removed": removed_rows,
                },
            )

            await self.uow.commit()

            return Return.ok(
                RemoveMemberResponse(
                    status="removed",
                    user_id=membership.user_id,
                    role_reset=role_reset,
                    attendee_rows_removed=removed_rows,
                )
            )
