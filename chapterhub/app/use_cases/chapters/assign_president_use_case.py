"""
Assign President Use Case

Installs a chapter member as the chapter's president, demoting whoever held
the office before. Everything happens in one unit of work with the chapter
row locked, so two concurrent reassignments serialize.
"""

import logging
from uuid import UUID

from chapterhub.app.authorization import can_assign_president, chapter_scope_filter
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor, Target
from chapterhub.domain.entities import AuditAction, ChapterRole, Role
from chapterhub.libs.result import Result, Return

from .dtos import AssignPresidentResponse

logger = logging.getLogger(__name__)


class AssignPresidentUseCase:
    """
    Use case for assigning or changing a chapter president.

    Business Rules:
    - Chapter must be inside the actor's chapter scope (else NOT_FOUND)
    - Actor needs broader-or-equal jurisdiction over the chapter location
    - New president must already be a member of the chapter
    - Previous president's ChapterMember.role becomes MEMBER
    - Previous president's global role becomes USER only if it is still
      exactly PRESIDENT (a director filling in is never demoted)
    - New president: global role PRESIDENT, ChapterMember.role PRESIDENT,
      location stamped to the chapter's state/city
    - Afterwards exactly one PRESIDENT row exists in the chapter
    - Audited as PRESIDENT_ASSIGNED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, chapter_id: UUID, user_id: UUID
    ) -> Result[AssignPresidentResponse]:
        async with self.uow:
            # Lock the chapter row; presidency is read and written under it
            chapter = await self.uow.chapters.get_by_id_for_update(chapter_id)
            if chapter is None or not chapter_scope_filter(actor).matches(chapter):
                return Return.err(not_found("Chapter not found"))

            if not can_assign_president(actor, Target.of_chapter(chapter)):
                return Return.err(forbidden("You cannot assign a president for this chapter"))

            membership = await self.uow.chapter_members.get_by_chapter_and_user(
                chapter.id, user_id
            )
            if membership is None:
                return Return.err(not_found("User is not a member of this chapter"))

            new_president = await self.uow.users.get_by_id(user_id)
            if new_president is None:
                return Return.err(not_found("User not found"))

            previous_id = chapter.president_id

            # Every other PRESIDENT holder in this chapter steps down
            to_demote = set()
            if previous_id is not None and previous_id != user_id:
                to_demote.add(previous_id)
            for row in await self.uow.chapter_members.list_by_chapter_and_role(
                chapter.id, ChapterRole.PRESIDENT
            ):
                if row.user_id != user_id:
                    to_demote.add(row.user_id)

            previous_demoted = False
            for old_id in to_demote:
                old_membership = await self.uow.chapter_members.get_by_chapter_and_user(
                    chapter.id, old_id
                )
                if old_membership is not None and old_membership.role == ChapterRole.PRESIDENT:
                    old_membership.role = ChapterRole.MEMBER
                    await self.uow.chapter_members.update(old_membership)

                old_user = await self.uow.users.get_by_id(old_id)
                if old_user is not None and old_user.role == Role.PRESIDENT:
                    old_user.role = Role.USER
                    await self.uow.users.update(old_user)
                    if old_id == previous_id:
                        previous_demoted = True

            new_president.role = Role.PRESIDENT
            new_president.state_id = chapter.state_id
            new_president.city_id = chapter.city_id
            new_president.chapter_id = chapter.id
            await self.uow.users.update(new_president)

            membership.role = ChapterRole.PRESIDENT
            await self.uow.chapter_members.update(membership)

            chapter.president_id = user_id
            await self.uow.chapters.update(chapter)

            await self.uow.audit_logs.record(
                AuditAction.PRESIDENT_ASSIGNED,
                actor.user_id,
                user_id,
                {
                    "chapter_id": str(chapter.id),
                    "previous_president_id": str(previous_id) if previous_id else None,
                    "previous_president_demoted": previous_demoted,
                },
            )

            await self.uow.commit()

            logger.info(
                "Chapter %s president changed from %s to %s", chapter.id, previous_id, user_id
            )

            return Return.ok(
                AssignPresidentResponse(
                    chapter_id=chapter.id,
                    president_id=user_id,
                    previous_president_id=previous_id if previous_id != user_id else None,
                    previous_president_demoted=previous_demoted,
                )
            )
