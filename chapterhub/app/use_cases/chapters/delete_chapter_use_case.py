"""
Delete Chapter Use Case

Deletes a chapter together with the rows it owns.
"""

from uuid import UUID

from chapterhub.app.authorization import can_delete_chapter
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.libs.result import Result, Return

from .dtos import DeleteChapterResponse


class DeleteChapterUseCase:
    """
    Use case for deleting a chapter.

    Business Rules:
    - Actor needs broader-or-equal jurisdiction over the chapter location
    - JoinRequest and ChapterMember rows are deleted with the chapter
    - User.chapter_id and Event.chapter_id pointing at it are nulled
    - Audited as CHAPTER_DELETED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, chapter_id: UUID) -> Result[DeleteChapterResponse]:
        async with self.uow:
            chapter = await self.uow.chapters.get_by_id_for_update(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            if not can_delete_chapter(actor, chapter):
                return Return.err(forbidden("You cannot delete this chapter"))

            requests_removed = await self.uow.join_requests.delete_by_chapter(chapter.id)
            members_removed = await self.uow.chapter_members.delete_by_chapter(chapter.id)
            await self.uow.users.clear_chapter(chapter.id)
            await self.uow.events.detach_chapter(chapter.id)
            await self.uow.chapters.delete(chapter)

            await self.uow.audit_logs.record(
                AuditAction.CHAPTER_DELETED,
                actor.user_id,
                chapter_id,
                {
                    "name": chapter.name,
                    "members_removed": members_removed,
                    "join_requests_removed": requests_removed,
                },
            )

            await self.uow.commit()

            return Return.ok(DeleteChapterResponse(status="deleted", id=chapter_id))
