from uuid import UUID

from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.libs.result import Result, Return

from .dtos import ChapterResponse
from .visibility import find_visible_chapter


class GetChapterUseCase:
    """Single chapter inside the actor's scope; anything else is NOT_FOUND"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, chapter_id: UUID) -> Result[ChapterResponse]:
        async with self.uow:
            chapter = await find_visible_chapter(self.uow, actor, chapter_id, include_members=True)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            member_count = await self.uow.chapter_members.count_by_chapter(chapter.id)
            pending = await self.uow.join_requests.count_pending_by_chapter(chapter.id)

            return Return.ok(ChapterResponse.from_entity(chapter, member_count, pending))
