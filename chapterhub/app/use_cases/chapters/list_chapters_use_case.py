"""
List Chapters Use Case

Paginated chapter listing restricted by the actor's chapter scope filter.
"""

from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import chapter_scope_filter
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import ChapterStatus
from chapterhub.libs.result import Result, Return

from .dtos import ChapterListResponse, ChapterResponse

MAX_TAKE = 100


class ListChaptersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        skip: int = 0,
        take: int = 20,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        status: Optional[ChapterStatus] = None,
        search: Optional[str] = None,
    ) -> Result[ChapterListResponse]:
        skip = max(skip, 0)
        take = min(max(take, 1), MAX_TAKE)
        search = search.strip() if search else None
        scope = chapter_scope_filter(actor)

        async with self.uow:
            chapters = await self.uow.chapters.list_scoped(
                scope, skip, take, state_id=state_id, city_id=city_id, status=status, search=search
            )
            total = await self.uow.chapters.count_scoped(
                scope, state_id=state_id, city_id=city_id, status=status, search=search
            )

            items = []
            for chapter in chapters:
                member_count = await self.uow.chapter_members.count_by_chapter(chapter.id)
                pending = await self.uow.join_requests.count_pending_by_chapter(chapter.id)
                items.append(ChapterResponse.from_entity(chapter, member_count, pending))

            return Return.ok(ChapterListResponse(items=items, total=total, skip=skip, take=take))
