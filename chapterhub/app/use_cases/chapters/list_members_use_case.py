from uuid import UUID

from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.libs.result import Result, Return

from .dtos import MemberListResponse, MemberResponse
from .visibility import find_visible_chapter

MAX_TAKE = 100


class ListMembersUseCase:
    """Members of a visible chapter, most recently joined first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, chapter_id: UUID, skip: int = 0, take: int = 50
    ) -> Result[MemberListResponse]:
        skip = max(skip, 0)
        take = min(max(take, 1), MAX_TAKE)

        async with self.uow:
            chapter = await find_visible_chapter(self.uow, actor, chapter_id, include_members=True)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            memberships = await self.uow.chapter_members.list_by_chapter(chapter.id, skip, take)
            total = await self.uow.chapter_members.count_by_chapter(chapter.id)
            users = {
                u.id: u
                for u in await self.uow.users.get_by_ids([m.user_id for m in memberships])
            }

            items = [MemberResponse.from_entity(m, users.get(m.user_id)) for m in memberships]
            return Return.ok(MemberListResponse(items=items, total=total, skip=skip, take=take))
