from typing import List
from uuid import UUID

from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.libs.result import Result, Return

from .dtos import JoinRequestResponse
from .visibility import find_visible_chapter


class ListJoinRequestsUseCase:
    """PENDING join requests of a chapter inside the actor's scope, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, chapter_id: UUID) -> Result[List[JoinRequestResponse]]:
        async with self.uow:
            chapter = await find_visible_chapter(self.uow, actor, chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            requests = await self.uow.join_requests.list_pending_by_chapter(chapter.id)
            users = {
                u.id: u for u in await self.uow.users.get_by_ids([r.user_id for r in requests])
            }

            return Return.ok(
                [JoinRequestResponse.from_entity(r, users.get(r.user_id)) for r in requests]
            )
