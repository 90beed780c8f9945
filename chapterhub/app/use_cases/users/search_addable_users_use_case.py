from typing import List

from chapterhub.app.authorization import Forbidden, require_role
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role
from chapterhub.libs.result import Result, Return

from .dtos import UserResponse

MIN_QUERY_LENGTH = 2
RESULT_LIMIT = 10
SEARCH_ROLES = (Role.SUPER_ADMIN, Role.STATE_DIRECTOR, Role.CITY_DIRECTOR, Role.PRESIDENT)


class SearchAddableUsersUseCase:
    """
    Candidates for "add member".

    Business Rules:
    - Only chapter-managing roles may search
    - Queries shorter than two characters return nothing
    - Up to ten USER-role users matching name or email
    - Users with a ChapterMember row are excluded; a stale chapter_id alone
      does not exclude anyone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, query: str) -> Result[List[UserResponse]]:
        try:
            require_role(actor, SEARCH_ROLES)
        except Forbidden as exc:
            return Return.err(exc.error)

        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return Return.ok([])

        async with self.uow:
            users = await self.uow.users.search_without_membership(query, Role.USER, RESULT_LIMIT)
            return Return.ok([UserResponse.from_entity(u) for u in users])
