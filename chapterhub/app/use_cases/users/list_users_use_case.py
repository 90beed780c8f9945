from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import user_scope_filter
from chapterhub.app.errors import invalid
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role
from chapterhub.libs.result import Result, Return

from .dtos import UserListResponse, UserResponse

MAX_TAKE = 100


class ListUsersUseCase:
    """Users inside the actor's user scope, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        skip: int = 0,
        take: int = 20,
        role: Optional[str] = None,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> Result[UserListResponse]:
        role_filter = None
        if role:
            role_filter = Role.parse(role)
            if role_filter is None:
                return Return.err(invalid(f"Invalid role: {role}"))

        skip = max(skip, 0)
        take = min(max(take, 1), MAX_TAKE)
        search = search.strip() if search else None
        scope = user_scope_filter(actor)

        async with self.uow:
            users = await self.uow.users.list_scoped(
                scope, skip, take, role=role_filter, state_id=state_id, city_id=city_id, search=search
            )
            total = await self.uow.users.count_scoped(
                scope, role=role_filter, state_id=state_id, city_id=city_id, search=search
            )

            return Return.ok(
                UserListResponse(
                    items=[UserResponse.from_entity(u) for u in users],
                    total=total,
                    skip=skip,
                    take=take,
                )
            )
