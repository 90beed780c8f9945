from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.libs.result import Result, Return


class StateResponse(BaseModel):
    id: UUID
    name: str
    code: str


class CityResponse(BaseModel):
    id: UUID
    name: str
    state_id: UUID


class ListStatesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[StateResponse]]:
        async with self.uow:
            states = await self.uow.locations.list_states()
            return Return.ok([StateResponse(id=s.id, name=s.name, code=s.code) for s in states])


class ListCitiesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, state_id: Optional[UUID] = None) -> Result[List[CityResponse]]:
        async with self.uow:
            cities = await self.uow.locations.list_cities(state_id)
            return Return.ok(
                [CityResponse(id=c.id, name=c.name, state_id=c.state_id) for c in cities]
            )
