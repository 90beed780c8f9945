from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.location_repository import ILocationRepository
from chapterhub.domain.entities import City, State


class LocationRepository(ILocationRepository):
    """State/City repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_state(self, state_id: UUID) -> Optional[State]:
        stmt = select(State).where(State.id == state_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_city(self, city_id: UUID) -> Optional[City]:
        stmt = select(City).where(City.id == city_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_states(self) -> List[State]:
        result = await self.session.exec(select(State).order_by(State.name))
        return list(result.all())

    async def list_cities(self, state_id: Optional[UUID] = None) -> List[City]:
        stmt = select(City)
        if state_id is not None:
            stmt = stmt.where(City.state_id == state_id)
        result = await self.session.exec(stmt.order_by(City.name))
        return list(result.all())
