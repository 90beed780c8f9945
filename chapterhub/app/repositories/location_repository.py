from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from chapterhub.domain.entities import City, State


class ILocationRepository(ABC):
    """State/City repository interface - application layer"""

    @abstractmethod
    async def get_state(self, state_id: UUID) -> Optional[State]:
        """Get state by ID"""
        pass

    @abstractmethod
    async def get_city(self, city_id: UUID) -> Optional[City]:
        """Get city by ID"""
        pass

    @abstractmethod
    async def list_states(self) -> List[State]:
        """All states ordered by name"""
        pass

    @abstractmethod
    async def list_cities(self, state_id: Optional[UUID] = None) -> List[City]:
        """Cities ordered by name, optionally within one state"""
        pass
