from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from chapterhub.domain.entities import Event, EventType


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def list_upcoming_by_chapter(self, chapter_id: UUID, now: datetime) -> List[Event]:
        """Events of a chapter dated at or after now, soonest first"""
        pass

    @abstractmethod
    async def list_by_chapter(
        self, chapter_id: UUID, event_type: Optional[EventType] = None
    ) -> List[Event]:
        """Events of a chapter, latest date first"""
        pass

    @abstractmethod
    async def detach_chapter(self, chapter_id: UUID) -> int:
        """Null chapter_id on every event of the chapter"""
        pass

    @abstractmethod
    async def delete(self, event: Event) -> None:
        """Delete event row"""
        pass
