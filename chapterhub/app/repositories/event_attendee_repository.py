from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from chapterhub.domain.entities import EventAttendee


class IEventAttendeeRepository(ABC):
    """EventAttendee repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, attendee_id: UUID) -> Optional[EventAttendee]:
        """Get attendee row by ID"""
        pass

    @abstractmethod
    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventAttendee]:
        """Get attendee row by its unique (event, user) pair"""
        pass

    @abstractmethod
    async def list_user_ids_by_event(self, event_id: UUID) -> List[UUID]:
        """User IDs already attached to an event"""
        pass

    @abstractmethod
    async def list_event_ids_by_user(self, user_id: UUID, event_ids: List[UUID]) -> List[UUID]:
        """Which of the given events the user already has a row for"""
        pass

    @abstractmethod
    async def list_by_event(self, event_id: UUID) -> List[EventAttendee]:
        """Attendee rows of an event, oldest first"""
        pass

    @abstractmethod
    async def count_by_events(self, event_ids: List[UUID]) -> Dict[UUID, int]:
        """Attendee count per event"""
        pass

    @abstractmethod
    async def create(self, attendee: EventAttendee) -> EventAttendee:
        """Create a new attendee row"""
        pass

    @abstractmethod
    async def create_many(self, attendees: List[EventAttendee]) -> List[EventAttendee]:
        """Create several attendee rows"""
        pass

    @abstractmethod
    async def update(self, attendee: EventAttendee) -> EventAttendee:
        """Update existing attendee row"""
        pass

    @abstractmethod
    async def delete(self, attendee: EventAttendee) -> None:
        """Delete one attendee row"""
        pass

    @abstractmethod
    async def delete_by_user_and_events(self, user_id: UUID, event_ids: List[UUID]) -> int:
        """Delete the user's rows for the given events"""
        pass

    @abstractmethod
    async def delete_by_event(self, event_id: UUID) -> int:
        """Delete every attendee row of an event"""
        pass
