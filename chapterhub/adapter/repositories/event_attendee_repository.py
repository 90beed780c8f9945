from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.event_attendee_repository import IEventAttendeeRepository
from chapterhub.domain.entities import EventAttendee


class EventAttendeeRepository(IEventAttendeeRepository):
    """EventAttendee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, attendee_id: UUID) -> Optional[EventAttendee]:
        stmt = select(EventAttendee).where(EventAttendee.id == attendee_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventAttendee]:
        stmt = select(EventAttendee).where(
            EventAttendee.event_id == event_id, EventAttendee.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_user_ids_by_event(self, event_id: UUID) -> List[UUID]:
        stmt = select(EventAttendee.user_id).where(EventAttendee.event_id == event_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_event_ids_by_user(self, user_id: UUID, event_ids: List[UUID]) -> List[UUID]:
        if not event_ids:
            return []
        stmt = select(EventAttendee.event_id).where(
            EventAttendee.user_id == user_id, EventAttendee.event_id.in_(event_ids)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_event(self, event_id: UUID) -> List[EventAttendee]:
        stmt = (
            select(EventAttendee)
            .where(EventAttendee.event_id == event_id)
            .order_by(EventAttendee.created_at.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_events(self, event_ids: List[UUID]) -> Dict[UUID, int]:
        if not event_ids:
            return {}
        stmt = (
            select(EventAttendee.event_id, func.count())
            .where(EventAttendee.event_id.in_(event_ids))
            .group_by(EventAttendee.event_id)
        )
        result = await self.session.exec(stmt)
        return {event_id: count for event_id, count in result.all()}

    async def create(self, attendee: EventAttendee) -> EventAttendee:
        self.session.add(attendee)
        await self.session.flush()
        await self.session.refresh(attendee)
        return attendee

    async def create_many(self, attendees: List[EventAttendee]) -> List[EventAttendee]:
        if not attendees:
            return []
        self.session.add_all(attendees)
        await self.session.flush()
        return attendees

    async def update(self, attendee: EventAttendee) -> EventAttendee:
        self.session.add(attendee)
        await self.session.flush()
        await self.session.refresh(attendee)
        return attendee

    async def delete(self, attendee: EventAttendee) -> None:
        await self.session.delete(attendee)
        await self.session.flush()

    async def delete_by_user_and_events(self, user_id: UUID, event_ids: List[UUID]) -> int:
        if not event_ids:
            return 0
        stmt = delete(EventAttendee).where(
            EventAttendee.user_id == user_id, EventAttendee.event_id.in_(event_ids)
        )
        result = await self.session.exec(stmt)
        return result.rowcount

    async def delete_by_event(self, event_id: UUID) -> int:
        stmt = delete(EventAttendee).where(EventAttendee.event_id == event_id)
        result = await self.session.exec(stmt)
        return result.rowcount
