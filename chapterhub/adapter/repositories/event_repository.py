from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.event_repository import IEventRepository
from chapterhub.domain.entities import Event, EventType


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, event: Event) -> Event:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def list_upcoming_by_chapter(self, chapter_id: UUID, now: datetime) -> List[Event]:
        stmt = (
            select(Event)
            .where(Event.chapter_id == chapter_id, Event.date >= now)
            .order_by(Event.date.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_chapter(
        self, chapter_id: UUID, event_type: Optional[EventType] = None
    ) -> List[Event]:
        stmt = select(Event).where(Event.chapter_id == chapter_id)
        if event_type is not None:
            stmt = stmt.where(Event.type == event_type)
        result = await self.session.exec(stmt.order_by(Event.date.desc()))
        return list(result.all())

    async def detach_chapter(self, chapter_id: UUID) -> int:
        stmt = update(Event).where(Event.chapter_id == chapter_id).values(chapter_id=None)
        result = await self.session.exec(stmt)
        return result.rowcount

    async def delete(self, event: Event) -> None:
        await self.session.delete(event)
        await self.session.flush()
