from typing import List
from uuid import UUID

from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import EventType
from chapterhub.libs.result import Result, Return

from .dtos import MeetingResponse
from .visibility import find_visible_chapter


class ListMeetingsUseCase:
    """Meetings of a visible chapter, latest date first, with attendee counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, chapter_id: UUID) -> Result[List[MeetingResponse]]:
        async with self.uow:
            chapter = await find_visible_chapter(self.uow, actor, chapter_id, include_members=True)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            events = await self.uow.events.list_by_chapter(chapter.id, EventType.MEETING)
            counts = await self.uow.event_attendees.count_by_events([e.id for e in events])

            return Return.ok(
                [MeetingResponse.from_entity(e, counts.get(e.id, 0)) for e in events]
            )
