"""
Get Event Use Case

Event detail with its chapter name and attendee list.
"""

from uuid import UUID

from chapterhub.app.authorization import can_manage_event_attendees
from chapterhub.app.errors import not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import PaymentStatus
from chapterhub.libs.result import Result, Return

from .dtos import EventAttendeeDetail, EventDetailResponse


class GetEventUseCase:
    """
    Business Rules:
    - Public events are visible to every authenticated actor
    - Private events are visible to those who may manage the event's
      attendees, to its attendees and to members of its chapter;
      anyone else gets NOT_FOUND
    - Attendees are listed PAID first, then by registration time
    - Attendee emails are shown only to actors who may manage attendees
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, event_id: UUID) -> Result[EventDetailResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(not_found("Event not found"))

            chapter = None
            if event.chapter_id is not None:
                chapter = await self.uow.chapters.get_by_id(event.chapter_id)

            attendees = await self.uow.event_attendees.list_by_event(event.id)
            can_manage = can_manage_event_attendees(actor, event, chapter)

            if not (event.is_public or can_manage):
                is_attendee = any(a.user_id == actor.user_id for a in attendees)
                is_member = chapter is not None and (
                    await self.uow.chapter_members.get_by_chapter_and_user(
                        chapter.id, actor.user_id
                    )
                    is not None
                )
                if not (is_attendee or is_member):
                    return Return.err(not_found("Event not found"))

            users = {
                u.id: u
                for u in await self.uow.users.get_by_ids([a.user_id for a in attendees])
            }
            ordered = sorted(attendees, key=lambda a: a.payment_status != PaymentStatus.PAID)

            details = []
            for attendee in ordered:
                user = users.get(attendee.user_id)
                details.append(
                    EventAttendeeDetail.from_entity(attendee).model_copy(
                        update={
                            "first_name": user.first_name if user else "",
                            "last_name": user.last_name if user else "",
                            "email": user.email if user and can_manage else None,
                        }
                    )
                )

            base = EventDetailResponse.from_entity(event, attendee_count=len(attendees))
            return Return.ok(
                base.model_copy(
                    update={
                        "chapter_name": chapter.name if chapter else None,
                        "attendees": details,
                    }
                )
            )
