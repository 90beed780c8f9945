from uuid import UUID

from chapterhub.app.authorization import can_manage_event_attendees
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.libs.result import Result, Return

from .dtos import RemoveAttendeeResponse


class RemoveAttendeeUseCase:
    """
    Business Rules:
    - SUPER_ADMIN, the event creator, the chapter president or a director
      covering the chapter location may remove attendees
    - The attendee row must belong to the event
    - Audited as ATTENDEE_REMOVED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, event_id: UUID, attendee_id: UUID
    ) -> Result[RemoveAttendeeResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(not_found("Event not found"))

            chapter = None
            if event.chapter_id is not None:
                chapter = await self.uow.chapters.get_by_id(event.chapter_id)

            if not can_manage_event_attendees(actor, event, chapter):
                return Return.err(forbidden("You cannot manage attendees of this event"))

            attendee = await self.uow.event_attendees.get_by_id(attendee_id)
            if attendee is None or attendee.event_id != event.id:
                return Return.err(not_found("Attendee not found"))

            await self.uow.event_attendees.delete(attendee)

            await self.uow.audit_logs.record(
                AuditAction.ATTENDEE_REMOVED,
                actor.user_id,
                attendee.user_id,
                {"event_id": str(event.id)},
            )

            await self.uow.commit()

            return Return.ok(RemoveAttendeeResponse(status="removed", id=attendee_id))
