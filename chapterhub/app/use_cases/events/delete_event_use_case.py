from uuid import UUID

from chapterhub.app.authorization import can_manage_event_attendees
from chapterhub.app.errors import forbidden, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction
from chapterhub.libs.result import Result, Return

from .dtos import DeleteEventResponse


class DeleteEventUseCase:
    """
    Business Rules:
    - SUPER_ADMIN, the event creator, the chapter president or a director
      covering the chapter location may delete an event
    - Attendee rows go with the event in the same unit of work
    - Audited as EVENT_DELETED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, event_id: UUID) -> Result[DeleteEventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(not_found("Event not found"))

            chapter = None
            if event.chapter_id is not None:
                chapter = await self.uow.chapters.get_by_id(event.chapter_id)

            if not can_manage_event_attendees(actor, event, chapter):
                return Return.err(forbidden("You cannot delete this event"))

            removed = await self.uow.event_attendees.delete_by_event(event.id)
            await self.uow.events.delete(event)

            await self.uow.audit_logs.record(
                AuditAction.EVENT_DELETED,
                actor.user_id,
                event_id,
                {"title": event.title, "attendees_removed": removed},
            )

            await self.uow.commit()

            return Return.ok(
                DeleteEventResponse(status="deleted", id=event_id, attendee_rows_removed=removed)
            )
