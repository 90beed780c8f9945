"""
Create Meeting Use Case

Schedules an event for a chapter and invites every current member.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from chapterhub.app.authorization import can_schedule_meeting
from chapterhub.app.errors import forbidden, invalid, not_found
from chapterhub.app.services.mail_dispatcher import (
    IMailDispatcher,
    MeetingDetails,
    dispatch_invites,
)
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.base import to_naive_utc
from chapterhub.domain.entities import (
    AttendeeStatus,
    AuditAction,
    Event,
    EventAttendee,
    EventType,
    PaymentStatus,
)
from chapterhub.libs.result import Result, Return

from .dtos import MeetingResponse


class CreateMeetingCommand(BaseModel):
    title: str
    date: datetime
    description: str = ""
    location: Optional[str] = None
    type: EventType = EventType.MEETING
    entry_fee: int = 0
    is_public: bool = True
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = None
    send_invites: bool = True

    @field_validator("date")
    @classmethod
    def _store_as_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class CreateMeetingUseCase:
    """
    Use case for scheduling a chapter meeting.

    Business Rules:
    - Title is required (1 to 200 characters), entry fee is not negative
    - A date carrying a UTC offset is stored as naive UTC
    - SUPER_ADMIN and directors covering the location may schedule
    - Otherwise the actor's role in *this* chapter must be PRESIDENT,
      VICE_PRESIDENT or SECRETARY
    - An INVITED/PENDING attendee row is created per current member
    - Invitations are optional and mailed after commit
    - Audited as MEETING_CREATED
    """

    def __init__(self, uow: UnitOfWork, mail_dispatcher: Optional[IMailDispatcher] = None):
        self.uow = uow
        self.mail_dispatcher = mail_dispatcher

    async def execute(
        self, actor: Actor, chapter_id: UUID, command: CreateMeetingCommand
    ) -> Result[MeetingResponse]:
        title = command.title.strip()
        if not title or len(title) > 200:
            return Return.err(invalid("Title must be between 1 and 200 characters"))
        if command.entry_fee < 0:
            return Return.err(invalid("Entry fee cannot be negative"))

        async with self.uow:
            chapter = await self.uow.chapters.get_by_id(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            own_membership = await self.uow.chapter_members.get_by_chapter_and_user(
                chapter.id, actor.user_id
            )
            chapter_role = own_membership.role if own_membership else None
            if not can_schedule_meeting(actor, chapter, chapter_role):
                return Return.err(forbidden("You cannot schedule meetings for this chapter"))

            event = await self.uow.events.create(
                Event(
                    title=title,
                    description=command.description,
                    type=command.type,
                    location=command.location,
                    date=command.date,
                    entry_fee=command.entry_fee,
                    is_public=command.is_public,
                    is_recurring=command.is_recurring,
                    recurrence_pattern=command.recurrence_pattern,
                    chapter_id=chapter.id,
                    creator_id=actor.user_id,
                )
            )

            members = await self.uow.chapter_members.list_by_chapter(chapter.id)
            existing = set(await self.uow.event_attendees.list_user_ids_by_event(event.id))
            member_ids = []
            for member in members:
                if member.user_id not in existing and member.user_id not in member_ids:
                    member_ids.append(member.user_id)

            await self.uow.event_attendees.create_many(
                [
                    EventAttendee(
                        event_id=event.id,
                        user_id=user_id,
                        status=AttendeeStatus.INVITED,
                        payment_status=PaymentStatus.PENDING,
                    )
                    for user_id in member_ids
                ]
            )

            recipients = []
            if command.send_invites and member_ids:
                recipients = [
                    u.email for u in await self.uow.users.get_by_ids(member_ids) if u.is_active
                ]

            await self.uow.audit_logs.record(
                AuditAction.MEETING_CREATED,
                actor.user_id,
                event.id,
                {"chapter_id": str(chapter.id), "invited": len(member_ids)},
            )

            await self.uow.commit()

        if recipients:
            await dispatch_invites(
                self.mail_dispatcher,
                [(recipients, MeetingDetails.from_event(event, chapter.name))],
            )

        return Return.ok(MeetingResponse.from_entity(event, attendee_count=len(member_ids)))
