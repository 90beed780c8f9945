"""
Attendance synchronisation between chapter membership and upcoming events.

A member gets an INVITED/PENDING attendee row for every upcoming event of
the chapter they join and loses those rows for the chapter they leave. Rows
for past events are never touched.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from chapterhub.app.services.mail_dispatcher import MeetingDetails
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.base import utcnow
from chapterhub.domain.entities import AttendeeStatus, Event, EventAttendee, PaymentStatus


async def sync_upcoming_attendance(
    uow: UnitOfWork, chapter_id: UUID, user_id: UUID, now: Optional[datetime] = None
) -> List[Event]:
    """
    Create missing attendee rows for the chapter's upcoming events.

    Returns the events a row was created for; existing rows are left as is.
    """
    now = now or utcnow()
    events = await uow.events.list_upcoming_by_chapter(chapter_id, now)
    if not events:
        return []

    already = set(
        await uow.event_attendees.list_event_ids_by_user(user_id, [e.id for e in events])
    )
    new_events = [e for e in events if e.id not in already]
    if new_events:
        await uow.event_attendees.create_many(
            [
                EventAttendee(
                    event_id=event.id,
                    user_id=user_id,
                    status=AttendeeStatus.INVITED,
                    payment_status=PaymentStatus.PENDING,
                )
                for event in new_events
            ]
        )
    return new_events


async def drop_upcoming_attendance(
    uow: UnitOfWork, chapter_id: UUID, user_id: UUID, now: Optional[datetime] = None
) -> int:
    """Delete the user's attendee rows for the chapter's future-dated events"""
    now = now or utcnow()
    events = await uow.events.list_upcoming_by_chapter(chapter_id, now)
    if not events:
        return 0
    return await uow.event_attendees.delete_by_user_and_events(
        user_id, [e.id for e in events]
    )


def invites_for(email: str, events: List[Event], chapter_name: Optional[str] = None) -> list:
    """One (recipients, meeting) pair per newly attached event"""
    return [([email], MeetingDetails.from_event(e, chapter_name)) for e in events]
