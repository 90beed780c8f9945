from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from chapterhub.app.use_cases.chapters.dtos import MeetingResponse
from chapterhub.domain.entities import AttendeeStatus, EventAttendee, PaymentStatus


class AttendeeResponse(BaseModel):
    id: UUID
    event_id: UUID
    user_id: UUID
    status: AttendeeStatus
    payment_status: PaymentStatus
    payment_id: Optional[str] = None
    amount_paid: int = 0
    created_at: datetime

    @classmethod
    def from_entity(cls, attendee: EventAttendee) -> "AttendeeResponse":
        return cls(
            id=attendee.id,
            event_id=attendee.event_id,
            user_id=attendee.user_id,
            status=attendee.status,
            payment_status=attendee.payment_status,
            payment_id=attendee.payment_id,
            amount_paid=attendee.amount_paid,
            created_at=attendee.created_at,
        )


class RemoveAttendeeResponse(BaseModel):
    status: str
    id: UUID


class EventAttendeeDetail(AttendeeResponse):
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None


class EventDetailResponse(MeetingResponse):
    chapter_name: Optional[str] = None
    attendees: List[EventAttendeeDetail] = []


class DeleteEventResponse(BaseModel):
    status: str
    id: UUID
    attendee_rows_removed: int = 0
