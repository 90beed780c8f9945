"""
Event and EventAttendee Entities

Chapter meetings/events and the per-user attendance rows they own.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import AttendeeStatus, EventType, PaymentStatus


class Event(SQLModel, table=True):
    """
    Event entity.

    Business Rules:
    - chapter_id is nulled when the chapter is deleted
    - entry_fee of 0 means a free event
    - "Upcoming" means date >= now
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(default="")
    type: EventType = Field(default=EventType.MEETING)
    location: Optional[str] = Field(default=None, max_length=255)

    date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    entry_fee: int = Field(default=0)
    is_public: bool = Field(default=True)
    is_recurring: bool = Field(default=False)
    recurrence_pattern: Optional[str] = Field(default=None, max_length=100)

    chapter_id: Optional[UUID] = Field(default=None, foreign_key="chapters.id")
    creator_id: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_event_chapter_date", "chapter_id", "date"),)


class EventAttendee(SQLModel, table=True):
    """
    EventAttendee entity.

    Business Rules:
    - (event_id, user_id) must be unique
    - Rows for past events are historical and never removed by membership changes
    """

    __tablename__ = "event_attendees"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    status: AttendeeStatus = Field(default=AttendeeStatus.INVITED)
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    payment_id: Optional[str] = Field(default=None, max_length=100)
    amount_paid: int = Field(default=0)
    role: str = Field(default="ATTENDEE", max_length=20)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_event_attendee_event_user", "event_id", "user_id", unique=True),
    )
