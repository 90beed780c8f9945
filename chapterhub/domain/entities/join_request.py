"""
JoinRequest Entity

A user's request to join a chapter, reviewed by the chapter president.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import JoinRequestStatus


class JoinRequest(SQLModel, table=True):
    """
    JoinRequest entity.

    Business Rules:
    - Terminal once APPROVED or REJECTED
    - Reviewer and review time recorded on every transition
    """

    __tablename__ = "join_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    chapter_id: UUID = Field(foreign_key="chapters.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    status: JoinRequestStatus = Field(default=JoinRequestStatus.PENDING)
    reviewed_by_id: Optional[UUID] = Field(default=None)
    reviewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_join_request_chapter_status", "chapter_id", "status"),)
