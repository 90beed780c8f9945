"""
Chapter Entity

A local unit of the organization anchored to one state and one city.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import ChapterStatus


class Chapter(SQLModel, table=True):
    """
    Chapter entity.

    Business Rules:
    - (name, city_id) must be unique
    - president_id is null or references the user whose ChapterMember.role
      is PRESIDENT in this chapter
    - Owns its ChapterMember and JoinRequest rows; deleting the chapter
      removes them and nulls user/event references
    """

    __tablename__ = "chapters"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)

    state_id: UUID = Field(foreign_key="states.id", nullable=False)
    city_id: UUID = Field(foreign_key="cities.id", nullable=False)
    president_id: Optional[UUID] = Field(default=None, index=True)

    status: ChapterStatus = Field(default=ChapterStatus.ACTIVE)
    created_by: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_chapter_name_city", "name", "city_id", unique=True),
        Index("idx_chapter_state_city", "state_id", "city_id"),
        Index("idx_chapter_status", "status"),
    )
