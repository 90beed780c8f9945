"""
User Entity

Long-lived identity holding a global role and an optional location anchor.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import Role


class User(SQLModel, table=True):
    """
    User entity - a person in the organization.

    Business Rules:
    - Email must be unique across all users
    - chapter_id is set iff a ChapterMember row exists for (chapter_id, id);
      lifecycle operations heal a dangling chapter_id instead of trusting it
    - Chapter officer roles always carry the chapter's state/city
    - Deactivation removes memberships but never alters role
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)

    role: Role = Field(default=Role.USER)
    state_id: Optional[UUID] = Field(default=None, foreign_key="states.id")
    city_id: Optional[UUID] = Field(default=None, foreign_key="cities.id")
    chapter_id: Optional[UUID] = Field(default=None, foreign_key="chapters.id")

    is_active: bool = Field(default=True)
    is_verified: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_role", "role"),
        Index("idx_user_state_city", "state_id", "city_id"),
        Index("idx_user_chapter_id", "chapter_id"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email
