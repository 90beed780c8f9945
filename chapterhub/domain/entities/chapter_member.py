"""
ChapterMember Entity

Links a User to a Chapter with a chapter-local role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import ChapterRole


class ChapterMember(SQLModel, table=True):
    """
    ChapterMember entity.

    Business Rules:
    - (chapter_id, user_id) must be unique
    - role is kept in step with User.role by lifecycle operations
    - At most one PRESIDENT row per chapter
    """

    __tablename__ = "chapter_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    chapter_id: UUID = Field(foreign_key="chapters.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: ChapterRole = Field(default=ChapterRole.MEMBER)

    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_chapter_member_chapter_user", "chapter_id", "user_id", unique=True),
        Index("idx_chapter_member_role", "chapter_id", "role"),
    )
