"""
Chapter Use Case DTOs (Data Transfer Objects)

Response classes for the chapter domain: chapters, memberships, join
requests and meetings.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from chapterhub.domain.entities import (
    Chapter,
    ChapterMember,
    ChapterRole,
    ChapterStatus,
    Event,
    EventType,
    JoinRequest,
    JoinRequestStatus,
    Role,
    User,
)


# ============================================================================
# Chapters
# ============================================================================


class ChapterResponse(BaseModel):
    """Chapter with its member and pending-request counts"""

    id: UUID
    name: str
    state_id: UUID
    city_id: UUID
    president_id: Optional[UUID] = None
    status: ChapterStatus
    created_by: Optional[UUID] = None
    created_at: datetime
    member_count: int = 0
    pending_request_count: int = 0

    @classmethod
    def from_entity(
        cls, chapter: Chapter, member_count: int = 0, pending_request_count: int = 0
    ) -> "ChapterResponse":
        return cls(
            id=chapter.id,
            name=chapter.name,
            state_id=chapter.state_id,
            city_id=chapter.city_id,
            president_id=chapter.president_id,
            status=chapter.status,
            created_by=chapter.created_by,
            created_at=chapter.created_at,
            member_count=member_count,
            pending_request_count=pending_request_count,
        )


class ChapterListResponse(BaseModel):
    items: List[ChapterResponse]
    total: int
    skip: int
    take: int


class DeleteChapterResponse(BaseModel):
    status: str
    id: UUID


# ============================================================================
# Memberships
# ============================================================================


class MemberResponse(BaseModel):
    """A ChapterMember row joined with the member's user fields"""

    id: UUID
    chapter_id: UUID
    user_id: UUID
    role: ChapterRole
    joined_at: datetime
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    global_role: Optional[Role] = None

    @classmethod
    def from_entity(cls, membership: ChapterMember, user: Optional[User] = None) -> "MemberResponse":
        return cls(
            id=membership.id,
            chapter_id=membership.chapter_id,
            user_id=membership.user_id,
            role=membership.role,
            joined_at=membership.joined_at,
            email=user.email if user else None,
            first_name=user.first_name if user else None,
            last_name=user.last_name if user else None,
            global_role=user.role if user else None,
        )


class MemberListResponse(BaseModel):
    items: List[MemberResponse]
    total: int
    skip: int
    take: int


class AssignPresidentResponse(BaseModel):
    chapter_id: UUID
    president_id: UUID
    previous_president_id: Optional[UUID] = None
    previous_president_demoted: bool = False


class AssignChapterRoleResponse(BaseModel):
    chapter_id: UUID
    user_id: UUID
    role: Role
    chapter_role: ChapterRole


class AddMemberResponse(BaseModel):
    membership: MemberResponse
    approved_request_count: int = 0
    invited_event_count: int = 0


class RemoveMemberResponse(BaseModel):
    status: str
    user_id: UUID
    role_reset: bool = False
    attendee_rows_removed: int = 0


# ============================================================================
# Join requests
# ============================================================================


class JoinRequestResponse(BaseModel):
    id: UUID
    chapter_id: UUID
    user_id: UUID
    status: JoinRequestStatus
    reviewed_by_id: Optional[UUID] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_entity(cls, request: JoinRequest, user: Optional[User] = None) -> "JoinRequestResponse":
        return cls(
            id=request.id,
            chapter_id=request.chapter_id,
            user_id=request.user_id,
            status=request.status,
            reviewed_by_id=request.reviewed_by_id,
            reviewed_at=request.reviewed_at,
            created_at=request.created_at,
            email=user.email if user else None,
            first_name=user.first_name if user else None,
            last_name=user.last_name if user else None,
        )


class ProcessJoinRequestResponse(BaseModel):
    join_request: JoinRequestResponse
    membership_created: bool = False
    invited_event_count: int = 0


# ============================================================================
# Meetings
# ============================================================================


class MeetingResponse(BaseModel):
    id: UUID
    title: str
    description: str
    type: EventType
    location: Optional[str] = None
    date: datetime
    entry_fee: int
    is_public: bool
    is_recurring: bool
    recurrence_pattern: Optional[str] = None
    chapter_id: Optional[UUID] = None
    creator_id: Optional[UUID] = None
    attendee_count: int = 0

    @classmethod
    def from_entity(cls, event: Event, attendee_count: int = 0) -> "MeetingResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            type=event.type,
            location=event.location,
            date=event.date,
            entry_fee=event.entry_fee,
            is_public=event.is_public,
            is_recurring=event.is_recurring,
            recurrence_pattern=event.recurrence_pattern,
            chapter_id=event.chapter_id,
            creator_id=event.creator_id,
            attendee_count=attendee_count,
        )
