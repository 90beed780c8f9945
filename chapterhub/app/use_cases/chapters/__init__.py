"""
Chapter Use Cases

Chapter lifecycle, membership, join requests and meetings.
"""

from .add_member_use_case import AddMemberUseCase
from .assign_chapter_role_use_case import AssignChapterRoleUseCase
from .assign_president_use_case import AssignPresidentUseCase
from .create_chapter_use_case import CreateChapterUseCase
from .create_meeting_use_case import CreateMeetingCommand, CreateMeetingUseCase
from .delete_chapter_use_case import DeleteChapterUseCase
from .dtos import (
    AddMemberResponse,
    AssignChapterRoleResponse,
    AssignPresidentResponse,
    ChapterListResponse,
    ChapterResponse,
    DeleteChapterResponse,
    JoinRequestResponse,
    MeetingResponse,
    MemberListResponse,
    MemberResponse,
    ProcessJoinRequestResponse,
    RemoveMemberResponse,
)
from .get_chapter_use_case import GetChapterUseCase
from .list_chapters_use_case import ListChaptersUseCase
from .list_join_requests_use_case import ListJoinRequestsUseCase
from .list_meetings_use_case import ListMeetingsUseCase
from .list_members_use_case import ListMembersUseCase
from .process_join_request_use_case import ProcessJoinRequestUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .submit_join_request_use_case import SubmitJoinRequestUseCase

__all__ = [
    "AddMemberUseCase",
    "AssignChapterRoleUseCase",
    "AssignPresidentUseCase",
    "CreateChapterUseCase",
    "CreateMeetingCommand",
    "CreateMeetingUseCase",
    "DeleteChapterUseCase",
    "GetChapterUseCase",
    "ListChaptersUseCase",
    "ListJoinRequestsUseCase",
    "ListMeetingsUseCase",
    "ListMembersUseCase",
    "ProcessJoinRequestUseCase",
    "RemoveMemberUseCase",
    "SubmitJoinRequestUseCase",
    "AddMemberResponse",
    "AssignChapterRoleResponse",
    "AssignPresidentResponse",
    "ChapterListResponse",
    "ChapterResponse",
    "DeleteChapterResponse",
    "JoinRequestResponse",
    "MeetingResponse",
    "MemberListResponse",
    "MemberResponse",
    "ProcessJoinRequestResponse",
    "RemoveMemberResponse",
]
