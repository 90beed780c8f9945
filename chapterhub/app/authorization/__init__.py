"""
Authorization Engine

Pure decision functions over (actor, target). No I/O, no hidden state.
"""

from .permissions import (
    Forbidden,
    can_assign_president,
    can_assign_role,
    can_create_chapter,
    can_delete_chapter,
    can_manage_chapter_members,
    can_manage_event_attendees,
    can_review_join_requests,
    can_schedule_meeting,
    can_verify_users,
    can_view_user,
    is_chapter_president,
    require_role,
)
from .scope import ScopeFilter, chapter_scope_filter, user_scope_filter

__all__ = [
    "Forbidden",
    "ScopeFilter",
    "can_assign_president",
    "can_assign_role",
    "can_create_chapter",
    "can_delete_chapter",
    "can_manage_chapter_members",
    "can_manage_event_attendees",
    "can_review_join_requests",
    "can_schedule_meeting",
    "can_verify_users",
    "can_view_user",
    "chapter_scope_filter",
    "is_chapter_president",
    "require_role",
    "user_scope_filter",
]
