"""
Chapterhub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AttendeeStatus,
    AuditAction,
    ChapterRole,
    ChapterStatus,
    EventType,
    JoinRequestAction,
    JoinRequestStatus,
    PaymentStatus,
    Role,
)

# Export all entities
from .location import City, State
from .user import User
from .chapter import Chapter
from .chapter_member import ChapterMember
from .join_request import JoinRequest
from .event import Event, EventAttendee
from .audit_log import AuditLog

__all__ = [
    # Enums
    "AttendeeStatus",
    "AuditAction",
    "ChapterRole",
    "ChapterStatus",
    "EventType",
    "JoinRequestAction",
    "JoinRequestStatus",
    "PaymentStatus",
    "Role",
    # Entities
    "State",
    "City",
    "User",
    "Chapter",
    "ChapterMember",
    "JoinRequest",
    "Event",
    "EventAttendee",
    "AuditLog",
]
