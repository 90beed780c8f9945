"""
Chapterhub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Global user role, widest scope first"""

    SUPER_ADMIN = "SUPER_ADMIN"
    STATE_DIRECTOR = "STATE_DIRECTOR"
    CITY_DIRECTOR = "CITY_DIRECTOR"
    PRESIDENT = "PRESIDENT"
    VICE_PRESIDENT = "VICE_PRESIDENT"
    SECRETARY = "SECRETARY"
    USER = "USER"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Return the matching role, or None for unknown/malformed input"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ChapterRole(str, Enum):
    """Role inside a single chapter"""

    PRESIDENT = "PRESIDENT"
    VICE_PRESIDENT = "VICE_PRESIDENT"
    SECRETARY = "SECRETARY"
    MEMBER = "MEMBER"


class ChapterStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class JoinRequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class JoinRequestAction(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"


class EventType(str, Enum):
    MEETING = "MEETING"
    EVENT = "EVENT"


class AttendeeStatus(str, Enum):
    INVITED = "INVITED"
    GOING = "GOING"
    NOT_GOING = "NOT_GOING"
    ATTENDED = "ATTENDED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


class AuditAction(str, Enum):
    """Actions written to the audit log"""

    CHAPTER_CREATED = "CHAPTER_CREATED"
    CHAPTER_DELETED = "CHAPTER_DELETED"
    PRESIDENT_ASSIGNED = "PRESIDENT_ASSIGNED"
    CHAPTER_ROLE_ASSIGNED = "CHAPTER_ROLE_ASSIGNED"
    MEMBER_ADDED = "MEMBER_ADDED"
    MEMBER_REMOVED = "MEMBER_REMOVED"
    JOIN_REQUEST_SUBMITTED = "JOIN_REQUEST_SUBMITTED"
    JOIN_REQUEST_APPROVED = "JOIN_REQUEST_APPROVED"
    JOIN_REQUEST_REJECTED = "JOIN_REQUEST_REJECTED"
    MEETING_CREATED = "MEETING_CREATED"
    EVENT_DELETED = "EVENT_DELETED"
    ATTENDEE_REMOVED = "ATTENDEE_REMOVED"
    ROLE_ASSIGNED = "ROLE_ASSIGNED"
    USER_ACTIVATED = "USER_ACTIVATED"
    USER_DEACTIVATED = "USER_DEACTIVATED"
    USER_VERIFIED = "USER_VERIFIED"
    USER_UNVERIFIED = "USER_UNVERIFIED"
    USER_RELOCATED = "USER_RELOCATED"
    PAYMENT_VERIFIED = "PAYMENT_VERIFIED"
