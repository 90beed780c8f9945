"""
User Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from chapterhub.domain.entities import Role, User


class UserResponse(BaseModel):
    """User as returned by user management endpoints"""

    id: UUID
    email: str
    first_name: str
    last_name: str
    name: str
    role: Role
    state_id: Optional[UUID] = None
    city_id: Optional[UUID] = None
    chapter_id: Optional[UUID] = None
    is_active: bool
    is_verified: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            name=user.full_name,
            role=user.role,
            state_id=user.state_id,
            city_id=user.city_id,
            chapter_id=user.chapter_id,
            is_active=user.is_active,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )


class UserListResponse(BaseModel):
    items: List[UserResponse]
    total: int
    skip: int
    take: int


class RoleAssignedResponse(BaseModel):
    user: UserResponse
    old_role: Role


class UserStatusResponse(BaseModel):
    """Response for activate / deactivate / verify"""

    user: UserResponse
    memberships_removed: int = 0


class LocationUpdatedResponse(BaseModel):
    user: UserResponse
    memberships_removed: int = 0
    joined_chapter_id: Optional[UUID] = None
    already_member: bool = False
