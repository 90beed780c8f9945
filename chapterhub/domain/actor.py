"""
Actor and Target descriptors

Every authorization decision is a pure function of one Actor (who is acting)
and, where relevant, one Target (who or where is acted upon). Both are built
once at the boundary from a session or an entity.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .entities import Chapter, Role, User


@dataclass(frozen=True)
class Actor:
    """Authenticated caller; role is None when the session carried an unknown role"""

    user_id: UUID
    role: Optional[Role]
    state_id: Optional[UUID] = None
    city_id: Optional[UUID] = None

    @classmethod
    def from_claims(cls, claims: dict) -> "Actor":
        return cls(
            user_id=UUID(str(claims["user_id"])),
            role=Role.parse(claims.get("role")),
            state_id=_optional_uuid(claims.get("state_id")),
            city_id=_optional_uuid(claims.get("city_id")),
        )

    def to_claims(self) -> dict:
        return {
            "user_id": str(self.user_id),
            "role": self.role.value if self.role else None,
            "state_id": str(self.state_id) if self.state_id else None,
            "city_id": str(self.city_id) if self.city_id else None,
        }


@dataclass(frozen=True)
class Target:
    """What an action is aimed at: a user and/or a location"""

    state_id: Optional[UUID] = None
    city_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    role: Optional[Role] = None

    @classmethod
    def of_user(cls, user: User) -> "Target":
        return cls(
            state_id=user.state_id,
            city_id=user.city_id,
            user_id=user.id,
            role=user.role,
        )

    @classmethod
    def of_chapter(cls, chapter: Chapter) -> "Target":
        return cls(state_id=chapter.state_id, city_id=chapter.city_id)

    def at_chapter(self, chapter: Chapter) -> "Target":
        """Same user, evaluated at the chapter's location"""
        return Target(
            state_id=chapter.state_id,
            city_id=chapter.city_id,
            user_id=self.user_id,
            role=self.role,
        )


def _optional_uuid(value) -> Optional[UUID]:
    if value in (None, ""):
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None
