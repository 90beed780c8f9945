"""
Role & Scope Model

Static description of the role hierarchy: how broad each role's scope is
and which location anchor it requires.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from .entities.enums import ChapterRole, Role


class LocationAnchor(str, Enum):
    """Location fields a role must be pinned to"""

    NONE = "none"
    STATE = "state"
    STATE_CITY = "state+city"


# Lower rank = broader scope
ROLE_RANK = {
    Role.SUPER_ADMIN: 0,
    Role.STATE_DIRECTOR: 1,
    Role.CITY_DIRECTOR: 2,
    Role.PRESIDENT: 3,
    Role.VICE_PRESIDENT: 4,
    Role.SECRETARY: 5,
    Role.USER: 6,
}

_ANCHORS = {
    Role.SUPER_ADMIN: LocationAnchor.NONE,
    Role.STATE_DIRECTOR: LocationAnchor.STATE,
    Role.CITY_DIRECTOR: LocationAnchor.STATE_CITY,
    Role.PRESIDENT: LocationAnchor.STATE_CITY,
    Role.VICE_PRESIDENT: LocationAnchor.STATE_CITY,
    Role.SECRETARY: LocationAnchor.STATE_CITY,
    Role.USER: LocationAnchor.NONE,
}

DIRECTOR_ROLES = frozenset({Role.SUPER_ADMIN, Role.STATE_DIRECTOR, Role.CITY_DIRECTOR})
CHAPTER_OFFICER_ROLES = frozenset({Role.PRESIDENT, Role.VICE_PRESIDENT, Role.SECRETARY})
CHAPTER_ADMIN_ROLES = frozenset(
    {ChapterRole.PRESIDENT, ChapterRole.VICE_PRESIDENT, ChapterRole.SECRETARY}
)

# Global role names accepted by "assign chapter role"; USER is the public
# name of the internal MEMBER chapter role.
_CHAPTER_ROLE_FOR = {
    Role.PRESIDENT: ChapterRole.PRESIDENT,
    Role.VICE_PRESIDENT: ChapterRole.VICE_PRESIDENT,
    Role.SECRETARY: ChapterRole.SECRETARY,
    Role.USER: ChapterRole.MEMBER,
}


def anchor_for(role: Role) -> LocationAnchor:
    return _ANCHORS[role]


def is_broader(role_a: Role, role_b: Role) -> bool:
    """True when role_a's scope is strictly wider than role_b's"""
    return ROLE_RANK[role_a] < ROLE_RANK[role_b]


def satisfies_anchor(
    role: Role, state_id: Optional[UUID], city_id: Optional[UUID]
) -> bool:
    anchor = anchor_for(role)
    if anchor == LocationAnchor.STATE:
        return state_id is not None
    if anchor == LocationAnchor.STATE_CITY:
        return state_id is not None and city_id is not None
    return True


def chapter_role_for(role: Role) -> ChapterRole:
    """Map a global role name onto the chapter-local role it implies"""
    return _CHAPTER_ROLE_FOR[role]
