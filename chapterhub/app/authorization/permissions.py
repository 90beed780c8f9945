"""
Permission predicates.

Every function here is total over the role set: each known role has an
explicit branch and anything else (including an unknown role) is denied.
"""

from typing import Iterable, Optional

from chapterhub.app.errors import forbidden
from chapterhub.domain.actor import Actor, Target
from chapterhub.domain.entities import Chapter, ChapterRole, Event, Role
from chapterhub.domain.roles import CHAPTER_ADMIN_ROLES

from .scope import user_scope_filter

_SUPER_ADMIN_ASSIGNABLE = frozenset(
    {Role.STATE_DIRECTOR, Role.CITY_DIRECTOR, Role.PRESIDENT}
)
_PRESIDENT_ASSIGNABLE = frozenset({Role.VICE_PRESIDENT, Role.SECRETARY, Role.USER})


class Forbidden(Exception):
    def __init__(self, message: str = "Forbidden"):
        self.error = forbidden(message)
        super().__init__(message)


def _same(actor_value, target_value) -> bool:
    return actor_value is not None and actor_value == target_value


def _covers_location(actor: Actor, state_id, city_id) -> bool:
    """Broader-or-equal jurisdiction over a state/city location"""
    if actor.role == Role.SUPER_ADMIN:
        return True
    if actor.role == Role.STATE_DIRECTOR:
        return _same(actor.state_id, state_id)
    if actor.role == Role.CITY_DIRECTOR:
        return _same(actor.state_id, state_id) and _same(actor.city_id, city_id)
    return False


def require_role(actor: Actor, allowed_roles: Iterable[Role]) -> None:
    if actor.role is None or actor.role not in set(allowed_roles):
        raise Forbidden("Your role does not allow this action")


def can_view_user(actor: Actor, target: Target) -> bool:
    scope = user_scope_filter(actor)
    if scope.match_nothing:
        return False
    fields = {"id": target.user_id, "state_id": target.state_id, "city_id": target.city_id}
    return all(fields[field] == value for field, value in scope.conditions)


def can_assign_role(actor: Actor, target_role: Role, target: Target) -> bool:
    if target.user_id is not None and target.user_id == actor.user_id:
        return False

    if actor.role == Role.SUPER_ADMIN:
        return target_role in _SUPER_ADMIN_ASSIGNABLE
    if actor.role == Role.STATE_DIRECTOR:
        return target_role == Role.CITY_DIRECTOR and _same(actor.state_id, target.state_id)
    if actor.role == Role.CITY_DIRECTOR:
        return target_role == Role.PRESIDENT and _same(actor.city_id, target.city_id)
    if actor.role == Role.PRESIDENT:
        return (
            target_role in _PRESIDENT_ASSIGNABLE
            and _same(actor.state_id, target.state_id)
            and _same(actor.city_id, target.city_id)
        )
    return False


def can_assign_president(actor: Actor, chapter_location: Target) -> bool:
    return _covers_location(actor, chapter_location.state_id, chapter_location.city_id)


def can_create_chapter(actor: Actor, state_id, city_id) -> bool:
    return _covers_location(actor, state_id, city_id)


def can_delete_chapter(actor: Actor, chapter: Chapter) -> bool:
    return _covers_location(actor, chapter.state_id, chapter.city_id)


def can_verify_users(actor: Actor) -> bool:
    return actor.role in (Role.SUPER_ADMIN, Role.STATE_DIRECTOR)


def is_chapter_president(actor: Actor, chapter: Chapter) -> bool:
    return actor.role == Role.PRESIDENT and _same(actor.user_id, chapter.president_id)


def can_manage_chapter_members(actor: Actor, chapter: Chapter) -> bool:
    return _covers_location(actor, chapter.state_id, chapter.city_id) or is_chapter_president(
        actor, chapter
    )


def can_review_join_requests(actor: Actor, chapter: Chapter) -> bool:
    return is_chapter_president(actor, chapter)


def can_schedule_meeting(
    actor: Actor, chapter: Chapter, actor_chapter_role: Optional[ChapterRole]
) -> bool:
    """Directors by jurisdiction; otherwise the actor's role in *this* chapter decides"""
    if _covers_location(actor, chapter.state_id, chapter.city_id):
        return True
    return actor.role is not None and actor_chapter_role in CHAPTER_ADMIN_ROLES


def can_manage_event_attendees(
    actor: Actor, event: Event, chapter: Optional[Chapter]
) -> bool:
    if actor.role is None:
        return False
    if actor.role == Role.SUPER_ADMIN or _same(actor.user_id, event.creator_id):
        return True
    if chapter is None:
        return False
    return can_manage_chapter_members(actor, chapter)
