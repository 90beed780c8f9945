"""
Row-level scope filters.

A ScopeFilter is a conjunction of ``field == value`` conditions, or one of
the two extremes: unrestricted (see everything) and match-nothing. It can be
evaluated in memory with ``matches`` or turned into SQL by a repository.

Filters never contain a ``None`` value: when the actor's anchor needed to
build a condition is missing, the filter collapses to match-nothing rather
than matching rows whose column happens to be NULL.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role


@dataclass(frozen=True)
class ScopeFilter:
    conditions: Tuple[Tuple[str, Any], ...] = ()
    match_nothing: bool = False

    @classmethod
    def unrestricted(cls) -> "ScopeFilter":
        return cls()

    @classmethod
    def nothing(cls) -> "ScopeFilter":
        return cls(match_nothing=True)

    @classmethod
    def where(cls, **conditions: Optional[Any]) -> "ScopeFilter":
        if not conditions or any(value is None for value in conditions.values()):
            return cls.nothing()
        return cls(conditions=tuple(sorted(conditions.items())))

    @property
    def is_unrestricted(self) -> bool:
        return not self.match_nothing and not self.conditions

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.conditions)

    def matches(self, row: Any) -> bool:
        if self.match_nothing:
            return False
        return all(getattr(row, field) == value for field, value in self.conditions)


def user_scope_filter(actor: Actor) -> ScopeFilter:
    """Which User rows the actor may see"""
    if actor.role == Role.SUPER_ADMIN:
        return ScopeFilter.unrestricted()
    if actor.role == Role.STATE_DIRECTOR:
        return ScopeFilter.where(state_id=actor.state_id)
    if actor.role == Role.CITY_DIRECTOR:
        return ScopeFilter.where(state_id=actor.state_id, city_id=actor.city_id)
    if actor.role in (Role.PRESIDENT, Role.USER):
        return ScopeFilter.where(id=actor.user_id)
    return ScopeFilter.nothing()


def chapter_scope_filter(actor: Actor) -> ScopeFilter:
    """Which Chapter rows the actor may see"""
    if actor.role == Role.SUPER_ADMIN:
        return ScopeFilter.unrestricted()
    if actor.role == Role.STATE_DIRECTOR:
        return ScopeFilter.where(state_id=actor.state_id)
    if actor.role == Role.CITY_DIRECTOR:
        return ScopeFilter.where(state_id=actor.state_id, city_id=actor.city_id)
    if actor.role == Role.PRESIDENT:
        return ScopeFilter.where(president_id=actor.user_id)
    return ScopeFilter.nothing()
