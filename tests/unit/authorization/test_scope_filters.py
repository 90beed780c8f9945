from types import SimpleNamespace
from uuid import uuid4

import pytest

from chapterhub.app.authorization import ScopeFilter, chapter_scope_filter, user_scope_filter
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role

STATE_A, STATE_B = uuid4(), uuid4()
CITY_A1, CITY_A2, CITY_B1 = uuid4(), uuid4(), uuid4()
LOCATIONS = [(STATE_A, CITY_A1), (STATE_A, CITY_A2), (STATE_B, CITY_B1), (None, None)]


def _users():
    return [
        SimpleNamespace(id=uuid4(), state_id=state, city_id=city)
        for state, city in LOCATIONS
        for _ in range(3)
    ]


def _chapters(president_ids):
    rows = []
    for president_id in president_ids:
        for state, city in LOCATIONS[:3]:
            rows.append(
                SimpleNamespace(
                    id=uuid4(), state_id=state, city_id=city, president_id=president_id
                )
            )
    return rows


def test_super_admin_sees_every_user():
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)
    scope = user_scope_filter(actor)

    assert scope.is_unrestricted
    assert all(scope.matches(u) for u in _users())


def test_state_director_sees_only_own_state():
    actor = Actor(user_id=uuid4(), role=Role.STATE_DIRECTOR, state_id=STATE_A)
    scope = user_scope_filter(actor)

    for user in _users():
        assert scope.matches(user) == (user.state_id == STATE_A)


def test_city_director_sees_only_own_state_and_city():
    actor = Actor(user_id=uuid4(), role=Role.CITY_DIRECTOR, state_id=STATE_A, city_id=CITY_A2)
    scope = user_scope_filter(actor)

    for user in _users():
        assert scope.matches(user) == (user.state_id == STATE_A and user.city_id == CITY_A2)


@pytest.mark.parametrize("role", [Role.PRESIDENT, Role.USER])
def test_president_and_user_see_only_themselves(role):
    users = _users()
    me = users[4]
    actor = Actor(user_id=me.id, role=role, state_id=me.state_id, city_id=me.city_id)
    scope = user_scope_filter(actor)

    assert [u for u in users if scope.matches(u)] == [me]


@pytest.mark.parametrize("role", [Role.VICE_PRESIDENT, Role.SECRETARY, None])
def test_other_roles_see_no_users(role):
    actor = Actor(user_id=uuid4(), role=role, state_id=STATE_A, city_id=CITY_A1)
    scope = user_scope_filter(actor)

    assert scope.match_nothing
    assert not any(scope.matches(u) for u in _users())


@pytest.mark.parametrize(
    "role,state_id,city_id",
    [
        (Role.STATE_DIRECTOR, None, None),
        (Role.CITY_DIRECTOR, STATE_A, None),
        (Role.CITY_DIRECTOR, None, CITY_A1),
    ],
)
def test_missing_anchor_never_matches_null_columns(role, state_id, city_id):
    """A director without a location must not see rows whose location is NULL"""
    actor = Actor(user_id=uuid4(), role=role, state_id=state_id, city_id=city_id)

    assert user_scope_filter(actor).match_nothing
    assert chapter_scope_filter(actor).match_nothing
    assert not any(user_scope_filter(actor).matches(u) for u in _users())


def test_chapter_scope_for_directors():
    chapters = _chapters([None, uuid4()])
    state_director = Actor(user_id=uuid4(), role=Role.STATE_DIRECTOR, state_id=STATE_B)
    city_director = Actor(
        user_id=uuid4(), role=Role.CITY_DIRECTOR, state_id=STATE_A, city_id=CITY_A1
    )

    for chapter in chapters:
        assert chapter_scope_filter(state_director).matches(chapter) == (
            chapter.state_id == STATE_B
        )
        assert chapter_scope_filter(city_director).matches(chapter) == (
            chapter.state_id == STATE_A and chapter.city_id == CITY_A1
        )


def test_president_sees_only_chapters_they_preside():
    me = uuid4()
    chapters = _chapters([me, uuid4(), None])
    scope = chapter_scope_filter(Actor(user_id=me, role=Role.PRESIDENT))

    visible = [c for c in chapters if scope.matches(c)]
    assert len(visible) == 3
    assert all(c.president_id == me for c in visible)


@pytest.mark.parametrize("role", [Role.VICE_PRESIDENT, Role.SECRETARY, Role.USER, None])
def test_non_presidents_see_no_chapters_through_scope(role):
    scope = chapter_scope_filter(Actor(user_id=uuid4(), role=role))

    assert not any(scope.matches(c) for c in _chapters([None, uuid4()]))


def test_where_with_none_value_collapses_to_nothing():
    assert ScopeFilter.where(state_id=None).match_nothing
    assert ScopeFilter.where().match_nothing
    assert ScopeFilter.where(state_id=STATE_A).as_dict() == {"state_id": STATE_A}
