from datetime import timedelta
from uuid import uuid4

import pytest

from chapterhub.app.use_cases.users import (
    ActivateUserUseCase,
    DeactivateUserUseCase,
    SearchAddableUsersUseCase,
    ToggleVerificationUseCase,
)
from chapterhub.domain.actor import Actor
from chapterhub.domain.base import utcnow
from chapterhub.domain.entities import AuditAction, Chapter, ChapterMember, Event, Role, User

STATE, CITY = uuid4(), uuid4()


@pytest.fixture
def state_director():
    return Actor(user_id=uuid4(), role=Role.STATE_DIRECTOR, state_id=STATE)


@pytest.mark.asyncio
async def test_deactivate_removes_memberships_and_keeps_role(mock_uow, state_director):
    """Deactivation drops every membership and presidency but leaves the global role"""
    # Arrange
    chapter = Chapter(id=uuid4(), name="Downtown", state_id=STATE, city_id=CITY)
    user = User(
        id=uuid4(),
        email="pres@example.com",
        role=Role.PRESIDENT,
        state_id=STATE,
        city_id=CITY,
        chapter_id=chapter.id,
    )
    chapter.president_id = user.id
    mock_uow.users.get_by_id.return_value = user
    mock_uow.chapter_members.list_by_user.return_value = [
        ChapterMember(id=uuid4(), chapter_id=chapter.id, user_id=user.id)
    ]
    mock_uow.chapter_members.delete_by_user.return_value = 1
    mock_uow.chapters.list_by_president.return_value = [chapter]
    upcoming = Event(id=uuid4(), title="Monthly", date=utcnow() + timedelta(days=2))
    mock_uow.events.list_upcoming_by_chapter.return_value = [upcoming]

    # Act
    result = await DeactivateUserUseCase(mock_uow).execute(state_director, user.id)

    # Assert
    assert result.is_ok()
    assert result.value.memberships_removed == 1
    assert user.is_active is False
    assert user.role == Role.PRESIDENT
    assert user.chapter_id is None
    assert chapter.president_id is None
    mock_uow.event_attendees.delete_by_user_and_events.assert_called_once_with(
        user.id, [upcoming.id]
    )
    assert mock_uow.audit_logs.record.call_args[0][0] == AuditAction.USER_DEACTIVATED
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_deactivate_self_is_forbidden(mock_uow, state_director):
    result = await DeactivateUserUseCase(mock_uow).execute(state_director, state_director.user_id)

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_deactivate_requires_director(mock_uow):
    actor = Actor(user_id=uuid4(), role=Role.PRESIDENT, state_id=STATE, city_id=CITY)

    result = await DeactivateUserUseCase(mock_uow).execute(actor, uuid4())

    assert result.error.code == "FORBIDDEN"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_deactivate_outside_scope_is_not_found(mock_uow, state_director):
    mock_uow.users.get_by_id.return_value = User(id=uuid4(), email="x@example.com", state_id=uuid4())

    result = await DeactivateUserUseCase(mock_uow).execute(state_director, uuid4())

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_activate_does_not_restore_memberships(mock_uow, state_director):
    user = User(id=uuid4(), email="x@example.com", state_id=STATE, is_active=False)
    mock_uow.users.get_by_id.return_value = user

    result = await ActivateUserUseCase(mock_uow).execute(state_director, user.id)

    assert result.is_ok()
    assert user.is_active is True
    mock_uow.chapter_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_toggle_verification_flips_flag(mock_uow, state_director):
    user = User(id=uuid4(), email="x@example.com", state_id=STATE)
    mock_uow.users.get_by_id.return_value = user

    first = await ToggleVerificationUseCase(mock_uow).execute(state_director, user.id)
    second = await ToggleVerificationUseCase(mock_uow).execute(state_director, user.id)

    assert first.value.user.is_verified is True
    assert second.value.user.is_verified is False
    actions = [c[0][0] for c in mock_uow.audit_logs.record.call_args_list]
    assert actions == [AuditAction.USER_VERIFIED, AuditAction.USER_UNVERIFIED]


@pytest.mark.asyncio
async def test_city_director_cannot_verify(mock_uow):
    actor = Actor(user_id=uuid4(), role=Role.CITY_DIRECTOR, state_id=STATE, city_id=CITY)

    result = await ToggleVerificationUseCase(mock_uow).execute(actor, uuid4())

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_search_short_query_returns_nothing(mock_uow, state_director):
    result = await SearchAddableUsersUseCase(mock_uow).execute(state_director, "a")

    assert result.value == []
    mock_uow.users.search_without_membership.assert_not_called()


@pytest.mark.asyncio
async def test_search_limits_to_unaffiliated_users(mock_uow, state_director):
    mock_uow.users.search_without_membership.return_value = [
        User(id=uuid4(), email="ann@example.com", first_name="Ann")
    ]

    result = await SearchAddableUsersUseCase(mock_uow).execute(state_director, "ann")

    assert [u.email for u in result.value] == ["ann@example.com"]
    mock_uow.users.search_without_membership.assert_called_once_with("ann", Role.USER, 10)


@pytest.mark.asyncio
async def test_search_denied_for_secretary(mock_uow):
    actor = Actor(user_id=uuid4(), role=Role.SECRETARY, state_id=STATE, city_id=CITY)

    result = await SearchAddableUsersUseCase(mock_uow).execute(actor, "ann")

    assert result.error.code == "FORBIDDEN"
