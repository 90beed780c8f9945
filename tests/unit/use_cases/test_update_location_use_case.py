from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from chapterhub.app.use_cases.users import UpdateLocationUseCase
from chapterhub.domain.actor import Actor
from chapterhub.domain.base import utcnow
from chapterhub.domain.entities import (
    AuditAction,
    Chapter,
    ChapterMember,
    ChapterRole,
    City,
    Event,
    Role,
    State,
    User,
)

OLD_STATE, OLD_CITY = uuid4(), uuid4()
NEW_STATE, NEW_CITY = uuid4(), uuid4()


@pytest.fixture
def locations(mock_uow):
    states = {s: State(id=s, name=f"S{i}", code=f"S{i}") for i, s in enumerate([OLD_STATE, NEW_STATE])}
    cities = {
        OLD_CITY: City(id=OLD_CITY, name="Old", state_id=OLD_STATE),
        NEW_CITY: City(id=NEW_CITY, name="New", state_id=NEW_STATE),
    }
    mock_uow.locations.get_state.side_effect = lambda state_id: states.get(state_id)
    mock_uow.locations.get_city.side_effect = lambda city_id: cities.get(city_id)


@pytest.mark.asyncio
async def test_relocation_moves_user_to_oldest_chapter(mock_uow, locations):
    """Old membership goes, the oldest active chapter at the new location is joined"""
    # Arrange
    old_chapter_id = uuid4()
    user = User(
        id=uuid4(),
        email="mover@example.com",
        role=Role.SECRETARY,
        state_id=OLD_STATE,
        city_id=OLD_CITY,
        chapter_id=old_chapter_id,
    )
    new_chapter = Chapter(id=uuid4(), name="New Central", state_id=NEW_STATE, city_id=NEW_CITY)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.chapter_members.list_by_user.side_effect = [
        [ChapterMember(chapter_id=old_chapter_id, user_id=user.id, role=ChapterRole.SECRETARY)],
        [],
    ]
    mock_uow.chapter_members.delete_by_user.return_value = 1
    mock_uow.chapters.find_oldest_active.return_value = new_chapter
    meeting = Event(id=uuid4(), title="Kickoff", date=utcnow() + timedelta(days=5))
    mock_uow.events.list_upcoming_by_chapter.side_effect = [[], [meeting]]
    mail = AsyncMock()
    actor = Actor(user_id=user.id, role=Role.SECRETARY, state_id=OLD_STATE, city_id=OLD_CITY)

    # Act
    result = await UpdateLocationUseCase(mock_uow, mail).execute(
        actor, user.id, NEW_STATE, NEW_CITY
    )

    # Assert
    assert result.is_ok()
    assert result.value.memberships_removed == 1
    assert result.value.joined_chapter_id == new_chapter.id
    assert user.chapter_id == new_chapter.id
    assert user.role == Role.USER
    assert (user.state_id, user.city_id) == (NEW_STATE, NEW_CITY)
    mock_uow.chapters.find_oldest_active.assert_called_once_with(NEW_STATE, NEW_CITY)
    assert mock_uow.audit_logs.record.call_args[0][0] == AuditAction.USER_RELOCATED
    mock_uow.commit.assert_called_once()
    mail.send_invites.assert_called_once()


@pytest.mark.asyncio
async def test_clearing_location_leaves_user_unaffiliated(mock_uow, locations):
    user = User(id=uuid4(), email="x@example.com", state_id=OLD_STATE, city_id=OLD_CITY)
    mock_uow.users.get_by_id.return_value = user
    actor = Actor(user_id=user.id, role=Role.USER)

    result = await UpdateLocationUseCase(mock_uow).execute(actor, user.id, None, None)

    assert result.is_ok()
    assert result.value.joined_chapter_id is None
    assert (user.state_id, user.city_id) == (None, None)
    mock_uow.chapters.find_oldest_active.assert_not_called()


@pytest.mark.asyncio
async def test_sitting_president_cannot_relocate(mock_uow, locations):
    user = User(id=uuid4(), email="p@example.com", role=Role.PRESIDENT, state_id=OLD_STATE, city_id=OLD_CITY)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.chapters.list_by_president.return_value = [
        Chapter(id=uuid4(), name="Old", state_id=OLD_STATE, city_id=OLD_CITY, president_id=user.id)
    ]
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await UpdateLocationUseCase(mock_uow).execute(actor, user.id, NEW_STATE, NEW_CITY)

    assert result.error.code == "CONFLICT"
    mock_uow.chapter_members.delete_by_user.assert_not_called()


@pytest.mark.asyncio
async def test_director_cannot_drop_required_anchor(mock_uow, locations):
    user = User(id=uuid4(), email="d@example.com", role=Role.CITY_DIRECTOR, state_id=OLD_STATE, city_id=OLD_CITY)
    mock_uow.users.get_by_id.return_value = user
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await UpdateLocationUseCase(mock_uow).execute(actor, user.id, NEW_STATE, None)

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_mismatched_city_is_invalid(mock_uow, locations):
    user = User(id=uuid4(), email="x@example.com")
    mock_uow.users.get_by_id.return_value = user
    actor = Actor(user_id=user.id, role=Role.USER)

    result = await UpdateLocationUseCase(mock_uow).execute(actor, user.id, NEW_STATE, OLD_CITY)

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_other_user_outside_scope_is_not_found(mock_uow, locations):
    mock_uow.users.get_by_id.return_value = User(id=uuid4(), email="x@example.com")
    actor = Actor(user_id=uuid4(), role=Role.USER)

    result = await UpdateLocationUseCase(mock_uow).execute(actor, uuid4(), NEW_STATE, NEW_CITY)

    assert result.error.code == "NOT_FOUND"
