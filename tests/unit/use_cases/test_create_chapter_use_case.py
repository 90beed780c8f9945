from uuid import uuid4

import pytest

from chapterhub.app.use_cases.chapters import CreateChapterUseCase
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, Chapter, ChapterStatus, City, Role, State


@pytest.fixture
def location(mock_uow):
    state = State(id=uuid4(), name="Texas", code="TX")
    city = City(id=uuid4(), name="Austin", state_id=state.id)
    mock_uow.locations.get_state.return_value = state
    mock_uow.locations.get_city.return_value = city
    mock_uow.chapters.get_by_name_and_city.return_value = None
    return state, city


@pytest.mark.asyncio
async def test_city_director_creates_chapter_in_own_city(mock_uow, location):
    """A city director creates an ACTIVE chapter in their city"""
    # Arrange
    state, city = location
    actor = Actor(user_id=uuid4(), role=Role.CITY_DIRECTOR, state_id=state.id, city_id=city.id)

    # Act
    result = await CreateChapterUseCase(mock_uow).execute(actor, "  Austin North ", state.id, city.id)

    # Assert
    assert result.is_ok()
    assert result.value.name == "Austin North"
    assert result.value.status == ChapterStatus.ACTIVE
    assert result.value.created_by == actor.user_id
    assert result.value.president_id is None

    created = mock_uow.chapters.create.call_args[0][0]
    assert created.state_id == state.id and created.city_id == city.id
    mock_uow.audit_logs.record.assert_called_once()
    assert mock_uow.audit_logs.record.call_args[0][0] == AuditAction.CHAPTER_CREATED
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_city_director_outside_city_is_forbidden(mock_uow, location):
    state, city = location
    actor = Actor(user_id=uuid4(), role=Role.CITY_DIRECTOR, state_id=state.id, city_id=uuid4())

    result = await CreateChapterUseCase(mock_uow).execute(actor, "Austin North", state.id, city.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.chapters.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "ab", "x" * 101])
async def test_name_length_is_validated(mock_uow, location, name):
    state, city = location
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await CreateChapterUseCase(mock_uow).execute(actor, name, state.id, city.id)

    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_city_outside_state_is_invalid(mock_uow, location):
    state, _ = location
    mock_uow.locations.get_city.return_value = City(id=uuid4(), name="Reno", state_id=uuid4())
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await CreateChapterUseCase(mock_uow).execute(actor, "Reno Central", state.id, uuid4())

    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.chapters.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_name_in_city_conflicts(mock_uow, location):
    state, city = location
    mock_uow.chapters.get_by_name_and_city.return_value = Chapter(
        id=uuid4(), name="Austin North", state_id=state.id, city_id=city.id
    )
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await CreateChapterUseCase(mock_uow).execute(actor, "Austin North", state.id, city.id)

    assert result.error.code == "CONFLICT"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_audit_failure_propagates_and_nothing_commits(mock_uow, location):
    state, city = location
    mock_uow.audit_logs.record.side_effect = RuntimeError("audit store down")
    actor = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    with pytest.raises(RuntimeError):
        await CreateChapterUseCase(mock_uow).execute(actor, "Austin North", state.id, city.id)

    mock_uow.commit.assert_not_called()
