from uuid import uuid4

import pytest

from chapterhub.app.use_cases.chapters import RemoveMemberUseCase
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, Chapter, ChapterMember, ChapterRole, Role, User

STATE, CITY = uuid4(), uuid4()


@pytest.fixture
def president():
    return User(id=uuid4(), email="pres@example.com", role=Role.PRESIDENT, state_id=STATE, city_id=CITY)


@pytest.fixture
def chapter(mock_uow, president):
    chapter = Chapter(
        id=uuid4(), name="Downtown", state_id=STATE, city_id=CITY, president_id=president.id
    )
    mock_uow.chapters.get_by_id_for_update.return_value = chapter
    return chapter


@pytest.fixture
def president_actor(president):
    return Actor(user_id=president.id, role=Role.PRESIDENT, state_id=STATE, city_id=CITY)


@pytest.mark.asyncio
async def test_president_removes_secretary(mock_uow, chapter, president_actor):
    """Officer roles fall back to USER when the membership goes away"""
    # Arrange
    secretary = User(
        id=uuid4(), email="sec@example.com", role=Role.SECRETARY, chapter_id=chapter.id
    )
    membership = ChapterMember(
        id=uuid4(), chapter_id=chapter.id, user_id=secretary.id, role=ChapterRole.SECRETARY
    )
    mock_uow.chapter_members.get_by_id.return_value = membership
    mock_uow.users.get_by_id.return_value = secretary

    # Act
    result = await RemoveMemberUseCase(mock_uow).execute(president_actor, chapter.id, membership.id)

    # Assert
    assert result.is_ok()
    assert result.value.role_reset is True
    assert secretary.role == Role.USER
    assert secretary.chapter_id is None
    mock_uow.chapter_members.delete.assert_called_once_with(membership)
    assert mock_uow.audit_logs.record.call_args[0][0] == AuditAction.MEMBER_REMOVED
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_removing_the_president_conflicts(mock_uow, chapter, president, president_actor):
    membership = ChapterMember(
        id=uuid4(), chapter_id=chapter.id, user_id=president.id, role=ChapterRole.PRESIDENT
    )
    mock_uow.chapter_members.get_by_id.return_value = membership
    director = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await RemoveMemberUseCase(mock_uow).execute(director, chapter.id, membership.id)

    assert result.error.code == "CONFLICT"
    mock_uow.chapter_members.delete.assert_not_called()


@pytest.mark.asyncio
async def test_membership_of_other_chapter_is_not_found(mock_uow, chapter, president_actor):
    mock_uow.chapter_members.get_by_id.return_value = ChapterMember(
        id=uuid4(), chapter_id=uuid4(), user_id=uuid4()
    )

    result = await RemoveMemberUseCase(mock_uow).execute(president_actor, chapter.id, uuid4())

    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_vice_president_cannot_remove_members(mock_uow, chapter):
    actor = Actor(user_id=uuid4(), role=Role.VICE_PRESIDENT, state_id=STATE, city_id=CITY)

    result = await RemoveMemberUseCase(mock_uow).execute(actor, chapter.id, uuid4())

    assert result.error.code == "FORBIDDEN"
    mock_uow.chapter_members.get_by_id.assert_not_called()
