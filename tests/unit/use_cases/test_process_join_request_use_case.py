from uuid import uuid4

import pytest

from chapterhub.app.use_cases.chapters import ProcessJoinRequestUseCase, SubmitJoinRequestUseCase
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import (
    AuditAction,
    Chapter,
    ChapterMember,
    ChapterStatus,
    JoinRequest,
    JoinRequestStatus,
    Role,
    User,
)

STATE, CITY = uuid4(), uuid4()


@pytest.fixture
def president_actor():
    return Actor(user_id=uuid4(), role=Role.PRESIDENT, state_id=STATE, city_id=CITY)


@pytest.fixture
def chapter(mock_uow, president_actor):
    chapter = Chapter(
        id=uuid4(),
        name="Downtown",
        state_id=STATE,
        city_id=CITY,
        president_id=president_actor.user_id,
    )
    mock_uow.chapters.get_by_id_for_update.return_value = chapter
    mock_uow.chapters.get_by_id.return_value = chapter
    return chapter


@pytest.fixture
def applicant(mock_uow):
    user = User(id=uuid4(), email="new@example.com")
    mock_uow.users.get_by_id.return_value = user
    return user


@pytest.mark.asyncio
async def test_approve_creates_membership(mock_uow, chapter, applicant, president_actor):
    # Arrange
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request

    # Act
    result = await ProcessJoinRequestUseCase(mock_uow).execute(
        president_actor, request.id, "approve"
    )

    # Assert
    assert result.is_ok()
    assert result.value.membership_created is True
    assert request.status == JoinRequestStatus.APPROVED
    assert request.reviewed_by_id == president_actor.user_id
    assert request.reviewed_at is not None
    assert applicant.chapter_id == chapter.id
    assert mock_uow.audit_logs.record.call_args[0][0] == AuditAction.JOIN_REQUEST_APPROVED
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reject_records_reviewer(mock_uow, chapter, applicant, president_actor):
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request

    result = await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, request.id, "REJECT")

    assert result.is_ok()
    assert request.status == JoinRequestStatus.REJECTED
    assert request.reviewed_by_id == president_actor.user_id
    mock_uow.chapter_members.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [JoinRequestStatus.APPROVED, JoinRequestStatus.REJECTED])
async def test_processed_request_is_terminal(mock_uow, chapter, applicant, president_actor, status):
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id, status=status)
    mock_uow.join_requests.get_by_id_for_update.return_value = request

    result = await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, request.id, "APPROVE")

    assert result.error.code == "CONFLICT"
    assert request.status == status
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_review_losing_the_pending_claim_conflicts(
    mock_uow, chapter, applicant, president_actor
):
    # Another reviewer moved the request out of PENDING after it was read
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request
    mock_uow.join_requests.mark_reviewed.return_value = False

    result = await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, request.id, "APPROVE")

    assert result.error.code == "CONFLICT"
    assert request.status == JoinRequestStatus.PENDING
    mock_uow.chapter_members.create.assert_not_called()
    mock_uow.audit_logs.record.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_approve_marks_request_reviewed_by_actor(mock_uow, chapter, applicant, president_actor):
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request

    await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, request.id, "APPROVE")

    args = mock_uow.join_requests.mark_reviewed.call_args[0]
    assert args[:3] == (request.id, JoinRequestStatus.APPROVED, president_actor.user_id)


@pytest.mark.asyncio
async def test_only_the_chapter_president_reviews(mock_uow, chapter, applicant):
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request
    director = Actor(user_id=uuid4(), role=Role.SUPER_ADMIN)

    result = await ProcessJoinRequestUseCase(mock_uow).execute(director, request.id, "APPROVE")

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_unknown_action_is_invalid(mock_uow, president_actor):
    result = await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, uuid4(), "MAYBE")

    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.join_requests.get_by_id_for_update.assert_not_called()


@pytest.mark.asyncio
async def test_approve_member_of_other_chapter_conflicts(mock_uow, chapter, applicant, president_actor):
    request = JoinRequest(id=uuid4(), chapter_id=chapter.id, user_id=applicant.id)
    mock_uow.join_requests.get_by_id_for_update.return_value = request
    mock_uow.chapter_members.list_by_user.return_value = [
        ChapterMember(id=uuid4(), chapter_id=uuid4(), user_id=applicant.id)
    ]

    result = await ProcessJoinRequestUseCase(mock_uow).execute(president_actor, request.id, "APPROVE")

    assert result.error.code == "CONFLICT"
    assert request.status == JoinRequestStatus.PENDING


@pytest.mark.asyncio
async def test_submit_join_request(mock_uow, chapter, applicant):
    mock_uow.join_requests.list_pending_by_chapter_and_user.return_value = []
    actor = Actor(user_id=applicant.id, role=Role.USER)

    result = await SubmitJoinRequestUseCase(mock_uow).execute(actor, chapter.id)

    assert result.is_ok()
    assert result.value.status == JoinRequestStatus.PENDING
    mock_uow.join_requests.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_submit_to_inactive_chapter_conflicts(mock_uow, chapter, applicant):
    chapter.status = ChapterStatus.INACTIVE
    actor = Actor(user_id=applicant.id, role=Role.USER)

    result = await SubmitJoinRequestUseCase(mock_uow).execute(actor, chapter.id)

    assert result.error.code == "CONFLICT"
