import pytest
from unittest.mock import AsyncMock, MagicMock


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories; every method is awaitable
    uow.users = AsyncMock()
    uow.users.update.side_effect = _returns_argument
    uow.users.create.side_effect = _returns_argument

    uow.chapters = AsyncMock()
    uow.chapters.create.side_effect = _returns_argument
    uow.chapters.update.side_effect = _returns_argument
    uow.chapters.list_by_president.return_value = []

    uow.chapter_members = AsyncMock()
    uow.chapter_members.create.side_effect = _returns_argument
    uow.chapter_members.update.side_effect = _returns_argument
    uow.chapter_members.list_by_user.return_value = []
    uow.chapter_members.list_by_chapter.return_value = []
    uow.chapter_members.list_by_chapter_and_role.return_value = []
    uow.chapter_members.delete_by_user.return_value = 0

    uow.join_requests = AsyncMock()
    uow.join_requests.create.side_effect = _returns_argument
    uow.join_requests.update.side_effect = _returns_argument
    uow.join_requests.list_pending_by_chapter_and_user.return_value = []
    uow.join_requests.mark_reviewed.return_value = True

    uow.events = AsyncMock()
    uow.events.create.side_effect = _returns_argument
    uow.events.list_upcoming_by_chapter.return_value = []

    uow.event_attendees = AsyncMock()
    uow.event_attendees.create.side_effect = _returns_argument
    uow.event_attendees.update.side_effect = _returns_argument
    uow.event_attendees.list_event_ids_by_user.return_value = []
    uow.event_attendees.delete_by_user_and_events.return_value = 0
    uow.event_attendees.list_by_event.return_value = []
    uow.event_attendees.delete_by_event.return_value = 0

    uow.audit_logs = AsyncMock()
    uow.locations = AsyncMock()
    return uow
