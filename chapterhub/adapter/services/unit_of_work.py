from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.adapter.repositories.audit_log_repository import AuditLogRepository
from chapterhub.adapter.repositories.chapter_member_repository import ChapterMemberRepository
from chapterhub.adapter.repositories.chapter_repository import ChapterRepository
from chapterhub.adapter.repositories.event_attendee_repository import EventAttendeeRepository
from chapterhub.adapter.repositories.event_repository import EventRepository
from chapterhub.adapter.repositories.join_request_repository import JoinRequestRepository
from chapterhub.adapter.repositories.location_repository import LocationRepository
from chapterhub.adapter.repositories.user_repository import UserRepository
from chapterhub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.chapters = ChapterRepository(self.session)
        self.chapter_members = ChapterMemberRepository(self.session)
        self.join_requests = JoinRequestRepository(self.session)
        self.events = EventRepository(self.session)
        self.event_attendees = EventAttendeeRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.locations = LocationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
