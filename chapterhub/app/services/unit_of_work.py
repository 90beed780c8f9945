from abc import ABC, abstractmethod

from chapterhub.app.repositories.audit_log_repository import IAuditLogRepository
from chapterhub.app.repositories.chapter_member_repository import IChapterMemberRepository
from chapterhub.app.repositories.chapter_repository import IChapterRepository
from chapterhub.app.repositories.event_attendee_repository import IEventAttendeeRepository
from chapterhub.app.repositories.event_repository import IEventRepository
from chapterhub.app.repositories.join_request_repository import IJoinRequestRepository
from chapterhub.app.repositories.location_repository import ILocationRepository
from chapterhub.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    chapters: IChapterRepository
    chapter_members: IChapterMemberRepository
    join_requests: IJoinRequestRepository
    events: IEventRepository
    event_attendees: IEventAttendeeRepository
    audit_logs: IAuditLogRepository
    locations: ILocationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
