from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from chapterhub.domain.entities import JoinRequest, JoinRequestStatus


class IJoinRequestRepository(ABC):
    """JoinRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[JoinRequest]:
        """Get join request by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, request_id: UUID) -> Optional[JoinRequest]:
        """Get join request by ID, locking the row until the transaction ends"""
        pass

    @abstractmethod
    async def list_pending_by_chapter(self, chapter_id: UUID) -> List[JoinRequest]:
        """PENDING requests of a chapter, newest first"""
        pass

    @abstractmethod
    async def list_pending_by_chapter_and_user(
        self, chapter_id: UUID, user_id: UUID
    ) -> List[JoinRequest]:
        """PENDING requests a user has open against a chapter"""
        pass

    @abstractmethod
    async def count_pending_by_chapter(self, chapter_id: UUID) -> int:
        """Number of PENDING requests of a chapter"""
        pass

    @abstractmethod
    async def create(self, join_request: JoinRequest) -> JoinRequest:
        """Create a new join request"""
        pass

    @abstractmethod
    async def update(self, join_request: JoinRequest) -> JoinRequest:
        """Update existing join request"""
        pass

    @abstractmethod
    async def mark_reviewed(
        self,
        request_id: UUID,
        status: JoinRequestStatus,
        reviewer_id: UUID,
        reviewed_at: datetime,
    ) -> bool:
        """Move a PENDING request to a terminal status; False if it was no longer PENDING"""
        pass

    @abstractmethod
    async def delete_by_chapter(self, chapter_id: UUID) -> int:
        """Delete every request of a chapter"""
        pass
