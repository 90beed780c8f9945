from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from chapterhub.app.authorization.scope import ScopeFilter
from chapterhub.domain.entities import Chapter, ChapterStatus


class IChapterRepository(ABC):
    """Chapter repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, chapter_id: UUID) -> Optional[Chapter]:
        """Get chapter by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, chapter_id: UUID) -> Optional[Chapter]:
        """Get chapter by ID, locking the row until the transaction ends"""
        pass

    @abstractmethod
    async def get_scoped(self, chapter_id: UUID, scope: ScopeFilter) -> Optional[Chapter]:
        """Get chapter by ID only if it falls inside the scope"""
        pass

    @abstractmethod
    async def get_by_name_and_city(self, name: str, city_id: UUID) -> Optional[Chapter]:
        """Get chapter by its unique (name, city) pair"""
        pass

    @abstractmethod
    async def find_oldest_active(self, state_id: UUID, city_id: UUID) -> Optional[Chapter]:
        """Oldest ACTIVE chapter at a location"""
        pass

    @abstractmethod
    async def list_by_president(self, user_id: UUID) -> List[Chapter]:
        """Chapters whose president_id is the user"""
        pass

    @abstractmethod
    async def list_scoped(
        self,
        scope: ScopeFilter,
        skip: int,
        take: int,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        status: Optional[ChapterStatus] = None,
        search: Optional[str] = None,
    ) -> List[Chapter]:
        """List chapters inside a scope, newest first"""
        pass

    @abstractmethod
    async def count_scoped(
        self,
        scope: ScopeFilter,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        status: Optional[ChapterStatus] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count chapters inside a scope"""
        pass

    @abstractmethod
    async def create(self, chapter: Chapter) -> Chapter:
        """Create a new chapter"""
        pass

    @abstractmethod
    async def update(self, chapter: Chapter) -> Chapter:
        """Update existing chapter"""
        pass

    @abstractmethod
    async def delete(self, chapter: Chapter) -> None:
        """Delete chapter row"""
        pass
