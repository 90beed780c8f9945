from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from chapterhub.domain.entities import ChapterMember, ChapterRole


class IChapterMemberRepository(ABC):
    """ChapterMember repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[ChapterMember]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_chapter_and_user(
        self, chapter_id: UUID, user_id: UUID
    ) -> Optional[ChapterMember]:
        """Get membership by its unique (chapter, user) pair"""
        pass

    @abstractmethod
    async def list_by_chapter_and_role(
        self, chapter_id: UUID, role: ChapterRole
    ) -> List[ChapterMember]:
        """All memberships of a chapter holding a chapter role"""
        pass

    @abstractmethod
    async def list_by_chapter(
        self, chapter_id: UUID, skip: int = 0, take: Optional[int] = None
    ) -> List[ChapterMember]:
        """Memberships of a chapter, most recently joined first"""
        pass

    @abstractmethod
    async def count_by_chapter(self, chapter_id: UUID) -> int:
        """Number of members in a chapter"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[ChapterMember]:
        """All memberships of a user"""
        pass

    @abstractmethod
    async def create(self, membership: ChapterMember) -> ChapterMember:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: ChapterMember) -> ChapterMember:
        """Update existing membership"""
        pass

    @abstractmethod
    async def delete(self, membership: ChapterMember) -> None:
        """Delete one membership"""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every membership of a user, returning how many were removed"""
        pass

    @abstractmethod
    async def delete_by_chapter(self, chapter_id: UUID) -> int:
        """Delete every membership of a chapter"""
        pass
