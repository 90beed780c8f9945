from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from chapterhub.app.authorization.scope import ScopeFilter
from chapterhub.domain.entities import Role, User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get all users whose ID is in the list"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def list_scoped(
        self,
        scope: ScopeFilter,
        skip: int,
        take: int,
        role: Optional[Role] = None,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> List[User]:
        """List users inside a scope, newest first"""
        pass

    @abstractmethod
    async def count_scoped(
        self,
        scope: ScopeFilter,
        role: Optional[Role] = None,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count users inside a scope"""
        pass

    @abstractmethod
    async def search_without_membership(
        self, query: str, role: Role, limit: int
    ) -> List[User]:
        """Case-insensitive name/email search over users of one role with no ChapterMember row"""
        pass

    @abstractmethod
    async def clear_chapter(self, chapter_id: UUID) -> int:
        """Null chapter_id on every user pointing at the chapter"""
        pass
