from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.authorization.scope import ScopeFilter
from chapterhub.app.repositories.user_repository import IUserRepository
from chapterhub.domain.entities import ChapterMember, Role, User

from .scope import apply_scope, like_pattern


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    def _filtered(self, stmt, scope, role, state_id, city_id, search):
        stmt = apply_scope(stmt, User, scope)
        if role is not None:
            stmt = stmt.where(User.role == role)
        if state_id is not None:
            stmt = stmt.where(User.state_id == state_id)
        if city_id is not None:
            stmt = stmt.where(User.city_id == city_id)
        if search:
            stmt = stmt.where(self._matches_text(search))
        return stmt

    @staticmethod
    def _matches_text(search: str):
        pattern = like_pattern(search)
        return or_(
            func.lower(User.email).like(pattern, escape="\\"),
            func.lower(User.first_name).like(pattern, escape="\\"),
            func.lower(User.last_name).like(pattern, escape="\\"),
        )

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
        stmt = self._filtered(select(User), scope, role, state_id, city_id, search)
        stmt = stmt.order_by(User.created_at.desc()).offset(skip).limit(take)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_scoped(
        self,
        scope: ScopeFilter,
        role: Optional[Role] = None,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        search: Optional[str] = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(User), scope, role, state_id, city_id, search
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def search_without_membership(
        self, query: str, role: Role, limit: int
    ) -> List[User]:
        has_membership = select(ChapterMember.user_id)
        stmt = (
            select(User)
            .where(User.role == role)
            .where(User.id.not_in(has_membership))
            .where(self._matches_text(query))
            .order_by(User.first_name, User.last_name)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def clear_chapter(self, chapter_id: UUID) -> int:
        stmt = update(User).where(User.chapter_id == chapter_id).values(chapter_id=None)
        result = await self.session.exec(stmt)
        return result.rowcount
