from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.authorization.scope import ScopeFilter
from chapterhub.app.repositories.chapter_repository import IChapterRepository
from chapterhub.domain.entities import Chapter, ChapterStatus

from .scope import apply_scope, like_pattern


class ChapterRepository(IChapterRepository):
    """Chapter repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, chapter_id: UUID) -> Optional[Chapter]:
        """Get chapter by ID"""
        stmt = select(Chapter).where(Chapter.id == chapter_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id_for_update(self, chapter_id: UUID) -> Optional[Chapter]:
        stmt = select(Chapter).where(Chapter.id == chapter_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_scoped(self, chapter_id: UUID, scope: ScopeFilter) -> Optional[Chapter]:
        stmt = apply_scope(select(Chapter).where(Chapter.id == chapter_id), Chapter, scope)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name_and_city(self, name: str, city_id: UUID) -> Optional[Chapter]:
        stmt = select(Chapter).where(Chapter.name == name, Chapter.city_id == city_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_oldest_active(self, state_id: UUID, city_id: UUID) -> Optional[Chapter]:
        stmt = (
            select(Chapter)
            .where(
                Chapter.state_id == state_id,
                Chapter.city_id == city_id,
                Chapter.status == ChapterStatus.ACTIVE,
            )
            .order_by(Chapter.created_at.asc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_president(self, user_id: UUID) -> List[Chapter]:
        stmt = select(Chapter).where(Chapter.president_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    def _filtered(self, stmt, scope, state_id, city_id, status, search):
        stmt = apply_scope(stmt, Chapter, scope)
        if state_id is not None:
            stmt = stmt.where(Chapter.state_id == state_id)
        if city_id is not None:
            stmt = stmt.where(Chapter.city_id == city_id)
        if status is not None:
            stmt = stmt.where(Chapter.status == status)
        if search:
            stmt = stmt.where(func.lower(Chapter.name).like(like_pattern(search), escape="\\"))
        return stmt

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
        stmt = self._filtered(select(Chapter), scope, state_id, city_id, status, search)
        stmt = stmt.order_by(Chapter.created_at.desc()).offset(skip).limit(take)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_scoped(
        self,
        scope: ScopeFilter,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
        status: Optional[ChapterStatus] = None,
        search: Optional[str] = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(Chapter), scope, state_id, city_id, status, search
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, chapter: Chapter) -> Chapter:
        """Create a new chapter"""
        self.session.add(chapter)
        await self.session.flush()
        await self.session.refresh(chapter)
        return chapter

    async def update(self, chapter: Chapter) -> Chapter:
        """Update existing chapter"""
        self.session.add(chapter)
        await self.session.flush()
        await self.session.refresh(chapter)
        return chapter

    async def delete(self, chapter: Chapter) -> None:
        await self.session.delete(chapter)
        await self.session.flush()
