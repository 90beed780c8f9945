from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.chapter_member_repository import IChapterMemberRepository
from chapterhub.domain.entities import ChapterMember, ChapterRole


class ChapterMemberRepository(IChapterMemberRepository):
    """ChapterMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, membership_id: UUID) -> Optional[ChapterMember]:
        stmt = select(ChapterMember).where(ChapterMember.id == membership_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_chapter_and_user(
        self, chapter_id: UUID, user_id: UUID
    ) -> Optional[ChapterMember]:
        stmt = select(ChapterMember).where(
            ChapterMember.chapter_id == chapter_id, ChapterMember.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_chapter_and_role(
        self, chapter_id: UUID, role: ChapterRole
    ) -> List[ChapterMember]:
        stmt = select(ChapterMember).where(
            ChapterMember.chapter_id == chapter_id, ChapterMember.role == role
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_chapter(
        self, chapter_id: UUID, skip: int = 0, take: Optional[int] = None
    ) -> List[ChapterMember]:
        stmt = (
            select(ChapterMember)
            .where(ChapterMember.chapter_id == chapter_id)
            .order_by(ChapterMember.joined_at.desc())
            .offset(skip)
        )
        if take is not None:
            stmt = stmt.limit(take)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_chapter(self, chapter_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ChapterMember)
            .where(ChapterMember.chapter_id == chapter_id)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def list_by_user(self, user_id: UUID) -> List[ChapterMember]:
        stmt = select(ChapterMember).where(ChapterMember.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: ChapterMember) -> ChapterMember:
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: ChapterMember) -> ChapterMember:
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: ChapterMember) -> None:
        await self.session.delete(membership)
        await self.session.flush()

    async def delete_by_user(self, user_id: UUID) -> int:
        stmt = delete(ChapterMember).where(ChapterMember.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.rowcount

    async def delete_by_chapter(self, chapter_id: UUID) -> int:
        stmt = delete(ChapterMember).where(ChapterMember.chapter_id == chapter_id)
        result = await self.session.exec(stmt)
        return result.rowcount
