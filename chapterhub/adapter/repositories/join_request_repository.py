from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.app.repositories.join_request_repository import IJoinRequestRepository
from chapterhub.domain.entities import JoinRequest, JoinRequestStatus


class JoinRequestRepository(IJoinRequestRepository):
    """JoinRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[JoinRequest]:
        stmt = select(JoinRequest).where(JoinRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id_for_update(self, request_id: UUID) -> Optional[JoinRequest]:
        stmt = select(JoinRequest).where(JoinRequest.id == request_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_pending_by_chapter(self, chapter_id: UUID) -> List[JoinRequest]:
        stmt = (
            select(JoinRequest)
            .where(
                JoinRequest.chapter_id == chapter_id,
                JoinRequest.status == JoinRequestStatus.PENDING,
            )
            .order_by(JoinRequest.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_pending_by_chapter_and_user(
        self, chapter_id: UUID, user_id: UUID
    ) -> List[JoinRequest]:
        stmt = select(JoinRequest).where(
            JoinRequest.chapter_id == chapter_id,
            JoinRequest.user_id == user_id,
            JoinRequest.status == JoinRequestStatus.PENDING,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_pending_by_chapter(self, chapter_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(JoinRequest)
            .where(
                JoinRequest.chapter_id == chapter_id,
                JoinRequest.status == JoinRequestStatus.PENDING,
            )
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, join_request: JoinRequest) -> JoinRequest:
        self.session.add(join_request)
        await self.session.flush()
        await self.session.refresh(join_request)
        return join_request

    async def update(self, join_request: JoinRequest) -> JoinRequest:
        self.session.add(join_request)
        await self.session.flush()
        await self.session.refresh(join_request)
        return join_request

    async def mark_reviewed(
        self,
        request_id: UUID,
        status: JoinRequestStatus,
        reviewer_id: UUID,
        reviewed_at: datetime,
    ) -> bool:
        # Conditional on PENDING so only one reviewer can ever win
        stmt = (
            update(JoinRequest)
            .where(
                JoinRequest.id == request_id,
                JoinRequest.status == JoinRequestStatus.PENDING,
            )
            .values(status=status, reviewed_by_id=reviewer_id, reviewed_at=reviewed_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(stmt)
        return result.rowcount == 1

    async def delete_by_chapter(self, chapter_id: UUID) -> int:
        stmt = delete(JoinRequest).where(JoinRequest.chapter_id == chapter_id)
        result = await self.session.exec(stmt)
        return result.rowcount
