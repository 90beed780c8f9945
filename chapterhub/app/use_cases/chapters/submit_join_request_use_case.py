"""
Submit Join Request Use Case

Lets a user ask to join a chapter; the chapter president reviews it.
"""

from uuid import UUID

from chapterhub.app.errors import conflict, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, ChapterStatus, JoinRequest
from chapterhub.libs.result import Result, Return

from .dtos import JoinRequestResponse


class SubmitJoinRequestUseCase:
    """
    Business Rules:
    - Chapter must exist and be ACTIVE
    - Requester must not hold any chapter membership
    - At most one PENDING request per (chapter, user)
    - Audited as JOIN_REQUEST_SUBMITTED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, chapter_id: UUID) -> Result[JoinRequestResponse]:
        async with self.uow:
            chapter = await self.uow.chapters.get_by_id(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            if chapter.status != ChapterStatus.ACTIVE:
                return Return.err(conflict("Chapter is not accepting members"))

            user = await self.uow.users.get_by_id(actor.user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            if await self.uow.chapter_members.list_by_user(user.id):
                return Return.err(conflict("You are already a member of a chapter"))

            pending = await self.uow.join_requests.list_pending_by_chapter_and_user(
                chapter.id, user.id
            )
            if pending:
                return Return.err(conflict("You already have a pending request for this chapter"))

            request = await self.uow.join_requests.create(
                JoinRequest(chapter_id=chapter.id, user_id=user.id)
            )

            await self.uow.audit_logs.record(
                AuditAction.JOIN_REQUEST_SUBMITTED,
                actor.user_id,
                request.id,
                {"chapter_id": str(chapter.id)},
            )

            await self.uow.commit()

            return Return.ok(JoinRequestResponse.from_entity(request, user))
