"""
Process Join Request Use Case

Approves or rejects a PENDING join request. A processed request is terminal.
"""

from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import can_review_join_requests
from chapterhub.app.errors import conflict, forbidden, invalid, not_found
from chapterhub.app.services.attendance import invites_for, sync_upcoming_attendance
from chapterhub.app.services.mail_dispatcher import IMailDispatcher, dispatch_invites
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.base import utcnow
from chapterhub.domain.entities import (
    AuditAction,
    ChapterMember,
    ChapterRole,
    JoinRequestAction,
    JoinRequestStatus,
)
from chapterhub.libs.result import Result, Return

from .dtos import JoinRequestResponse, ProcessJoinRequestResponse


class ProcessJoinRequestUseCase:
    """
    Use case for reviewing a join request.

    Business Rules:
    - Action is APPROVE or REJECT
    - Only the president of the request's chapter may review
    - Request must be PENDING; re-processing is a CONFLICT with no writes
    - The transition out of PENDING is conditional on PENDING; a review that
      loses a race to another one is a CONFLICT
    - Reviewer and review time are recorded either way
    - APPROVE creates the membership when missing, enrols the user in
      upcoming events and mails invitations after commit
    - A user already belonging to another chapter cannot be approved
    """

    def __init__(self, uow: UnitOfWork, mail_dispatcher: Optional[IMailDispatcher] = None):
        self.uow = uow
        self.mail_dispatcher = mail_dispatcher

    async def execute(
        self, actor: Actor, request_id: UUID, action: str
    ) -> Result[ProcessJoinRequestResponse]:
        try:
            decision = JoinRequestAction((action or "").upper())
        except ValueError:
            return Return.err(invalid("Action must be APPROVE or REJECT"))

        async with self.uow:
            request = await self.uow.join_requests.get_by_id_for_update(request_id)
            if request is None:
                return Return.err(not_found("Join request not found"))

            chapter = await self.uow.chapters.get_by_id_for_update(request.chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            if not can_review_join_requests(actor, chapter):
                return Return.err(forbidden("Only the chapter president can review requests"))

            if request.status != JoinRequestStatus.PENDING:
                return Return.err(conflict("Join request has already been processed"))

            user = await self.uow.users.get_by_id(request.user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            in_chapter = False
            if decision == JoinRequestAction.APPROVE:
                memberships = await self.uow.chapter_members.list_by_user(user.id)
                in_chapter = any(m.chapter_id == chapter.id for m in memberships)
                if memberships and not in_chapter:
                    return Return.err(conflict("User is already a member of another chapter"))
                status = JoinRequestStatus.APPROVED
            else:
                status = JoinRequestStatus.REJECTED

            # First write of the unit of work: only one reviewer can leave PENDING
            now = utcnow()
            claimed = await self.uow.join_requests.mark_reviewed(
                request.id, status, actor.user_id, now
            )
            if not claimed:
                return Return.err(conflict("Join request has already been processed"))

            request.status = status
            request.reviewed_by_id = actor.user_id
            request.reviewed_at = now

            membership_created = False
            new_events = []
            if decision == JoinRequestAction.APPROVE:
                if not in_chapter:
                    await self.uow.chapter_members.create(
                        ChapterMember(
                            chapter_id=chapter.id, user_id=user.id, role=ChapterRole.MEMBER
                        )
                    )
                    membership_created = True
                    new_events = await sync_upcoming_attendance(
                        self.uow, chapter.id, user.id, now
                    )
                if user.chapter_id != chapter.id:
                    user.chapter_id = chapter.id
                    await self.uow.users.update(user)
                audit_action = AuditAction.JOIN_REQUEST_APPROVED
            else:
                audit_action = AuditAction.JOIN_REQUEST_REJECTED

            await self.uow.join_requests.update(request)

            await self.uow.audit_logs.record(
                audit_action,
                actor.user_id,
                request.id,
                {
                    "chapter_id": str(chapter.id),
                    "user_id": str(user.id),
                    "membership_created": membership_created,
                },
            )

            await self.uow.commit()

        await dispatch_invites(self.mail_dispatcher, invites_for(user.email, new_events, chapter.name))

        return Return.ok(
            ProcessJoinRequestResponse(
                join_request=JoinRequestResponse.from_entity(request, user),
                membership_created=membership_created,
                invited_event_count=len(new_events),
            )
        )
