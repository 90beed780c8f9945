"""
Add Member Use Case

Adds a user to a chapter, approves their pending join requests and enrols
them in the chapter's upcoming events.
"""

from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import can_manage_chapter_members
from chapterhub.app.errors import conflict, forbidden, not_found
from chapterhub.app.services.attendance import invites_for, sync_upcoming_attendance
from chapterhub.app.services.mail_dispatcher import IMailDispatcher, dispatch_invites
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.base import utcnow
from chapterhub.domain.entities import AuditAction, ChapterMember, ChapterRole, JoinRequestStatus
from chapterhub.libs.result import Result, Return

from .dtos import AddMemberResponse, MemberResponse


class AddMemberUseCase:
    """
    Use case for adding a member to a chapter.

    Business Rules:
    - Actor manages the chapter (jurisdiction or chapter president)
    - A user with any ChapterMember row is already a member (CONFLICT)
    - A dangling User.chapter_id without a ChapterMember row is overwritten
    - Creates ChapterMember(role=MEMBER) and sets User.chapter_id
    - PENDING join requests for (chapter, user) become APPROVED
    - Attendee rows (INVITED/PENDING) for every upcoming chapter event,
      existing rows untouched
    - Invitations are mailed after commit, one per new attendee row
    - Audited as MEMBER_ADDED
    """

    def __init__(self, uow: UnitOfWork, mail_dispatcher: Optional[IMailDispatcher] = None):
        self.uow = uow
        self.mail_dispatcher = mail_dispatcher

    async def execute(
        self, actor: Actor, chapter_id: UUID, user_id: UUID
    ) -> Result[AddMemberResponse]:
        async with self.uow:
            chapter = await self.uow.chapters.get_by_id_for_update(chapter_id)
            if chapter is None:
                return Return.err(not_found("Chapter not found"))

            if not can_manage_chapter_members(actor, chapter):
                return Return.err(forbidden("You cannot manage members of this chapter"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(not_found("User not found"))

            memberships = await self.uow.chapter_members.list_by_user(user.id)
            if any(m.chapter_id == chapter.id for m in memberships):
                return Return.err(conflict("User is already a member of this chapter"))
            if memberships:
                return Return.err(conflict("User is already a member of another chapter"))

            stale_chapter_id = user.chapter_id

            membership = await self.uow.chapter_members.create(
                ChapterMember(chapter_id=chapter.id, user_id=user.id, role=ChapterRole.MEMBER)
            )
            user.chapter_id = chapter.id
            await self.uow.users.update(user)

            now = utcnow()
            pending = await self.uow.join_requests.list_pending_by_chapter_and_user(
                chapter.id, user.id
            )
            for request in pending:
                request.status = JoinRequestStatus.APPROVED
                request.reviewed_by_id = actor.user_id
                request.reviewed_at = now
                await self.uow.join_requests.update(request)

            new_events = await sync_upcoming_attendance(self.uow, chapter.id, user.id, now)

            await self.uow.audit_logs.record(
                AuditAction.MEMBER_ADDED,
                actor.user_id,
                user.id,
                {
                    "chapter_id": str(chapter.id),
                    "healed_chapter_id": str(stale_chapter_id) if stale_chapter_id else None,
                    "approved_requests": len(pending),
                },
            )

            await self.uow.commit()

        await dispatch_invites(self.mail_dispatcher, invites_for(user.email, new_events, chapter.name))

        return Return.ok(
            AddMemberResponse(
                membership=MemberResponse.from_entity(membership, user),
                approved_request_count=len(pending),
                invited_event_count=len(new_events),
            )
        )
