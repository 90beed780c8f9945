"""
Chapter Auto-Join Resolver

Places a user into the oldest ACTIVE chapter of their state and city. Runs
inside the caller's unit of work and never commits on its own.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from chapterhub.app.services.attendance import drop_upcoming_attendance, sync_upcoming_attendance
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.entities import Chapter, ChapterMember, ChapterRole, Event, User

logger = logging.getLogger(__name__)


@dataclass
class AutoJoinOutcome:
    joined: bool
    already_member: bool = False
    chapter: Optional[Chapter] = None
    new_events: Optional[List[Event]] = None

    @property
    def chapter_id(self) -> Optional[UUID]:
        return self.chapter.id if self.chapter else None


@dataclass
class RelocateOutcome:
    removed: int
    join: AutoJoinOutcome


class ChapterAutoJoinResolver:
    """
    Business Rules:
    - Missing state or city: not joined
    - No ACTIVE chapter at the location: not joined
    - Existing membership in the matched chapter: reported as already joined
    - A user holding a membership elsewhere is left alone (single chapter)
    - Relocate = remove every membership, then auto-join the new location
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def auto_join(
        self, user: User, state_id: Optional[UUID], city_id: Optional[UUID]
    ) -> AutoJoinOutcome:
        if state_id is None or city_id is None:
            return AutoJoinOutcome(joined=False)

        chapter = await self.uow.chapters.find_oldest_active(state_id, city_id)
        if chapter is None:
            return AutoJoinOutcome(joined=False)

        memberships = await self.uow.chapter_members.list_by_user(user.id)
        if any(m.chapter_id == chapter.id for m in memberships):
            if user.chapter_id != chapter.id:
                user.chapter_id = chapter.id
                await self.uow.users.update(user)
            return AutoJoinOutcome(joined=True, already_member=True, chapter=chapter)
        if memberships:
            logger.info(
                "User %s already belongs to chapter %s, skipping auto-join",
                user.id,
                memberships[0].chapter_id,
            )
            return AutoJoinOutcome(joined=False)

        await self.uow.chapter_members.create(
            ChapterMember(chapter_id=chapter.id, user_id=user.id, role=ChapterRole.MEMBER)
        )
        user.chapter_id = chapter.id
        await self.uow.users.update(user)
        new_events = await sync_upcoming_attendance(self.uow, chapter.id, user.id)

        return AutoJoinOutcome(joined=True, chapter=chapter, new_events=new_events)

    async def relocate(
        self, user: User, state_id: Optional[UUID], city_id: Optional[UUID]
    ) -> RelocateOutcome:
        removed = await remove_from_all_chapters(self.uow, user)
        join = await self.auto_join(user, state_id, city_id)
        return RelocateOutcome(removed=removed, join=join)


async def remove_from_all_chapters(uow: UnitOfWork, user: User) -> int:
    """
    Drop every membership of the user, their upcoming attendance in those
    chapters and any chapter presidency pointing at them.
    """
    memberships = await uow.chapter_members.list_by_user(user.id)
    for membership in memberships:
        await drop_upcoming_attendance(uow, membership.chapter_id, user.id)

    removed = await uow.chapter_members.delete_by_user(user.id)

    for chapter in await uow.chapters.list_by_president(user.id):
        chapter.president_id = None
        await uow.chapters.update(chapter)

    if user.chapter_id is not None:
        user.chapter_id = None
        await uow.users.update(user)

    return removed
