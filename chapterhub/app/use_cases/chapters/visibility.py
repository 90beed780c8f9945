from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import chapter_scope_filter
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Chapter


async def find_visible_chapter(
    uow: UnitOfWork, actor: Actor, chapter_id: UUID, include_members: bool = False
) -> Optional[Chapter]:
    """
    Chapter inside the actor's chapter scope, or None.

    With include_members, a chapter the actor belongs to is visible too.
    """
    chapter = await uow.chapters.get_scoped(chapter_id, chapter_scope_filter(actor))
    if chapter is not None or not include_members or actor.role is None:
        return chapter

    membership = await uow.chapter_members.get_by_chapter_and_user(chapter_id, actor.user_id)
    if membership is None:
        return None
    return await uow.chapters.get_by_id(chapter_id)
