"""
Create Chapter Use Case

Creates a new ACTIVE chapter at a state/city location.
"""

from uuid import UUID

from chapterhub.app.authorization import can_create_chapter
from chapterhub.app.errors import conflict, forbidden, invalid
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, Chapter, ChapterStatus
from chapterhub.libs.result import Result, Return

from .dtos import ChapterResponse

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100


class CreateChapterUseCase:
    """
    Use case for creating a chapter.

    Business Rules:
    - Name is 3 to 100 characters after trimming
    - Actor needs broader-or-equal jurisdiction over the location
    - City must exist and belong to the state
    - Name is unique within the city
    - New chapters start ACTIVE
    - Audited as CHAPTER_CREATED
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, name: str, state_id: UUID, city_id: UUID
    ) -> Result[ChapterResponse]:
        name = (name or "").strip()
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            return Return.err(
                invalid(
                    f"Chapter name must be between {NAME_MIN_LENGTH} and "
                    f"{NAME_MAX_LENGTH} characters"
                )
            )

        if not can_create_chapter(actor, state_id, city_id):
            return Return.err(forbidden("You cannot create a chapter at this location"))

        async with self.uow:
            state = await self.uow.locations.get_state(state_id)
            city = await self.uow.locations.get_city(city_id)
            if state is None or city is None or city.state_id != state.id:
                return Return.err(invalid("City does not belong to the given state"))

            existing = await self.uow.chapters.get_by_name_and_city(name, city_id)
            if existing is not None:
                return Return.err(conflict("A chapter with this name already exists in the city"))

            chapter = await self.uow.chapters.create(
                Chapter(
                    name=name,
                    state_id=state_id,
                    city_id=city_id,
                    status=ChapterStatus.ACTIVE,
                    created_by=actor.user_id,
                )
            )

            await self.uow.audit_logs.record(
                AuditAction.CHAPTER_CREATED,
                actor.user_id,
                chapter.id,
                {"name": name, "state_id": str(state_id), "city_id": str(city_id)},
            )

            await self.uow.commit()

            return Return.ok(ChapterResponse.from_entity(chapter))
