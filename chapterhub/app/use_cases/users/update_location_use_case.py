"""
Update Location Use Case

Moves a user to a new state/city and re-resolves their chapter.
"""

import logging
from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import user_scope_filter
from chapterhub.app.errors import conflict, invalid, not_found
from chapterhub.app.services.attendance import invites_for
from chapterhub.app.services.chapter_auto_join import ChapterAutoJoinResolver
from chapterhub.app.services.mail_dispatcher import IMailDispatcher, dispatch_invites
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AuditAction, Role
from chapterhub.domain.roles import satisfies_anchor
from chapterhub.libs.result import Result, Return

from .dtos import LocationUpdatedResponse, UserResponse
from .location_rules import check_location

logger = logging.getLogger(__name__)

RESET_ON_RELOCATION = (Role.VICE_PRESIDENT, Role.SECRETARY)


class UpdateLocationUseCase:
    """
    Use case for relocating a user.

    Business Rules:
    - The user themself, or an actor whose user scope admits the user
    - State/city must exist and agree, and satisfy the user's role anchor
    - A sitting chapter president cannot be relocated (CONFLICT)
    - All memberships are removed, then auto-join runs for the new location
    - VICE_PRESIDENT / SECRETARY fall back to USER when they leave
    - Invitations for newly attached events are mailed after commit
    - Audited as USER_RELOCATED
    """

    def __init__(self, uow: UnitOfWork, mail_dispatcher: Optional[IMailDispatcher] = None):
        self.uow = uow
        self.mail_dispatcher = mail_dispatcher

    async def execute(
        self,
        actor: Actor,
        user_id: UUID,
        state_id: Optional[UUID],
        city_id: Optional[UUID],
    ) -> Result[LocationUpdatedResponse]:
        if actor.role is None:
            return Return.err(not_found("User not found"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            is_self = user is not None and user.id == actor.user_id
            if user is None or not (is_self or user_scope_filter(actor).matches(user)):
                return Return.err(not_found("User not found"))

            if not satisfies_anchor(user.role, state_id, city_id):
                return Return.err(invalid(f"{user.role.value} requires a state and city"))

            location_error = await check_location(self.uow, state_id, city_id)
            if location_error is not None:
                return Return.err(location_error)

            if await self.uow.chapters.list_by_president(user.id):
                return Return.err(
                    conflict("Assign a new president before relocating the current one")
                )

            previous = {"state_id": user.state_id, "city_id": user.city_id}
            user.state_id = state_id
            user.city_id = city_id

            resolver = ChapterAutoJoinResolver(self.uow)
            outcome = await resolver.relocate(user, state_id, city_id)

            if outcome.removed and user.role in RESET_ON_RELOCATION:
                user.role = Role.USER
            await self.uow.users.update(user)

            await self.uow.audit_logs.record(
                AuditAction.USER_RELOCATED,
                actor.user_id,
                user.id,
                {
                    "from_state_id": str(previous["state_id"]) if previous["state_id"] else None,
                    "from_city_id": str(previous["city_id"]) if previous["city_id"] else None,
                    "to_state_id": str(state_id) if state_id else None,
                    "to_city_id": str(city_id) if city_id else None,
                    "memberships_removed": outcome.removed,
                    "joined_chapter_id": str(outcome.join.chapter_id)
                    if outcome.join.chapter_id
                    else None,
                },
            )

            await self.uow.commit()

        if outcome.join.new_events:
            chapter_name = outcome.join.chapter.name if outcome.join.chapter else None
            await dispatch_invites(
                self.mail_dispatcher, invites_for(user.email, outcome.join.new_events, chapter_name)
            )

        logger.info("User %s relocated, joined chapter %s", user.id, outcome.join.chapter_id)

        return Return.ok(
            LocationUpdatedResponse(
                user=UserResponse.from_entity(user),
                memberships_removed=outcome.removed,
                joined_chapter_id=outcome.join.chapter_id,
                already_member=outcome.join.already_member,
            )
        )
