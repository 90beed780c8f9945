"""
Assign Global Role Use Case

Changes a user's global role and location anchor.
"""

from typing import Optional
from uuid import UUID

from chapterhub.app.authorization import can_assign_role, user_scope_filter
from chapterhub.app.errors import forbidden, invalid, not_found
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor, Target
from chapterhub.domain.entities import AuditAction, Role
from chapterhub.domain.roles import anchor_for, satisfies_anchor
from chapterhub.libs.result import Result, Return

from .dtos import RoleAssignedResponse, UserResponse
from .location_rules import check_location

GLOBAL_ASSIGNABLE_ROLES = (
    Role.SUPER_ADMIN,
    Role.STATE_DIRECTOR,
    Role.CITY_DIRECTOR,
    Role.PRESIDENT,
    Role.USER,
)


class AssignRoleUseCase:
    """
    Use case for assigning a global role.

    Business Rules:
    - Role is one of SUPER_ADMIN, STATE_DIRECTOR, CITY_DIRECTOR, PRESIDENT, USER
    - The role's location anchor must be satisfied by the request
    - Target must be inside the actor's user scope (else NOT_FOUND)
    - The role-assignment predicate must pass for the target's current
      location and for the requested one
    - State and city must exist and agree
    - Role and location are written together; omitted parts become null
    - Chapter memberships are not touched
    - Audited as ROLE_ASSIGNED with old and new role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        user_id: UUID,
        role: str,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
    ) -> Result[RoleAssignedResponse]:
        target_role = Role.parse(role)
        if target_role not in GLOBAL_ASSIGNABLE_ROLES:
            return Return.err(invalid(f"Invalid role: {role}"))

        if not satisfies_anchor(target_role, state_id, city_id):
            return Return.err(
                invalid(f"{target_role.value} requires location '{anchor_for(target_role).value}'")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user_scope_filter(actor).matches(user):
                return Return.err(not_found("User not found"))

            current = Target.of_user(user)
            requested = Target(state_id=state_id, city_id=city_id, user_id=user.id, role=user.role)
            if not (
                can_assign_role(actor, target_role, current)
                and can_assign_role(actor, target_role, requested)
            ):
                return Return.err(forbidden("You cannot assign this role to this user"))

            location_error = await check_location(self.uow, state_id, city_id)
            if location_error is not None:
                return Return.err(location_error)

            old_role = user.role
            user.role = target_role
            user.state_id = state_id
            user.city_id = city_id
            await self.uow.users.update(user)

            await self.uow.audit_logs.record(
                AuditAction.ROLE_ASSIGNED,
                actor.user_id,
                user.id,
                {
                    "old_role": old_role.value,
                    "new_role": target_role.value,
                    "state_id": str(state_id) if state_id else None,
                    "city_id": str(city_id) if city_id else None,
                },
            )

            await self.uow.commit()

            return Return.ok(
                RoleAssignedResponse(user=UserResponse.from_entity(user), old_role=old_role)
            )
