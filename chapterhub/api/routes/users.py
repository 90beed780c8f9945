"""
User API Routes

User management: listing, role assignment, location, verification and
activation.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.mail_dispatcher import IMailDispatcher
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.users import (
    ActivateUserUseCase,
    AssignRoleUseCase,
    DeactivateUserUseCase,
    ListUsersUseCase,
    LocationUpdatedResponse,
    RoleAssignedResponse,
    SearchAddableUsersUseCase,
    ToggleVerificationUseCase,
    UpdateLocationUseCase,
    UserListResponse,
    UserResponse,
    UserStatusResponse,
)
from chapterhub.depends import get_current_actor, get_mail_dispatcher, get_unit_of_work
from chapterhub.domain.actor import Actor

router = APIRouter(prefix="/users", tags=["Users"])


class AssignRoleRequest(BaseModel):
    role: str
    state_id: Optional[UUID] = None
    city_id: Optional[UUID] = None


class UpdateLocationRequest(BaseModel):
    state_id: Optional[UUID] = None
    city_id: Optional[UUID] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    skip: int = Query(0, ge=0),
    take: int = Query(20, ge=1, le=100),
    role: Optional[str] = Query(None),
    state_id: Optional[UUID] = Query(None),
    city_id: Optional[UUID] = Query(None),
    search: Optional[str] = Query(None),
):
    result = await ListUsersUseCase(uow).execute(
        actor,
        skip=skip,
        take=take,
        role=role,
        state_id=state_id,
        city_id=city_id,
        search=search,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/search", status_code=status.HTTP_200_OK, response_model=List[UserResponse])
async def search_addable_users(
    q: str = Query("", description="Name or email fragment"),
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Users that can be added to a chapter"""
    result = await SearchAddableUsersUseCase(uow).execute(actor, q)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{user_id}/role", status_code=status.HTTP_200_OK, response_model=RoleAssignedResponse
)
async def assign_role(
    user_id: UUID,
    request: AssignRoleRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Global Role

    Raises:
        - 400 Bad Request: unknown role, missing location anchor, bad state/city
        - 403 Forbidden: caller may not assign this role to this user
        - 404 Not Found: user missing or outside the caller's scope
    """
    result = await AssignRoleUseCase(uow).execute(
        actor, user_id, request.role, request.state_id, request.city_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{user_id}/location",
    status_code=status.HTTP_200_OK,
    response_model=LocationUpdatedResponse,
)
async def update_location(
    user_id: UUID,
    request: UpdateLocationRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail: IMailDispatcher = Depends(get_mail_dispatcher),
):
    result = await UpdateLocationUseCase(uow, mail).execute(
        actor, user_id, request.state_id, request.city_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{user_id}/verify", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def toggle_verification(
    user_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ToggleVerificationUseCase(uow).execute(actor, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{user_id}/activate", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def activate_user(
    user_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ActivateUserUseCase(uow).execute(actor, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{user_id}/deactivate", status_code=status.HTTP_200_OK, response_model=UserStatusResponse
)
async def deactivate_user(
    user_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate User

    Removes the user from every chapter; the global role is left as is.
    """
    result = await DeactivateUserUseCase(uow).execute(actor, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
