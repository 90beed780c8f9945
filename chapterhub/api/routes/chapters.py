"""
Chapter API Routes

Chapter lifecycle, membership, join requests and meetings.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.mail_dispatcher import IMailDispatcher
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.chapters import (
    AddMemberResponse,
    AddMemberUseCase,
    AssignChapterRoleResponse,
    AssignChapterRoleUseCase,
    AssignPresidentResponse,
    AssignPresidentUseCase,
    ChapterListResponse,
    ChapterResponse,
    CreateChapterUseCase,
    CreateMeetingCommand,
    CreateMeetingUseCase,
    DeleteChapterResponse,
    DeleteChapterUseCase,
    GetChapterUseCase,
    JoinRequestResponse,
    ListChaptersUseCase,
    ListJoinRequestsUseCase,
    ListMeetingsUseCase,
    ListMembersUseCase,
    MeetingResponse,
    MemberListResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    SubmitJoinRequestUseCase,
)
from chapterhub.depends import get_current_actor, get_mail_dispatcher, get_unit_of_work
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import ChapterStatus, EventType

router = APIRouter(prefix="/chapters", tags=["Chapters"])


class CreateChapterRequest(BaseModel):
    name: str = Field(..., description="Chapter name, unique within the city")
    state_id: UUID
    city_id: UUID


class UserIdRequest(BaseModel):
    user_id: UUID


class AssignChapterRoleRequest(BaseModel):
    user_id: UUID
    role: str = Field(..., description="VICE_PRESIDENT, SECRETARY or USER")


class CreateMeetingRequest(BaseModel):
    title: str
    date: datetime
    description: str = ""
    location: Optional[str] = None
    type: EventType = EventType.MEETING
    entry_fee: int = 0
    is_public: bool = True
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = None
    send_invites: bool = True


@router.get("", status_code=status.HTTP_200_OK, response_model=ChapterListResponse)
async def list_chapters(
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    skip: int = Query(0, ge=0),
    take: int = Query(20, ge=1, le=100),
    state_id: Optional[UUID] = Query(None),
    city_id: Optional[UUID] = Query(None),
    chapter_status: Optional[ChapterStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
):
    """List chapters inside the caller's scope, newest first"""
    result = await ListChaptersUseCase(uow).execute(
        actor,
        skip=skip,
        take=take,
        state_id=state_id,
        city_id=city_id,
        status=chapter_status,
        search=search,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ChapterResponse)
async def create_chapter(
    request: CreateChapterRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Chapter

    Raises:
        - 400 Bad Request: name length, unknown state/city
        - 403 Forbidden: location outside the caller's jurisdiction
        - 409 Conflict: name already used in the city
    """
    result = await CreateChapterUseCase(uow).execute(
        actor, request.name, request.state_id, request.city_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{chapter_id}", status_code=status.HTTP_200_OK, response_model=ChapterResponse)
async def get_chapter(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetChapterUseCase(uow).execute(actor, chapter_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{chapter_id}", status_code=status.HTTP_200_OK, response_model=DeleteChapterResponse
)
async def delete_chapter(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteChapterUseCase(uow).execute(actor, chapter_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{chapter_id}/president",
    status_code=status.HTTP_200_OK,
    response_model=AssignPresidentResponse,
)
async def assign_president(
    chapter_id: UUID,
    request: UserIdRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign / Change President

    Raises:
        - 403 Forbidden: caller lacks jurisdiction over the chapter location
        - 404 Not Found: chapter outside scope, or user is not a member
    """
    result = await AssignPresidentUseCase(uow).execute(actor, chapter_id, request.user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{chapter_id}/roles",
    status_code=status.HTTP_200_OK,
    response_model=AssignChapterRoleResponse,
)
async def assign_chapter_role(
    chapter_id: UUID,
    request: AssignChapterRoleRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AssignChapterRoleUseCase(uow).execute(
        actor, chapter_id, request.user_id, request.role
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{chapter_id}/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse
)
async def list_members(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    skip: int = Query(0, ge=0),
    take: int = Query(50, ge=1, le=100),
):
    result = await ListMembersUseCase(uow).execute(actor, chapter_id, skip=skip, take=take)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{chapter_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=AddMemberResponse,
)
async def add_member(
    chapter_id: UUID,
    request: UserIdRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail: IMailDispatcher = Depends(get_mail_dispatcher),
):
    """
    Add Member

    Raises:
        - 403 Forbidden: caller does not manage the chapter
        - 404 Not Found: chapter or user missing
        - 409 Conflict: user already holds a membership
    """
    result = await AddMemberUseCase(uow, mail).execute(actor, chapter_id, request.user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{chapter_id}/members/{membership_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    chapter_id: UUID,
    membership_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: caller does not manage the chapter
        - 404 Not Found: chapter or membership missing
        - 409 Conflict: membership belongs to the sitting president
    """
    result = await RemoveMemberUseCase(uow).execute(actor, chapter_id, membership_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{chapter_id}/requests",
    status_code=status.HTTP_200_OK,
    response_model=List[JoinRequestResponse],
)
async def list_join_requests(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListJoinRequestsUseCase(uow).execute(actor, chapter_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{chapter_id}/requests",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinRequestResponse,
)
async def submit_join_request(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await SubmitJoinRequestUseCase(uow).execute(actor, chapter_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{chapter_id}/meetings",
    status_code=status.HTTP_200_OK,
    response_model=List[MeetingResponse],
)
async def list_meetings(
    chapter_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMeetingsUseCase(uow).execute(actor, chapter_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{chapter_id}/meetings",
    status_code=status.HTTP_201_CREATED,
    response_model=MeetingResponse,
)
async def create_meeting(
    chapter_id: UUID,
    request: CreateMeetingRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail: IMailDispatcher = Depends(get_mail_dispatcher),
):
    result = await CreateMeetingUseCase(uow, mail).execute(
        actor, chapter_id, CreateMeetingCommand(**request.model_dump())
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
