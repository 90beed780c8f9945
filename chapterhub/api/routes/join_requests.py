from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.mail_dispatcher import IMailDispatcher
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.chapters import ProcessJoinRequestResponse, ProcessJoinRequestUseCase
from chapterhub.depends import get_current_actor, get_mail_dispatcher, get_unit_of_work
from chapterhub.domain.actor import Actor

router = APIRouter(prefix="/join-requests", tags=["Join Requests"])


class ProcessJoinRequestRequest(BaseModel):
    action: str = Field(..., description="APPROVE or REJECT")


@router.post(
    "/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=ProcessJoinRequestResponse,
)
async def process_join_request(
    request_id: UUID,
    request: ProcessJoinRequestRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail: IMailDispatcher = Depends(get_mail_dispatcher),
):
    """
    Approve / Reject Join Request

    Raises:
        - 400 Bad Request: unknown action
        - 403 Forbidden: caller is not the chapter president
        - 404 Not Found: request missing
        - 409 Conflict: request already processed
    """
    result = await ProcessJoinRequestUseCase(uow, mail).execute(
        actor, request_id, request.action
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
