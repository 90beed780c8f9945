from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from chapterhub.api.error import raise_for_error
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.app.use_cases.events import (
    AttendeeResponse,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventDetailResponse,
    GetEventUseCase,
    RemoveAttendeeResponse,
    RemoveAttendeeUseCase,
    VerifyPaymentUseCase,
)
from chapterhub.depends import get_current_actor, get_payment_secret, get_unit_of_work
from chapterhub.domain.actor import Actor

router = APIRouter(prefix="/events", tags=["Events"])


@router.get(
    "/{event_id}",
    status_code=status.HTTP_200_OK,
    response_model=EventDetailResponse,
)
async def get_event(
    event_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Event Detail

    Raises:
        - 404 Not Found: event missing or not visible to the caller
    """
    result = await GetEventUseCase(uow).execute(actor, event_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteEventResponse,
)
async def delete_event(
    event_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteEventUseCase(uow).execute(actor, event_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class VerifyPaymentRequest(BaseModel):
    order_id: str
    payment_id: str
    signature: str


@router.post(
    "/{event_id}/verify-payment",
    status_code=status.HTTP_200_OK,
    response_model=AttendeeResponse,
)
async def verify_payment(
    event_id: UUID,
    request: VerifyPaymentRequest,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    payment_secret: str = Depends(get_payment_secret),
):
    """
    Verify Event Payment

    Raises:
        - 400 Bad Request: signature mismatch
        - 404 Not Found: event missing
        - 500 Internal Server Error: payments not configured
    """
    result = await VerifyPaymentUseCase(uow, payment_secret).execute(
        actor, event_id, request.order_id, request.payment_id, request.signature
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{event_id}/attendees/{attendee_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveAttendeeResponse,
)
async def remove_attendee(
    event_id: UUID,
    attendee_id: UUID,
    actor: Actor = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveAttendeeUseCase(uow).execute(actor, event_id, attendee_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
