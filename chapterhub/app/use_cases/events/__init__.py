from .delete_event_use_case import DeleteEventUseCase
from .dtos import (
    AttendeeResponse,
    DeleteEventResponse,
    EventAttendeeDetail,
    EventDetailResponse,
    RemoveAttendeeResponse,
)
from .get_event_use_case import GetEventUseCase
from .remove_attendee_use_case import RemoveAttendeeUseCase
from .verify_payment_use_case import PAYMENT_NOT_CONFIGURED, VerifyPaymentUseCase

__all__ = [
    "PAYMENT_NOT_CONFIGURED",
    "AttendeeResponse",
    "DeleteEventResponse",
    "DeleteEventUseCase",
    "EventAttendeeDetail",
    "EventDetailResponse",
    "GetEventUseCase",
    "RemoveAttendeeResponse",
    "RemoveAttendeeUseCase",
    "VerifyPaymentUseCase",
]
