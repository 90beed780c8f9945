"""
Verify Event Payment Use Case

Confirms a gateway payment for an event and marks the payer as attending.
"""

import logging
from typing import Optional
from uuid import UUID

from chapterhub.app.errors import invalid, not_found
from chapterhub.app.services.payment import verify_payment_signature
from chapterhub.app.services.unit_of_work import UnitOfWork
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import AttendeeStatus, AuditAction, EventAttendee, PaymentStatus
from chapterhub.libs.result import Error, Result, Return

from .dtos import AttendeeResponse

logger = logging.getLogger(__name__)

PAYMENT_NOT_CONFIGURED = "PAYMENT_NOT_CONFIGURED"


class VerifyPaymentUseCase:
    """
    Business Rules:
    - order_id, payment_id and signature are required
    - Signature is HMAC-SHA256 over "order_id|payment_id" with the shared
      secret, compared in constant time; a mismatch is a validation error
    - A missing secret is a server-side configuration error
    - The actor's attendee row is created or updated to GOING / PAID with
      amount_paid equal to the event's entry fee
    - Audited as PAYMENT_VERIFIED
    """

    def __init__(self, uow: UnitOfWork, payment_secret: Optional[str]):
        self.uow = uow
        self.payment_secret = payment_secret

    async def execute(
        self,
        actor: Actor,
        event_id: UUID,
        order_id: str,
        payment_id: str,
        signature: str,
    ) -> Result[AttendeeResponse]:
        if not order_id or not payment_id or not signature:
            return Return.err(invalid("order_id, payment_id and signature are required"))

        if not self.payment_secret:
            logger.error("Payment secret is not configured")
            return Return.err(Error(PAYMENT_NOT_CONFIGURED, "Payments are not configured"))

        if not verify_payment_signature(self.payment_secret, order_id, payment_id, signature):
            logger.warning("Invalid payment signature for event %s by %s", event_id, actor.user_id)
            return Return.err(invalid("Invalid signature"))

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(not_found("Event not found"))

            attendee = await self.uow.event_attendees.get_by_event_and_user(
                event.id, actor.user_id
            )
            if attendee is None:
                attendee = EventAttendee(event_id=event.id, user_id=actor.user_id)
                attendee.status = AttendeeStatus.GOING
                attendee.payment_status = PaymentStatus.PAID
                attendee.payment_id = payment_id
                attendee.amount_paid = event.entry_fee
                attendee = await self.uow.event_attendees.create(attendee)
            else:
                attendee.status = AttendeeStatus.GOING
                attendee.payment_status = PaymentStatus.PAID
                attendee.payment_id = payment_id
                attendee.amount_paid = event.entry_fee
                attendee = await self.uow.event_attendees.update(attendee)

            await self.uow.audit_logs.record(
                AuditAction.PAYMENT_VERIFIED,
                actor.user_id,
                event.id,
                {"order_id": order_id, "payment_id": payment_id, "amount": event.entry_fee},
            )

            await self.uow.commit()

            return Return.ok(AttendeeResponse.from_entity(attendee))
