"""
Outbound mail collaborator interface.

Invitations are a best-effort side effect: they are sent after the unit of
work has committed and a failure is logged, never surfaced to the caller.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from pydantic import BaseModel

from chapterhub.domain.entities import Event

logger = logging.getLogger(__name__)


class MeetingDetails(BaseModel):
    event_id: UUID
    title: str
    description: str = ""
    date: datetime
    venue: Optional[str] = None
    entry_fee: int = 0
    chapter_name: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event, chapter_name: Optional[str] = None) -> "MeetingDetails":
        return cls(
            event_id=event.id,
            title=event.title,
            description=event.description or "",
            date=event.date,
            venue=event.location,
            entry_fee=event.entry_fee or 0,
            chapter_name=chapter_name,
        )


class IMailDispatcher(ABC):
    """Mail dispatcher interface - application layer"""

    @abstractmethod
    async def send_invites(self, recipients: List[str], meeting: MeetingDetails) -> None:
        """Send one invitation for a meeting to every recipient"""
        pass


async def dispatch_invites(
    dispatcher: Optional[IMailDispatcher],
    invites: Sequence[tuple],
) -> None:
    """
    Fire the (recipients, meeting) pairs collected by a committed operation.

    Any exception raised by the dispatcher is logged and dropped.
    """
    if dispatcher is None:
        return

    for recipients, meeting in invites:
        if not recipients:
            continue
        try:
            await dispatcher.send_invites(list(recipients), meeting)
        except Exception:
            logger.exception(
                "Failed to send invites for event %s to %d recipient(s)",
                meeting.event_id,
                len(recipients),
            )
