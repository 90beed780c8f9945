from typing import List, Optional
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.api.utils.jwt import create_access_token
from chapterhub.app.services.mail_dispatcher import IMailDispatcher, MeetingDetails
from chapterhub.domain.actor import Actor
from chapterhub.domain.entities import Role

PAYMENT_SECRET = "integration-payment-secret"
TEST_DB_URI = "sqlite+aiosqlite:///./test.db"


class RecordingMailDispatcher(IMailDispatcher):
    def __init__(self):
        self.sent = []

    async def send_invites(self, recipients: List[str], meeting: MeetingDetails) -> None:
        self.sent.append((list(recipients), meeting))


def auth_headers(
    user_id: UUID,
    role: Role,
    state_id: Optional[UUID] = None,
    city_id: Optional[UUID] = None,
) -> dict:
    token = create_access_token(
        Actor(user_id=user_id, role=role, state_id=state_id, city_id=city_id)
    )
    return {"Authorization": f"Bearer {token}"}


async def reload(session: AsyncSession, model, entity_id):
    """Fetch a row fresh from the database, bypassing stale identity-map state"""
    return await session.get(model, entity_id, populate_existing=True)
