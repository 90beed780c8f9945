import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.adapter.database import build_engine
from chapterhub.adapter.services.mail_dispatcher import HttpMailDispatcher
from chapterhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from chapterhub.api.error import ClientError
from chapterhub.api.utils.jwt import verify_jwt
from chapterhub.app.errors import unauthenticated
from chapterhub.app.services.mail_dispatcher import IMailDispatcher
from chapterhub.domain.actor import Actor
from config import ApplicationConfig

logger = logging.getLogger(__name__)

engine = build_engine(ApplicationConfig.DB_URI)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mail_dispatcher() -> IMailDispatcher:
    return HttpMailDispatcher(
        api_url=ApplicationConfig.MAIL_API_URL,
        api_key=ApplicationConfig.MAIL_API_KEY,
        sender_email=ApplicationConfig.MAIL_SENDER_EMAIL,
        sender_name=ApplicationConfig.MAIL_SENDER_NAME,
        app_url=ApplicationConfig.APP_URL,
        timeout=ApplicationConfig.MAIL_TIMEOUT_SECONDS,
    )


def get_payment_secret() -> Optional[str]:
    return ApplicationConfig.PAYMENT_KEY_SECRET or None


async def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Actor:
    """
    Dependency turning the Bearer token into an Actor descriptor.

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, invalid,
            expired or lacks a usable user_id
    """
    if credentials is None:
        raise ClientError(unauthenticated(), status_code=401)

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise ClientError(unauthenticated("Invalid or expired token"), status_code=401)

    try:
        return Actor.from_claims(payload)
    except (KeyError, ValueError, TypeError):
        logger.warning("Rejected token with malformed claims")
        raise ClientError(unauthenticated("Invalid token claims"), status_code=401)
