from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from chapterhub.adapter.database import build_engine
from chapterhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from chapterhub.depends import get_mail_dispatcher, get_payment_secret, get_unit_of_work
from chapterhub.domain.entities import City, Role, State, User
from tests.integration.helpers import PAYMENT_SECRET, TEST_DB_URI, RecordingMailDispatcher


@dataclass
class Seed:
    state_id: UUID
    city_id: UUID
    other_state_id: UUID
    other_city_id: UUID


@pytest_asyncio.fixture
async def engine():
    engine = build_engine(TEST_DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Opens independent sessions, each on its own connection"""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return RecordingMailDispatcher()


@pytest_asyncio.fixture
async def client(db_session, mailer):
    from chapterhub.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mail_dispatcher] = lambda: mailer
    app.dependency_overrides[get_payment_secret] = lambda: PAYMENT_SECRET

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seed(db_session):
    """Two states with one city each"""
    texas = State(name="Texas", code="TX")
    ohio = State(name="Ohio", code="OH")
    db_session.add_all([texas, ohio])
    await db_session.flush()
    austin = City(name="Austin", state_id=texas.id)
    dayton = City(name="Dayton", state_id=ohio.id)
    db_session.add_all([austin, dayton])
    await db_session.commit()
    return Seed(
        state_id=texas.id,
        city_id=austin.id,
        other_state_id=ohio.id,
        other_city_id=dayton.id,
    )


@pytest.fixture
def make_user(db_session):
    async def _make_user(
        email: str,
        role: Role = Role.USER,
        state_id: Optional[UUID] = None,
        city_id: Optional[UUID] = None,
    ) -> UUID:
        user = User(email=email, role=role, state_id=state_id, city_id=city_id)
        db_session.add(user)
        await db_session.commit()
        return user.id

    return _make_user
