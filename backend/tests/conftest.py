from __future__ import annotations

import os
import uuid
from functools import cache
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import col

from leavedesk.db import Database
from leavedesk.main import app
from leavedesk.models import SQLModel
from leavedesk.models.account import Account
from leavedesk.models.enums import Gender, Role
from leavedesk.models.notification import Notification
from leavedesk.schemas.auth import AuthenticatedCaller
from leavedesk.security import create_access_token, hash_password
from leavedesk.services.document import (
    InMemoryDocumentGenerator,
    ReportLabDocumentGenerator,
    set_document_generator,
)
from leavedesk.services.mailer import InMemoryMailer, set_mailer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
    from sqlmodel import SQLModel as SQLModelType

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")
DEFAULT_PASSWORD = "correct-horse-battery"


@cache
def _default_password_hash() -> str:
    return hash_password(DEFAULT_PASSWORD)


def is_sqlite() -> bool:
    return TEST_DATABASE_URL.startswith("sqlite")


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh schema per test. In-memory SQLite unless TEST_DATABASE_URL says otherwise."""
    kwargs: dict[str, Any] = {}
    if is_sqlite():
        kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    _engine = create_async_engine(TEST_DATABASE_URL, **kwargs)
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield _engine
    async with _engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await _engine.dispose()


@pytest.fixture
def database(engine: AsyncEngine) -> Database:
    return Database.from_engine(engine)


@pytest.fixture
async def db_session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


@pytest.fixture
async def async_client(database: Database) -> AsyncIterator[AsyncClient]:
    """Async HTTP client whose app uses the test database handle."""
    app.state.db = database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.state.db


@pytest.fixture
def mailer() -> Iterator[InMemoryMailer]:
    stub = InMemoryMailer()
    set_mailer(stub)
    yield stub
    set_mailer(None)


@pytest.fixture
def documents() -> Iterator[InMemoryDocumentGenerator]:
    stub = InMemoryDocumentGenerator()
    set_document_generator(stub)
    yield stub
    set_document_generator(ReportLabDocumentGenerator())


@pytest.fixture(autouse=True)
def _stub_collaborators(mailer: InMemoryMailer, documents: InMemoryDocumentGenerator) -> None:
    """No test talks to SMTP or renders real PDFs unless it asks for it."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def make_account(
    database: Database,
    *,
    name: str = "Test User",
    email: str | None = None,
    role: Role = Role.EMPLOYEE,
    gender: Gender = Gender.FEMALE,
    is_active: bool = True,
    **fields: Any,
) -> Account:
    """Insert an account directly and return it detached."""
    account = Account(
        email=email or f"{uuid.uuid4().hex[:10]}@example.com",
        name=name,
        role=role.value,
        gender=gender.value,
        is_active=is_active,
        hashed_password=_default_password_hash(),
        **fields,
    )
    async with database.session() as session:
        session.add(account)
        await session.commit()
    return account


async def fetch(database: Database, model: type[SQLModelType], ident: uuid.UUID) -> Any:
    """Read a row through a fresh session so nothing comes from an identity map."""
    async with database.session() as session:
        return await session.get(model, ident)


def caller_for(account: Account) -> AuthenticatedCaller:
    return AuthenticatedCaller(account_id=account.id, role=Role(account.role))


def auth_headers(account: Account) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(account.id, account.role)}"}


async def notifications_for(database: Database, user_id: uuid.UUID) -> list[Notification]:
    async with database.session() as session:
        result = await session.execute(select(Notification).where(col(Notification.user_id) == user_id))
        return list(result.scalars().all())
