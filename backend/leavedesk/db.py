from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


class Database:
    """Process-wide datastore handle.

    Created once at application startup, shared by every request through
    ``app.state.db`` and disposed at shutdown.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> Database:
        """Wrap an existing engine (used by tests and scripts)."""
        db = cls.__new__(cls)
        db.url = str(engine.url)
        db.engine = engine
        db.session_factory = async_sessionmaker(engine, expire_on_commit=False)
        return db

    def session(self) -> AsyncSession:
        """Open a new session bound to this handle."""
        return self.session_factory()

    async def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database engine")
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the handle attached to the running application."""
    db: Database = request.app.state.db
    return db


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields an async database session."""
    async with get_database(request).session() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_session)]
