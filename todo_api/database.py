import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """One engine and session factory, shared by every request of the process."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.engine = create_async_engine(url, future=True, pool_pre_ping=True)
        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def dispose(self) -> None:
        await self.engine.dispose()


async def init_models(database: Database, *, fail_fast: bool = False) -> bool:
    """
    Create the todos table if it is missing.

    A failure is logged and reported as False so the listener still comes up;
    every request then fails with a store error. With fail_fast the error is
    re-raised and startup aborts.
    """
    try:
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError):
        logger.exception("Database connection or initialization failed: %s", database.url)
        if fail_fast:
            raise
        return False

    logger.info("Todo table checked/created: %s", database.url)
    return True


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.db.session() as session:
        yield session
