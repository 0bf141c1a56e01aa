"""Database connection and session management."""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from storefront.db.models import Base
from storefront.services.errors import InfrastructureError

logger = logging.getLogger(__name__)


def async_database_url(database_url: str) -> str:
    """Convert postgresql:// and sqlite:// URLs to their async drivers."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def create_engine(database_url: str) -> AsyncEngine:
    """Create the async engine for a database URL."""
    url = async_database_url(database_url)
    kwargs = {}
    if ":memory:" in url:
        # One shared connection, or each checkout sees an empty database
        kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return create_async_engine(url, echo=False, future=True, **kwargs)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@asynccontextmanager
async def store_errors(
    operation: str, session: Optional[AsyncSession] = None
) -> AsyncIterator[None]:
    """Translate SQLAlchemy failures into InfrastructureError.

    When a session is given it is rolled back first, so the same handle is
    usable again once the backing store recovers.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Backing store error during {operation}: {type(e).__name__}: {e}")
        if session is not None:
            try:
                await session.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning(f"Rollback after {operation} failed: {rollback_error}")
        raise InfrastructureError(f"Backing store unavailable during {operation}") from e


async def init_db(engine: AsyncEngine) -> None:
    """Initialize database tables."""
    async with store_errors("init_db"):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


async def ping_db(engine: AsyncEngine) -> None:
    """Round-trip a trivial query to the backing store."""
    async with store_errors("ping"):
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency for getting database session."""
    async with request.app.state.sessionmaker() as session:
        try:
            yield session
        finally:
            await session.close()
