"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, the session factory repositories
are bound to, and session generators for FastAPI dependencies and scripts.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from dolphin.core.config import settings
from dolphin.models.base import Base


def get_async_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create and configure an async SQLAlchemy engine.

    For SQLite:
    - In-memory databases use StaticPool so every session shares one connection
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement for every new connection

    Args:
        database_url: Connection URL, defaults to settings.database_url

    Returns:
        Configured AsyncEngine instance
    """
    url = database_url or settings.database_url
    is_sqlite = url.startswith("sqlite")

    # SQLite-specific connection arguments (noop for other drivers)
    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": settings.database_echo,
        "connect_args": connect_args,
    }

    if is_sqlite and ":memory:" in url:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory for the given engine.

    Objects are not expired on commit, so entities returned by a
    repository stay readable after the commit that persisted them.
    """
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Global async engine instance
# Created once at import and reused
engine = get_async_engine()


# Async session factory
# Use this to create new sessions
async_session_maker = get_session_maker(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Create all tables registered on the declarative base.

    Migrations are out of scope; this is meant for tests, scripts and
    local development.

    Args:
        bind: Engine to use, defaults to the global engine
    """
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Dispose of the engine and close all pooled connections.

    Should be called at application shutdown.
    """
    await (bind or engine).dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.

    Provides a database session for FastAPI route handlers.
    Automatically handles session lifecycle (commit/rollback/close).

    Yields:
        AsyncSession instance for database operations

    Example:
        @app.get("/foos")
        async def list_foos(db: AsyncSession = Depends(get_db)):
            return await FooRepository(db).retrieve_all()

    Note:
        - Session is automatically closed after request
        - Exceptions trigger automatic rollback
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Alternative session generator for use outside FastAPI dependencies.

    Repositories commit their own writes, so no commit is issued here.

    Yields:
        AsyncSession instance for database operations

    Example:
        async for session in get_session():
            foos = await FooRepository(session).retrieve_all()
    """
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
