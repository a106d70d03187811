"""Database connection management using SQLAlchemy async.

The engine and session factory live on a ``Database`` object that is
created once at application startup and stored on ``app.state``. Request
handlers receive a session through the ``get_db`` dependency; background
work (notification delivery) opens its own sessions via
``Database.session()``.

Example:
    database = Database(settings.DATABASE_URI)
    await database.create_all()

    async with database.session() as session:
        result = await session.execute(select(Program))
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from src.core.config import settings


class DatabaseError(Exception):
    """Base exception for database setup operations.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying SQLAlchemy or database error.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class Database:
    """Owns the async engine (connection pool) and session factory."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs) -> None:
        self.url = url
        if not url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_size", settings.DB_POOL_SIZE)
            engine_kwargs.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
            engine_kwargs.setdefault("pool_timeout", settings.DB_POOL_TIMEOUT)
            engine_kwargs.setdefault("pool_recycle", 1800)

        try:
            self.engine: AsyncEngine = create_async_engine(
                url,
                echo=echo,
                pool_pre_ping=True,
                **engine_kwargs,
            )
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to initialize database connection", e) from e

        self.sessionmaker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Provide a session that is rolled back on error and always closed."""
        session = self.sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create all tables known to the SQLModel metadata."""
        # Import models so their tables are registered on the metadata
        import src.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def ping(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Get the application's database from app state."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a request-scoped session."""
    async with get_database(request).session() as session:
        yield session
