"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to the error hierarchy (core/errors.py)
    - The manager lives on app.state.db; handlers reach it only through get_db

Design Decisions:
    - Manager created and disposed by the FastAPI lifespan, handed to routes via Depends
      (ADR: explicit handle over a module-level singleton)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applied to server databases; SQLite picks its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import (
    ConstraintViolationError, DatabaseError, ErrorContext,
)
from app.db.base import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def translate_db_errors(
    session: AsyncSession, operation: str, contact_id: int | None = None,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise SQLAlchemy failures as ContactsAPIError subclasses."""
    extra = {"operation": operation, "contact_id": contact_id}
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.warning(f"DB integrity error: {e}", extra=extra)
        raise ConstraintViolationError(
            operation, ErrorContext(contact_id=contact_id),
        ) from e
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error: {e}", extra=extra)
        raise DatabaseError(
            "Connection or operational error", operation,
            ErrorContext(contact_id=contact_id),
        ) from e
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error: {e}", extra=extra)
        raise DatabaseError(
            "Database driver error", operation,
            ErrorContext(contact_id=contact_id),
        ) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error: {e}", extra=extra)
        raise DatabaseError(
            "Database operation failed", operation,
            ErrorContext(contact_id=contact_id),
        ) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {}
        if not database_url.startswith("sqlite"):
            engine_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with translate_db_errors(session, "session"):
                yield session
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create any missing tables from the ORM metadata."""
        import app.models  # noqa: F401  (registers every model on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """Return the manager created by the lifespan for this app."""
    manager = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
