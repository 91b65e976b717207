"""Database Session Manager — async engine, request sessions and the readiness probe.

Invariants:
    - A session that exits with an exception is rolled back, so no partial ledger
      operation is ever committed
    - ElearnError passes through untouched after the rollback (the runner already
      logged it with account/operation context)
    - Every SQLAlchemy failure surfaces as DatabaseError with the phase it failed in

Design Decisions:
    - Singleton db_manager set by the FastAPI lifespan (ADR: no global import side effects)
    - expire_on_commit=False: records are converted to core dataclasses after commit
    - Pool sizing only for server databases; SQLite keeps its default pool
    - Exception-to-phase table over one except clause per type: most specific first
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from elearn.core.errors import DatabaseError, ElearnError

logger = logging.getLogger(__name__)

# (exception type, message, failed phase), most specific first
_FAILURE_PHASES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Ledger constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, phase in _FAILURE_PHASES:
        if isinstance(exc, exc_type):
            return DatabaseError(message, phase)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except ElearnError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            error = to_database_error(e)
            logger.error(
                f"Ledger session failed during {error.operation}: {e}",
                extra={"error_code": int(error.code), "reason": error.reason},
            )
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when the database answers a trivial query."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
