import logging
from collections.abc import AsyncGenerator, Iterator
from contextlib import contextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase

from config.settings import settings
from src.jm_common.errors import PersistenceError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Shared declarative base for the ORM-mapped tables (users)."""

    pass


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields an AsyncSession, auto-closes after request."""
    async with async_session_factory() as session:
        yield session


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as PersistenceError.

    Usage:
        with translate_db_errors("insert_application"):
            result = await db.execute(...)
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Persistence failure during %s: %s", operation, exc)
        raise PersistenceError(operation, type(exc).__name__) from exc
