"""
Async database session management.
One session per request; the content store is read-only from this service.
"""

from collections.abc import AsyncGenerator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bloglist.config import get_settings

settings = get_settings()


def _engine_options(url: str) -> dict[str, Any]:
    """Pool sizing only applies to server databases (SQLite uses a static pool)."""
    opts: dict[str, Any] = {"echo": settings.debug}
    if not url.startswith("sqlite"):
        opts.update(pool_pre_ping=True, pool_size=10, max_overflow=20)
    return opts


engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Rolls back on error, closes on exit."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


DbSession = Annotated[AsyncSession, Depends(get_db)]
