"""Async SQLAlchemy database setup for ProjectGate.

Exports:
  async_engine      -- the shared AsyncEngine instance
  AsyncSessionLocal -- sessionmaker bound to async_engine
  get_db            -- FastAPI dependency yielding an AsyncSession
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from projectgate.config import settings

async_engine: AsyncEngine = create_async_engine(
    settings.DB_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
)

AsyncSessionLocal: sessionmaker[AsyncSession] = sessionmaker(  # type: ignore[type-arg]
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an async database session.

    Commits when the request handler returns. Rolls back the active
    transaction on any unhandled exception, then re-raises so the global
    error handler can produce a response.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
