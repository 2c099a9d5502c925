"""
Database connection and session management.
Uses SQLAlchemy 2.0 async pattern.
"""

from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from src.config import get_settings

settings = get_settings()


def _engine_options(database_url: str, echo: bool) -> Dict[str, Any]:
    """Pool options per backend: NullPool for SQLite, a small pool for PostgreSQL."""
    if database_url.startswith("sqlite"):
        return {
            "echo": echo,
            "connect_args": {"check_same_thread": False},
            "poolclass": NullPool,
        }
    return {
        "echo": echo,
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    }


def create_engine_for(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine, enabling foreign keys and WAL on SQLite connections."""
    new_engine = create_async_engine(database_url, **_engine_options(database_url, echo))

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.close()

    return new_engine


engine = create_engine_for(settings.database_url, echo=settings.debug)

# Session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def init_db() -> None:
    """Initialize database tables."""
    # Importing the models package registers every table on Base.metadata
    from src.kernel.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
