# taskhub/adapters/persistence/database.py

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskhub.adapters.persistence.models import Base
from taskhub.shared.config import Settings, settings as default_settings

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _is_memory_database(database_url: str) -> bool:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return False
    return url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"


def _pool_options(settings: Settings) -> Dict[str, Any]:
    """
    Bounded pool: DB_MIN_CONNECTIONS stay open, up to DB_MAX_CONNECTIONS in
    total, and waiting longer than the acquire timeout raises
    sqlalchemy.exc.TimeoutError (reported as InfrastructureError).
    """
    if _is_memory_database(settings.DATABASE_URL):
        # In-memory SQLite runs on a single shared connection (StaticPool).
        return {}

    # pool_size=0 would mean "unbounded" to QueuePool.
    pool_size = max(settings.DB_MIN_CONNECTIONS, 1)
    return {
        "pool_size": pool_size,
        "max_overflow": settings.DB_MAX_CONNECTIONS - pool_size,
        "pool_timeout": settings.db_acquire_timeout.total_seconds(),
        "pool_recycle": int(settings.db_idle_timeout.total_seconds()),
        "pool_pre_ping": True,
    }


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES ... ON DELETE CASCADE unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Builds the process-wide async engine from configuration."""
    settings = settings or default_settings

    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        **_pool_options(settings),
    )

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("database_engine_created", dialect=engine.dialect.name)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory used by the repositories; one session per repository call.

    ``expire_on_commit=False`` keeps loaded rows readable after the
    transaction closes, so records can be mapped to aggregates afterwards.
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
        class_=AsyncSession,
    )


# ---------------------------------------------------------------------------
# Schema / health helpers
# ---------------------------------------------------------------------------


async def create_schema(engine: AsyncEngine) -> None:
    """Creates the ``users`` and ``tasks`` tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_schema_ready")


async def ping(engine: AsyncEngine) -> bool:
    """
    Returns True if a connection can be acquired and used.
    Never raises; the failure is logged.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("database_ping_failed", error=str(e))
        return False


__all__ = ["create_engine", "create_session_factory", "create_schema", "ping"]
