# stock_tracker/core/db.py

import ssl
from typing import Any, AsyncGenerator, Dict, Tuple

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from stock_tracker.core.config import (
    APP_ENV,
    DATABASE_URL,
    DB_ECHO_POOL,
    DB_MAX_OVERFLOW,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_SSL_VERIFY,
    DB_TYPE,
)

Base = declarative_base()


# =====================================================
# ENGINE OPTIONS
# =====================================================
def _postgres_options() -> Tuple[Dict[str, Any], Dict[str, Any]]:
    ssl_ctx = ssl.create_default_context()
    if not DB_SSL_VERIFY:
        ssl_ctx.check_hostname = False
        ssl_ctx.verify_mode = ssl.CERT_NONE

    connect_args = {
        "ssl": ssl_ctx,
        # asyncpg behind pgbouncer cannot use prepared statements
        "statement_cache_size": 0,
        "prepared_statement_cache_size": 0,
    }
    pool_args = {
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
        "pool_timeout": DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }
    return connect_args, pool_args


def _engine_options() -> Tuple[Dict[str, Any], Dict[str, Any]]:
    if DB_TYPE == "postgres":
        return _postgres_options()
    # aiosqlite runs the connection in a worker thread
    return {"check_same_thread": False}, {}


connect_args, pool_args = _engine_options()

engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    echo_pool=DB_ECHO_POOL,
    connect_args=connect_args,
    **pool_args,
)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


# =====================================================
# DEPENDENCY
# =====================================================
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; services commit explicitly."""
    async with AsyncSessionLocal() as session:
        yield session


# tables must be registered on Base.metadata before create_all
import stock_tracker.models  # noqa: E402,F401


async def init_models():
    """Create missing tables. Development only; other environments use migrations."""
    if APP_ENV != "development":
        raise RuntimeError("init_models() is only allowed in development")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
