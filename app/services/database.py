"""PostgreSQL schema and async connection management via asyncpg."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg

from app.config import DATABASE_URL, DB_POOL_MAX_SIZE, DB_POOL_MIN_SIZE

logger = logging.getLogger(__name__)

__all__ = [
    "DATABASE_URL", "init_pool", "close_pool", "create_tables", "get_db", "ALL_TABLES",
    "_CREATE_PROFILES", "_CREATE_DIARY_ENTRIES", "_CREATE_STRATEGIES", "_CREATE_SAVED_STRATEGIES",
]

_CREATE_PROFILES = """
CREATE TABLE IF NOT EXISTS profiles (
    id               UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id          UUID        NOT NULL,
    parent_name      TEXT        NOT NULL,
    child_name       TEXT        NOT NULL,
    child_birthdate  DATE        NOT NULL,
    child_gender     TEXT,
    child_photo_url  TEXT,
    main_challenge   TEXT,
    created_at       TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

_CREATE_DIARY_ENTRIES = """
CREATE TABLE IF NOT EXISTS diary_entries (
    id           UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
    profile_id   UUID        NOT NULL REFERENCES profiles(id),
    title        TEXT        NOT NULL,
    description  TEXT        NOT NULL,
    photo_url    TEXT,
    emotion      TEXT        NOT NULL
                 CHECK(emotion IN ('happy', 'difficult', 'proud', 'frustrated', 'celebration')),
    entry_date   DATE        NOT NULL DEFAULT CURRENT_DATE,
    created_at   TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

_CREATE_STRATEGIES = """
CREATE TABLE IF NOT EXISTS strategies (
    id               UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
    creator_id       UUID        NOT NULL,
    title            TEXT        NOT NULL,
    category         TEXT        NOT NULL
                     CHECK(category IN ('meltdown', 'sleep', 'eating', 'listening', 'discipline')),
    age_min          INTEGER     NOT NULL DEFAULT 0 CHECK(age_min >= 0),
    age_max          INTEGER     NOT NULL DEFAULT 144,
    strategy_text    TEXT        NOT NULL,
    script_text      TEXT,
    audio_url        TEXT,
    is_weekly_boost  BOOLEAN     NOT NULL DEFAULT FALSE,
    published        BOOLEAN     NOT NULL DEFAULT FALSE,
    created_at       TIMESTAMPTZ NOT NULL DEFAULT now(),
    CHECK(age_min <= age_max)
)
"""

_CREATE_SAVED_STRATEGIES = """
CREATE TABLE IF NOT EXISTS saved_strategies (
    id           UUID        PRIMARY KEY DEFAULT gen_random_uuid(),
    profile_id   UUID        NOT NULL REFERENCES profiles(id),
    strategy_id  UUID        NOT NULL REFERENCES strategies(id) ON DELETE CASCADE,
    worked       BOOLEAN     NOT NULL DEFAULT FALSE,
    created_at   TIMESTAMPTZ NOT NULL DEFAULT now(),
    UNIQUE (profile_id, strategy_id)
)
"""

# Creation order respects foreign keys
ALL_TABLES = [
    _CREATE_PROFILES,
    _CREATE_DIARY_ENTRIES,
    _CREATE_STRATEGIES,
    _CREATE_SAVED_STRATEGIES,
]

_pool: Optional[asyncpg.Pool] = None


async def init_pool(dsn: str = DATABASE_URL) -> asyncpg.Pool:
    """Open the shared connection pool."""
    global _pool
    if not dsn:
        raise RuntimeError("DATABASE_URL is not set")
    _pool = await asyncpg.create_pool(dsn, min_size=DB_POOL_MIN_SIZE, max_size=DB_POOL_MAX_SIZE)
    return _pool


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


async def create_tables() -> None:
    """Create all application tables if they don't exist."""
    async with get_db() as conn:
        for ddl in ALL_TABLES:
            await conn.execute(ddl)
    logger.debug("Schema ensured (%d tables)", len(ALL_TABLES))


@asynccontextmanager
async def get_db() -> AsyncGenerator[asyncpg.Connection, None]:
    """Context manager that borrows a connection from the pool."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized: call init_pool() first")
    async with _pool.acquire() as conn:
        yield conn
