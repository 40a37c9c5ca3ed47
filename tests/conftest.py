"""Shared fixtures across tests: PostgreSQL via asyncpg."""

import os

import asyncpg
import pytest
import pytest_asyncio

from app.services.database import ALL_TABLES

# Use TEST_DATABASE_URL or fall back to DATABASE_URL
_TEST_DSN = os.getenv("TEST_DATABASE_URL") or os.getenv("DATABASE_URL", "")


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def db():
    """PostgreSQL connection with tables, rolled back after each test."""
    if not _TEST_DSN:
        pytest.skip("No TEST_DATABASE_URL or DATABASE_URL set, skipping DB tests")

    conn = await asyncpg.connect(_TEST_DSN)

    # Start a transaction that we'll roll back at the end
    tr = conn.transaction()
    await tr.start()

    for ddl in ALL_TABLES:
        await conn.execute(ddl)

    yield conn

    # Roll back everything, clean slate for next test
    await tr.rollback()
    await conn.close()
