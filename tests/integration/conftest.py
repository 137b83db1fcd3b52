"""Database fixtures for integration tests.

Repository tests run against a real PostgreSQL database named by
TEST_DATABASE_URL (postgresql+asyncpg://...). Without it they are skipped.
Tables are created fresh for each test and dropped afterwards.
"""

import os

import pytest
import pytest_asyncio

from src.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def test_database():
    """Fresh schema on the test database, dropped after the test."""
    database_url = os.environ.get("TEST_DATABASE_URL")
    if not database_url:
        pytest.skip("TEST_DATABASE_URL not set")

    database = Database(database_url, pool_size=5)
    await database.drop_all()
    await database.create_all()
    try:
        yield database
    finally:
        await database.drop_all()
        await database.close()
