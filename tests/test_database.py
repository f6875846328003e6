"""
Tests for the Database persistence client
"""

import pytest
from sqlalchemy import text


@pytest.mark.integration
@pytest.mark.asyncio
async def test_sqlite_connections_enforce_foreign_keys(database):
    async with database.session() as session:
        enabled = await session.scalar(text("PRAGMA foreign_keys"))

    assert enabled == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_engine_hides_bound_parameters(database):
    assert database.engine.sync_engine.hide_parameters is True


@pytest.mark.integration
@pytest.mark.asyncio
async def test_ping(database):
    assert await database.ping() == (True, None)
