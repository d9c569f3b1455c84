"""
Integration tests for database adapters.

These tests verify that:
1. Adapters are chosen by database URL
2. The SQLite adapter creates the schema and enforces foreign keys
3. The factory keeps a single adapter until it is closed
"""

import pytest
from sqlalchemy import text

from passenger_service.adapters.database.factory import DatabaseAdapterFactory, create_adapter
from passenger_service.adapters.database.postgres import PostgresAdapter
from passenger_service.adapters.database.sqlite import SQLiteAdapter


def test_create_adapter_by_url():
    assert isinstance(create_adapter("sqlite+aiosqlite://"), SQLiteAdapter)
    assert isinstance(create_adapter("postgresql+asyncpg://u@h/db"), PostgresAdapter)
    with pytest.raises(ValueError):
        create_adapter("mysql://u@h/db")


def test_session_before_init_fails():
    with pytest.raises(RuntimeError):
        SQLiteAdapter().get_session()


@pytest.mark.asyncio
async def test_sqlite_adapter_creates_schema(adapter):
    async with adapter.get_session() as session:
        result = await session.execute(
            text("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        )
        tables = [row[0] for row in result]

    assert tables == ["notifications", "passengers"]


@pytest.mark.asyncio
async def test_sqlite_adapter_enforces_foreign_keys(adapter):
    async with adapter.get_session() as session:
        result = await session.execute(text("PRAGMA foreign_keys"))
        assert result.scalar() == 1


@pytest.mark.asyncio
async def test_factory_returns_single_adapter():
    try:
        first = await DatabaseAdapterFactory.get_adapter("sqlite+aiosqlite://")
        second = await DatabaseAdapterFactory.get_adapter()
        assert first is second
    finally:
        await DatabaseAdapterFactory.close_adapter()

    assert DatabaseAdapterFactory._instance is None
