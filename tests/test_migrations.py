"""
ClassHub Backend - Alembic Baseline Tests
==========================================

What we test:
    ✅ Upgrading a fresh store creates all seven tables
    ✅ Upgrading a store the app already initialized succeeds, keeps its
       rows and records the revision
    ✅ chat.created_at is a TIMESTAMP column, whichever path created it

These are plain (sync) tests: Alembic's env runs its own event loop.
"""

import asyncio
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import TIMESTAMP, inspect, text

from classhub.config import settings
from classhub.database import build_engine
from classhub.schema import TABLE_NAMES, init_schema

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def store_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'migrate.db'}"
    monkeypatch.setattr(settings, "database_url", url)
    return url


def alembic_config() -> Config:
    # No ini file: keeps alembic from reconfiguring the test run's logging
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    return config


async def _startup_schema_with_user(url):
    engine = build_engine(settings, url=url)
    try:
        await init_schema(engine)
        async with engine.begin() as conn:
            await conn.execute(
                text('INSERT INTO users (username, password, "fullName") VALUES (:u, :p, :f)'),
                {"u": "ana", "p": "pw", "f": "Ana Lopez"},
            )
    finally:
        await engine.dispose()


async def _describe(url):
    engine = build_engine(settings, url=url)
    try:
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
            chat_types = await conn.run_sync(
                lambda c: {col["name"]: col["type"] for col in inspect(c).get_columns("chat")}
            )
            version = (await conn.execute(text("SELECT version_num FROM alembic_version"))).scalar_one()
            users = (await conn.execute(text("SELECT COUNT(*) FROM users"))).scalar_one()
    finally:
        await engine.dispose()
    return set(tables), chat_types, version, users


class TestBaselineRevision:

    def test_upgrade_fresh_store(self, store_url):
        command.upgrade(alembic_config(), "head")

        tables, chat_types, version, users = asyncio.run(_describe(store_url))

        assert set(TABLE_NAMES) <= tables
        assert version == "001"
        assert users == 0
        assert isinstance(chat_types["created_at"], TIMESTAMP)

    def test_upgrade_after_startup_initialization(self, store_url):
        asyncio.run(_startup_schema_with_user(store_url))

        command.upgrade(alembic_config(), "head")

        tables, chat_types, version, users = asyncio.run(_describe(store_url))

        assert set(TABLE_NAMES) <= tables
        assert version == "001"
        assert users == 1
        assert isinstance(chat_types["created_at"], TIMESTAMP)
