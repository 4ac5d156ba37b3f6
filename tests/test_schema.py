"""
ClassHub Backend - Schema Initializer Tests
============================================
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from classhub.config import settings
from classhub.database import build_engine
from classhub.schema import TABLE_NAMES, _managed_tables, init_schema


async def _table_names(engine):
    async with engine.connect() as conn:
        return await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())


class TestInitSchema:

    @pytest.mark.asyncio
    async def test_creates_all_tables(self, db_engine):
        assert set(await _table_names(db_engine)) == set(TABLE_NAMES)

    @pytest.mark.asyncio
    async def test_is_idempotent(self, db_engine):
        assert await init_schema(db_engine) == []
        assert await init_schema(db_engine) == []

    @pytest.mark.asyncio
    async def test_users_keep_full_name_column(self, db_engine):
        async with db_engine.connect() as conn:
            columns = await conn.run_sync(
                lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns("users")]
            )
        assert "fullName" in columns

    @pytest.mark.asyncio
    async def test_one_failing_table_does_not_block_the_rest(self, tmp_path):
        engine = build_engine(settings, url=f"sqlite+aiosqlite:///{tmp_path / 'partial.db'}")

        broken = MagicMock()
        broken.name = "broken"
        broken.create.side_effect = OperationalError("CREATE TABLE broken", {}, Exception("boom"))
        tables = _managed_tables()
        tables.insert(1, broken)

        try:
            with patch("classhub.schema._managed_tables", return_value=tables):
                failed = await init_schema(engine)

            assert failed == ["broken"]
            assert set(await _table_names(engine)) == set(TABLE_NAMES)
        finally:
            await engine.dispose()
