"""
Alembic Migration Environment
===============================

What:  Configures Alembic to run against the async ClassHub engine.
How:   Reads the store URL from classhub.config (DB_* variables or
       DATABASE_URL) and runs the migration steps inside
       `connection.run_sync()` on an async connection.
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision).

The application also creates missing tables on startup (classhub.schema).
The baseline revision skips tables that already exist, so `alembic upgrade
head` on a store the app has run against only records the revision.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from classhub.config import settings
from classhub.database import Base, build_ssl_context

# Registers every table on Base.metadata for --autogenerate
from classhub import models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# ConfigParser treats % as interpolation; escape it in passwords
config.set_main_option(
    "sqlalchemy.url",
    settings.sqlalchemy_url.render_as_string(hide_password=False).replace("%", "%%"),
)


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Emits SQL to stdout without connecting, for review before applying.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """
    Run migrations in 'online' mode with an async engine.

    TLS settings mirror the application engine (DB_SSL / DB_SSL_VERIFY).
    """
    connect_args = {}
    if settings.db_ssl and settings.sqlalchemy_url.get_backend_name() != "sqlite":
        connect_args["ssl"] = build_ssl_context(settings.db_ssl_verify)

    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        connect_args=connect_args,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
