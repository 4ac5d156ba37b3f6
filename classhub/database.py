"""
ClassHub Backend - Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates one async engine per process and hands every request its own
       AsyncSession through `get_db_session`.
Who:   Route handlers receive the session via FastAPI's dependency injection
       and pass it to a service. Tests override `get_db_session` to point at
       a throwaway SQLite database.

Connection Pooling:
    MySQL/PostgreSQL use a queue pool sized by DB_POOL_SIZE / DB_MAX_OVERFLOW
    with pre-ping and hourly recycling. SQLite gets SQLAlchemy's defaults,
    since its pools do not accept sizing arguments.

TLS:
    When DB_SSL is on, an ssl.SSLContext is passed to the driver. With
    DB_SSL_VERIFY off, hostname checks and certificate verification are
    disabled on that context.
"""

import ssl
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from classhub.config import Settings, settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which the schema
    initializer and Alembic both read.
    """
    pass


def build_ssl_context(verify: bool) -> ssl.SSLContext:
    """SSL context for the store connection; verification is optional."""
    context = ssl.create_default_context()
    if not verify:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def build_engine(config: Settings, url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for `config` (or an explicit `url`).

    What:    Single construction point for engines, shared by the app,
             Alembic and tests.
    Returns: A lazily-connecting AsyncEngine; no I/O happens here.
    """
    target = make_url(url) if url else config.sqlalchemy_url
    kwargs: Dict[str, Any] = {"echo": config.log_level == "DEBUG"}

    if target.get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_pre_ping=config.db_pool_pre_ping,
            pool_recycle=3600,
        )
        if config.db_ssl:
            kwargs["connect_args"] = {"ssl": build_ssl_context(config.db_ssl_verify)}

    return create_async_engine(target, **kwargs)


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings)

# expire_on_commit=False: services read attributes (e.g. generated ids)
# after committing.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler, which hands it to a service
        3. On success: commits (a no-op when the service already committed)
        4. On error: rolls back and re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/api/users")
        async def list_users(db: AsyncSession = Depends(get_db_session)):
            return await user_service.list_users(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan on shutdown."""
    await engine.dispose()
