"""
ClassHub Backend - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn classhub.main:app`) or the `classhub` console script.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                   FastAPI App                        │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌──────┐      │
    │  │ Req ID   │→│ Access Log  │→│ GZip │→│ CORS │      │
    │  └──────────┘ └─────────────┘ └──────┘ └──────┘      │
    │                                                      │
    │  Routes:                                             │
    │  /register /login   /api/users   /api/tasks          │
    │  /api/chat   /api/{homework,news,events,feedback}    │
    │  /danger/clear-database   /health                    │
    │                                                      │
    │  Exception Handlers:                                 │
    │  Validation→400 │ Auth→401 │ Forbidden→403 │ DB→500  │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config validation → schema initialization
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from classhub import __version__, database
from classhub.config import settings
from classhub.exceptions import (
    AuthenticationError,
    ClassHubError,
    DatabaseError,
    ForbiddenError,
    ValidationError,
)
from classhub.middleware.logging import RequestLoggingMiddleware
from classhub.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from classhub.routes import admin, auth, boards, chat, health, tasks, users
from classhub.schema import init_schema

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] classhub.access: GET /api/chat 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup sequence:
        1. Setup logging
        2. Validate configuration (problems are logged, startup continues)
        3. Ensure all tables exist (per-table failures are logged)

    Shutdown sequence:
        1. Dispose database engine (close all pooled connections)
    """
    setup_logging()
    logger.info("ClassHub Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    url = settings.sqlalchemy_url
    logger.info("Store: %s (database=%s)", url.get_backend_name(), url.database)
    await init_schema(database.engine)

    if settings.admin_token_usable:
        logger.warning("Database reset endpoint is ENABLED (ADMIN_TOKEN is set)")

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("ClassHub Backend shutting down...")
    await database.dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, exc: ClassHubError, details: bool = False) -> JSONResponse:
    content = {
        "error": error,
        "message": exc.message,
        "request_id": request_id_var.get(""),
    }
    if details and exc.context:
        content["details"] = exc.context
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the application exception hierarchy onto HTTP responses.

    Handler hierarchy:
        ValidationError      → 400 (message + details)
        AuthenticationError  → 401
        ForbiddenError       → 403
        DatabaseError        → 500 (context logged, never returned)
        ClassHubError (base) → 500
        Exception (fallback) → 500 (stack trace logged)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc, details=True)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(401, "unauthorized", exc)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        logger.warning("[%s] Forbidden: %s %s", request_id_var.get(""), request.method, request.url.path)
        return _error_response(403, "forbidden", exc)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return _error_response(500, "server_error", exc)

    @app.exception_handler(ClassHubError)
    async def handle_app_error(request: Request, exc: ClassHubError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="ClassHub API",
        description=(
            "Backend for a classroom coordination app: accounts, personal tasks, "
            "a shared chat, and homework/news/events/feedback boards."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(tasks.router)
    app.include_router(chat.router)
    app.include_router(boards.router)
    app.include_router(admin.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "classhub.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
