"""
ClassHub Backend - Administrative Reset Route
==============================================

What:  GET /danger/clear-database drops and recreates every table.
How:   Delegates to schema.reset_schema() on the application engine.

Guards (all must pass, checked in this order):
    1. ADMIN_TOKEN is configured, at least ADMIN_TOKEN_MIN_LENGTH chars
                                       → otherwise 403, the endpoint is off
    2. X-Admin-Token header matches it → otherwise 403
    3. ?confirm=clear-database         → otherwise 400

The reset is irreversible. There is no backup step.
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Header, Query
from fastapi.responses import PlainTextResponse

from classhub import database
from classhub.config import settings
from classhub.exceptions import ForbiddenError, ValidationError
from classhub.schema import reset_schema
from classhub.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/danger", tags=["Admin"])

CONFIRMATION_PHRASE = "clear-database"


def check_admin_token(supplied: Optional[str]) -> None:
    """Raise ForbiddenError unless `supplied` equals the configured admin token."""
    expected = settings.admin_token
    if not settings.admin_token_usable:
        raise ForbiddenError(message="Database reset is disabled on this server")
    if not supplied or not secrets.compare_digest(supplied.encode(), expected.encode()):
        raise ForbiddenError(message="Invalid admin token")


@router.get(
    "/clear-database",
    response_class=PlainTextResponse,
    responses={
        400: {"description": "Missing confirmation phrase", "model": ErrorResponse},
        403: {"description": "Disabled or wrong admin token", "model": ErrorResponse},
    },
    summary="Drop and recreate all tables (irreversible)",
)
async def clear_database(
    confirm: Optional[str] = Query(
        default=None,
        description=f"Must be exactly '{CONFIRMATION_PHRASE}'",
    ),
    x_admin_token: Optional[str] = Header(default=None),
) -> PlainTextResponse:
    check_admin_token(x_admin_token)
    if confirm != CONFIRMATION_PHRASE:
        raise ValidationError(
            message=f"Add ?confirm={CONFIRMATION_PHRASE} to confirm the reset",
            field="confirm",
        )

    logger.warning("Database reset requested; dropping all tables")
    failed = await reset_schema(database.engine)
    if failed:
        logger.error("Database reset left tables uncreated: %s", failed)

    return PlainTextResponse(
        "Database fully cleared and recreated. You can register again."
    )
