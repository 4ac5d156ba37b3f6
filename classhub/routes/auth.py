"""
ClassHub Backend - Auth Route Handlers
=======================================

What:  POST /register and POST /login.
How:   Bodies are parsed into RegisterRequest / LoginRequest and handed to
       UserService. Status codes for failures come from the global
       exception handlers (400, 401, 500).

There are no tokens or sessions: a successful login simply returns the
stored user row, and the client keeps it.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import get_db_session
from classhub.schemas.common import ErrorResponse, MessageResponse
from classhub.schemas.user import LoginRequest, RegisterRequest, UserRow
from classhub.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/register",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "A required field is missing", "model": ErrorResponse},
        500: {"description": "Insert failed (likely a duplicate username)", "model": ErrorResponse},
    },
    summary="Create a user account",
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await user_service.register(
        db,
        username=body.username,
        password=body.password,
        full_name=body.full_name,
    )
    return MessageResponse(message="User created")


@router.post(
    "/login",
    response_model=UserRow,
    responses={
        401: {"description": "No user matches these credentials", "model": ErrorResponse},
    },
    summary="Check credentials and return the user row",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> UserRow:
    return await user_service.login(db, username=body.username, password=body.password)
