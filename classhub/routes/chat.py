from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import get_db_session
from classhub.schemas.chat import ChatMessageCreate, ChatMessageOut
from classhub.schemas.common import ErrorResponse, StatusResponse
from classhub.services.chat_service import chat_service

router = APIRouter(prefix="/api", tags=["Chat"])

_ERRORS = {500: {"description": "Server error", "model": ErrorResponse}}


@router.get(
    "/chat",
    response_model=List[ChatMessageOut],
    responses=_ERRORS,
    summary="Last 50 chat messages, oldest first",
)
async def list_chat(db: AsyncSession = Depends(get_db_session)) -> List[ChatMessageOut]:
    return await chat_service.list_recent(db)


@router.post("/chat", response_model=StatusResponse, responses=_ERRORS, summary="Post a chat message")
async def post_chat(
    body: ChatMessageCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await chat_service.post(db, username=body.username, message=body.message)
    return StatusResponse(status="ok")
