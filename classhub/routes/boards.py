"""
ClassHub Backend - Announcement Board Route Handlers
=====================================================

What:  GET and POST for /api/homework, /api/news, /api/events, /api/feedback.

List routes:
    All four GET endpoints come from one factory, `add_list_route`, which
    binds a `Board` member to its response schema. The SQL behind each is
    fixed in services/board_service.py.

Create routes:
    Written out per board, since each has its own body schema. All four
    answer {"status": "ok"}.
"""

from typing import List, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import get_db_session
from classhub.schemas.board import (
    EventCreate,
    EventOut,
    FeedbackCreate,
    FeedbackOut,
    HomeworkCreate,
    HomeworkOut,
    NewsCreate,
    NewsOut,
)
from classhub.schemas.common import ErrorResponse, StatusResponse
from classhub.services.board_service import BOARD_LIST_LIMIT, Board, board_service

router = APIRouter(prefix="/api", tags=["Boards"])

_ERRORS = {500: {"description": "Server error", "model": ErrorResponse}}


def add_list_route(target: APIRouter, board: Board, item_schema: Type[BaseModel]) -> None:
    """
    Register `GET /<board>` on `target`, returning the newest rows of `board`.

    The handler closes over the enum member, not a table name.
    """

    async def list_board(db: AsyncSession = Depends(get_db_session)):
        return await board_service.list_recent(db, board)

    list_board.__name__ = f"list_{board.value}"

    target.add_api_route(
        f"/{board.value}",
        list_board,
        methods=["GET"],
        response_model=List[item_schema],
        responses=_ERRORS,
        summary=f"Newest {BOARD_LIST_LIMIT} {board.value} entries",
    )


add_list_route(router, Board.HOMEWORK, HomeworkOut)
add_list_route(router, Board.NEWS, NewsOut)
add_list_route(router, Board.EVENTS, EventOut)
add_list_route(router, Board.FEEDBACK, FeedbackOut)


@router.post("/homework", response_model=StatusResponse, responses=_ERRORS, summary="Post homework")
async def post_homework(
    body: HomeworkCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await board_service.post(db, Board.HOMEWORK, body.model_dump())
    return StatusResponse(status="ok")


@router.post("/news", response_model=StatusResponse, responses=_ERRORS, summary="Post news")
async def post_news(
    body: NewsCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await board_service.post(db, Board.NEWS, body.model_dump())
    return StatusResponse(status="ok")


@router.post("/events", response_model=StatusResponse, responses=_ERRORS, summary="Post an event")
async def post_event(
    body: EventCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await board_service.post(db, Board.EVENTS, body.model_dump())
    return StatusResponse(status="ok")


@router.post("/feedback", response_model=StatusResponse, responses=_ERRORS, summary="Send feedback")
async def post_feedback(
    body: FeedbackCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await board_service.post(db, Board.FEEDBACK, body.model_dump())
    return StatusResponse(status="ok")
