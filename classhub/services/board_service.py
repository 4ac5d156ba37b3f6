"""
ClassHub Backend - Announcement Board Service
==============================================

What:  Generic "list recent" and "post" for the four announcement boards.
How:   `Board` is a closed enum. Each member maps to a fixed ORM model, and
       the list query for every board is built once at import time:

           SELECT * FROM <table> ORDER BY id DESC LIMIT 20

       No table name is ever taken from request data, so there is nothing
       to interpolate at request time.

Failure semantics:
    An empty board returns []. A failing query raises DatabaseError, so
    callers can tell "nothing posted yet" apart from "store unavailable".
"""

import enum
import logging
from typing import Any, Dict, List, Mapping, Type

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import Base
from classhub.exceptions import DatabaseError
from classhub.models.board import Event, FeedbackItem, HomeworkItem, NewsItem

logger = logging.getLogger(__name__)

BOARD_LIST_LIMIT = 20


class Board(str, enum.Enum):
    HOMEWORK = "homework"
    NEWS = "news"
    EVENTS = "events"
    FEEDBACK = "feedback"


BOARD_MODELS: Mapping[Board, Type[Base]] = {
    Board.HOMEWORK: HomeworkItem,
    Board.NEWS: NewsItem,
    Board.EVENTS: Event,
    Board.FEEDBACK: FeedbackItem,
}

_RECENT_QUERIES: Dict[Board, Select] = {
    board: select(model).order_by(model.id.desc()).limit(BOARD_LIST_LIMIT)
    for board, model in BOARD_MODELS.items()
}


class BoardService:

    async def list_recent(self, db: AsyncSession, board: Board) -> List[Any]:
        """
        Newest 20 rows of `board`, highest id first.

        Returns ORM instances; the route's response model serializes them.
        """
        try:
            result = await db.execute(_RECENT_QUERIES[board])
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing %s: %s", board.value, str(e))
            raise DatabaseError(
                message=f"Could not retrieve {board.value}. Please try again.",
                context={"board": board.value, "error_type": type(e).__name__},
            )

    async def post(self, db: AsyncSession, board: Board, fields: Dict[str, Any]) -> None:
        """Insert one row on `board` from already-validated `fields`."""
        item = BOARD_MODELS[board](**fields)
        try:
            db.add(item)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error posting to %s: %s", board.value, str(e))
            raise DatabaseError(
                message=f"Could not save the {board.value} entry. Please try again.",
                context={"board": board.value, "error_type": type(e).__name__},
            )
        logger.info("New %s entry %s", board.value, item.id)


board_service = BoardService()
