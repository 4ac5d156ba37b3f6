"""
ClassHub Backend - Chat Service
================================

What:  Post to and read from the single shared chat room.

Listing window:
    The room shows the 50 most recent messages, oldest first. We select the
    newest 50 (created_at DESC, id DESC) and reverse them in Python rather
    than nesting a LIMIT inside an IN-subquery, which MySQL rejects.
    `id` breaks ties between messages stored within the same second.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.exceptions import DatabaseError
from classhub.models.chat import ChatMessage
from classhub.schemas.chat import ChatMessageOut

logger = logging.getLogger(__name__)

CHAT_HISTORY_LIMIT = 50

_RECENT_MESSAGES = (
    select(ChatMessage)
    .order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc())
    .limit(CHAT_HISTORY_LIMIT)
)


class ChatService:

    async def list_recent(self, db: AsyncSession) -> List[ChatMessageOut]:
        """Up to 50 most recent messages in ascending creation order."""
        try:
            result = await db.execute(_RECENT_MESSAGES)
            newest_first = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error reading chat: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve chat messages. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [ChatMessageOut.model_validate(msg) for msg in reversed(newest_first)]

    async def post(self, db: AsyncSession, username: Optional[str], message: Optional[str]) -> None:
        """Store a message; the store stamps created_at."""
        try:
            db.add(ChatMessage(username=username, message=message))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error posting chat message: %s", str(e))
            raise DatabaseError(
                message="Could not post the message. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.debug("Chat message posted by '%s'", username)


chat_service = ChatService()
