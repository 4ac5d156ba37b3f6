"""
ClassHub Backend - Chat Message Model
======================================

What:  ORM model for the `chat` table, the single shared chat room.

`username` is free text typed by the client, not a reference to users.
`created_at` is assigned by the store (CURRENT_TIMESTAMP) on insert.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import TIMESTAMP, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from classhub.database import Base


class ChatMessage(Base):
    __tablename__ = "chat"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        TIMESTAMP,
        nullable=True,
        server_default=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        return f"<ChatMessage(id={self.id}, username='{self.username}')>"
