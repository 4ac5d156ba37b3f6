"""
ClassHub Backend - Task Model
==============================

What:  ORM model for the `tasks` table (personal to-do items).

Lifecycle:
    1. Created for a user with is_done = false
    2. Toggled any number of times (is_done = NOT is_done)
    3. Deleted by id

`user_id` references users.id by convention only; there is no foreign key,
so tasks survive (and can be created for) unknown users.
"""

from typing import Optional

from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from classhub.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    text: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_done: Mapped[bool] = mapped_column(
        Boolean,
        nullable=True,
        default=False,
        server_default=false(),
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, user_id={self.user_id}, is_done={self.is_done})>"
