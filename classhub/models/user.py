"""
ClassHub Backend - User Model
==============================

What:  ORM model for the `users` table.
How:   Created by POST /register, read by POST /login and GET /api/users.
       No exposed operation updates or deletes a user.

Column naming:
    The display name column is literally `fullName` in the store (clients
    read it under that key). The Python attribute is `full_name`.

Known weakness:
    `password` is stored and compared in plaintext.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from classhub.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Uniqueness is enforced by the store; a duplicate insert raises
    # IntegrityError, which the service reports as a registration failure.
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column("fullName", String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
