"""
ClassHub Backend - User Service (Registration, Login, Directory)
=================================================================

What:  The three operations on the `users` table.
How:   Each method runs exactly one parameterized statement through the
       injected AsyncSession and maps the outcome onto a schema or an
       application exception.
Who:   Called by routes/auth.py and routes/users.py.

Error Mapping:
    register  missing field           → ValidationError  (400)
              any store failure        → DatabaseError    (500), including a
                                         duplicate username; the two are not
                                         told apart
    login     no matching row          → AuthenticationError (401)
              store failure            → AuthenticationError (401), logged
    list      store failure            → DatabaseError    (500)

Known weakness:
    Passwords are stored and compared in plaintext, and login returns the
    stored row including the password.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.exceptions import AuthenticationError, DatabaseError, ValidationError
from classhub.models.user import User
from classhub.schemas.user import UserListItem, UserRow

logger = logging.getLogger(__name__)


class UserService:
    """Stateless service; the session is passed in on every call."""

    async def register(
        self,
        db: AsyncSession,
        username: Optional[str],
        password: Optional[str],
        full_name: Optional[str],
    ) -> None:
        """
        Insert a new user.

        Raises:
            ValidationError: Any of the three fields is missing or empty
            DatabaseError: The insert failed (duplicate username or otherwise)
        """
        if not username or not password or not full_name:
            raise ValidationError(message="All fields are required")

        try:
            db.add(User(username=username, password=password, full_name=full_name))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.warning("Registration failed for username '%s': %s", username, type(e).__name__)
            raise DatabaseError(
                message="Registration failed (username may already be taken)",
                context={"original_error": type(e).__name__},
            )

        logger.info("User registered: %s", username)

    async def login(
        self,
        db: AsyncSession,
        username: Optional[str],
        password: Optional[str],
    ) -> UserRow:
        """
        Look up the first user whose username and password both match exactly.

        Returns:
            The full stored row, password included.

        Raises:
            AuthenticationError: No match, or the lookup itself failed
        """
        try:
            result = await db.execute(
                select(User)
                .where(User.username == username, User.password == password)
                .limit(1)
            )
            user = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Login lookup failed: %s", str(e))
            raise AuthenticationError(context={"original_error": type(e).__name__})

        if user is None:
            raise AuthenticationError()

        return UserRow(
            id=user.id,
            username=user.username,
            password=user.password,
            full_name=user.full_name,
        )

    async def list_users(self, db: AsyncSession) -> List[UserListItem]:
        """Public directory: id, fullName, username ordered by fullName."""
        try:
            result = await db.execute(
                select(User.id, User.full_name.label("full_name"), User.username)
                .order_by(User.full_name.asc())
            )
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [
            UserListItem(id=row.id, full_name=row.full_name, username=row.username)
            for row in rows
        ]


user_service = UserService()
