"""
ClassHub Backend - ORM Models
==============================

Importing this package registers all seven tables on `Base.metadata`, which
the schema initializer and Alembic rely on.
"""

from classhub.models.board import Event, FeedbackItem, HomeworkItem, NewsItem
from classhub.models.chat import ChatMessage
from classhub.models.task import Task
from classhub.models.user import User

__all__ = [
    "User",
    "Task",
    "ChatMessage",
    "HomeworkItem",
    "NewsItem",
    "Event",
    "FeedbackItem",
]
