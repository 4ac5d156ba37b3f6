"""
ClassHub Backend - Announcement Board Schemas
==============================================

What:  Create bodies and list items for homework, news, events, feedback.
How:   Every field is optional, as the boards never validated input beyond
       parameter binding. Dates are parsed by Pydantic (ISO 8601), so a
       malformed date is rejected with FastAPI's 422 before reaching the store.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


# ── Homework ──────────────────────────────────────────────────────────────
class HomeworkCreate(BaseModel):
    subject: Optional[str] = None
    task: Optional[str] = None
    deadline: Optional[date] = None


class HomeworkOut(HomeworkCreate):
    id: int

    model_config = {"from_attributes": True}


# ── News ──────────────────────────────────────────────────────────────────
class NewsCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NewsOut(NewsCreate):
    id: int

    model_config = {"from_attributes": True}


# ── Events ────────────────────────────────────────────────────────────────
class EventCreate(BaseModel):
    title: Optional[str] = None
    event_date: Optional[datetime] = None
    location: Optional[str] = None


class EventOut(EventCreate):
    id: int

    model_config = {"from_attributes": True}


# ── Feedback ──────────────────────────────────────────────────────────────
class FeedbackCreate(BaseModel):
    category: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class FeedbackOut(FeedbackCreate):
    id: int

    model_config = {"from_attributes": True}
