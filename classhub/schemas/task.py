"""
ClassHub Backend - Task Schemas
================================

`is_done` travels as 0/1 on the wire, the way the MySQL BOOLEAN (TINYINT)
column has always been exposed to clients.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    user_id: Optional[int] = Field(default=None, alias="userId")
    text: Optional[str] = None

    model_config = {"populate_by_name": True}


class TaskOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    text: Optional[str] = None
    is_done: int = Field(description="0 = open, 1 = done")


class TaskCreated(BaseModel):
    """Echo returned by POST /api/tasks: generated id plus the submitted text."""
    id: int
    text: Optional[str] = None
    is_done: int = 0
