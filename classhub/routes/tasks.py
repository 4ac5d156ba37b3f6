"""
ClassHub Backend - Task Route Handlers
=======================================

What:  Personal to-do list endpoints.

    GET    /api/tasks?userId=   → tasks of one user, newest first
    POST   /api/tasks           → create, returns {id, text, is_done: 0}
    PUT    /api/tasks/{id}      → toggle is_done, returns {"status": "updated"}
    DELETE /api/tasks/{id}      → delete, returns {"status": "deleted"}

Toggle and delete do not check that the task exists or who owns it.

`userId` is read as text: a blank or non-numeric value (e.g. "undefined"
from a client that has not logged in) lists nothing instead of failing
validation.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.database import get_db_session
from classhub.schemas.common import ErrorResponse, StatusResponse
from classhub.schemas.task import TaskCreate, TaskCreated, TaskOut
from classhub.services.task_service import task_service

router = APIRouter(prefix="/api", tags=["Tasks"])

_ERRORS = {500: {"description": "Server error", "model": ErrorResponse}}


def parse_user_id(raw: Optional[str]) -> Optional[int]:
    """Integer owner id from the query string, or None when absent or unusable."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


@router.get("/tasks", response_model=List[TaskOut], responses=_ERRORS, summary="List a user's tasks")
async def list_tasks(
    user_id: Optional[str] = Query(default=None, alias="userId", description="Owner's user id"),
    db: AsyncSession = Depends(get_db_session),
) -> List[TaskOut]:
    return await task_service.list_for_user(db, parse_user_id(user_id))


@router.post("/tasks", response_model=TaskCreated, responses=_ERRORS, summary="Create a task")
async def create_task(
    body: TaskCreate,
    db: AsyncSession = Depends(get_db_session),
) -> TaskCreated:
    return await task_service.create(db, user_id=body.user_id, text=body.text)


@router.put("/tasks/{task_id}", response_model=StatusResponse, responses=_ERRORS, summary="Toggle a task")
async def toggle_task(
    task_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await task_service.toggle(db, task_id)
    return StatusResponse(status="updated")


@router.delete("/tasks/{task_id}", response_model=StatusResponse, responses=_ERRORS, summary="Delete a task")
async def delete_task(
    task_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    await task_service.delete(db, task_id)
    return StatusResponse(status="deleted")
