"""
ClassHub Backend - Task Service
================================

What:  List / create / toggle / delete for personal to-do tasks.
How:   One statement per method. Writes commit immediately.

Deliberately absent:
    - No existence check before toggle or delete (a missing id is a no-op)
    - No ownership check: any caller may toggle or delete any task by id
    - No ordering between concurrent toggles; the last commit wins

Query plans:
    list    SELECT * FROM tasks WHERE user_id = :uid ORDER BY id DESC
    create  INSERT INTO tasks (user_id, text) VALUES (:uid, :text)
    toggle  UPDATE tasks SET is_done = NOT is_done WHERE id = :id
    delete  DELETE FROM tasks WHERE id = :id
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, not_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from classhub.exceptions import DatabaseError
from classhub.models.task import Task
from classhub.schemas.task import TaskCreated, TaskOut

logger = logging.getLogger(__name__)


def _to_out(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        user_id=task.user_id,
        text=task.text,
        is_done=int(bool(task.is_done)),
    )


class TaskService:

    async def list_for_user(self, db: AsyncSession, user_id: Optional[int]) -> List[TaskOut]:
        """Tasks owned by `user_id`, newest first. No user id means no tasks."""
        if user_id is None:
            return []

        try:
            result = await db.execute(
                select(Task).where(Task.user_id == user_id).order_by(Task.id.desc())
            )
            tasks = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing tasks for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not retrieve tasks. Please try again.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        return [_to_out(task) for task in tasks]

    async def create(self, db: AsyncSession, user_id: Optional[int], text: Optional[str]) -> TaskCreated:
        """Insert an open task and echo the generated id with the text."""
        task = Task(user_id=user_id, text=text, is_done=False)
        try:
            db.add(task)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating task for user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not create the task. Please try again.",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )

        logger.info("Task %s created for user %s", task.id, user_id)
        return TaskCreated(id=task.id, text=text, is_done=0)

    async def toggle(self, db: AsyncSession, task_id: int) -> None:
        """Flip is_done for `task_id` in a single UPDATE."""
        await self._write(
            db,
            update(Task)
            .where(Task.id == task_id)
            .values(is_done=not_(Task.is_done))
            .execution_options(synchronize_session=False),
            action="toggle",
            task_id=task_id,
        )

    async def delete(self, db: AsyncSession, task_id: int) -> None:
        await self._write(
            db,
            delete(Task)
            .where(Task.id == task_id)
            .execution_options(synchronize_session=False),
            action="delete",
            task_id=task_id,
        )

    async def _write(self, db: AsyncSession, statement, action: str, task_id: int) -> None:
        try:
            await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error on task %s (%s): %s", task_id, action, str(e))
            raise DatabaseError(
                message=f"Could not {action} the task. Please try again.",
                context={"task_id": task_id, "error_type": type(e).__name__},
            )
        logger.info("Task %s: %s", task_id, action)


task_service = TaskService()
