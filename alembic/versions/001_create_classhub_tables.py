"""Create ClassHub tables

Revision ID: 001
Revises: None
Create Date: 2024-09-01 00:00:00.000000+00:00

What:  Baseline schema: users, tasks, chat, and the four announcement boards.
How:   Portable column types only, so the revision applies to MySQL,
       PostgreSQL and SQLite alike. Matches classhub/models/.

       The app creates missing tables on every startup, so a store it has
       already run against holds some or all of these tables. Each one is
       created only if absent; upgrading such a store just records the
       revision.

Rollback: downgrade() drops all seven tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import context, op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_if_absent(name: str, *columns_and_constraints) -> None:
    if not context.is_offline_mode() and sa.inspect(op.get_bind()).has_table(name):
        return
    op.create_table(name, *columns_and_constraints)


def upgrade() -> None:
    _create_if_absent(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        # Column name is camelCase on purpose; clients read it as `fullName`
        sa.Column("fullName", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    # user_id has no foreign key: tasks are not tied to existing users
    _create_if_absent(
        "tasks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("text", sa.String(255), nullable=True),
        sa.Column("is_done", sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )

    _create_if_absent(
        "chat",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            nullable=True,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    _create_if_absent(
        "homework",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("task", sa.Text(), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    _create_if_absent(
        "news",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    _create_if_absent(
        "events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("event_date", sa.DateTime(), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    _create_if_absent(
        "feedback",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """
    Drop every ClassHub table.

    WARNING: destructive. Same effect as the /danger/clear-database endpoint
    without the recreate step.
    """
    for table in ("feedback", "events", "news", "homework", "chat", "tasks", "users"):
        op.drop_table(table)
