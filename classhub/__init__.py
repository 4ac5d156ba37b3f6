"""
ClassHub Backend - Application Package Initializer
===================================================

What: Marks the `classhub` directory as a Python package.
Who:  Used by uvicorn (`classhub.main:app`), Alembic and pytest.

Architecture Note:
    The backend is a thin layered mapping of REST endpoints onto single-table
    SQL statements:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (one statement each)  │  ← query building, error mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never build SQL; services never touch HTTP status codes except
    through the exception hierarchy in `classhub.exceptions`.
"""

__version__ = "1.0.0"
