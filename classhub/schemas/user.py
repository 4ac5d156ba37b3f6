"""
ClassHub Backend - User & Auth Schemas
=======================================

What:  Request bodies for /register and /login, and the two user views.

Why two views:
    UserRow is the full stored row including `password`, returned by /login
    for compatibility with existing clients. UserListItem is the public
    projection used by GET /api/users and has no password field at all.

`fullName` is the wire name; `full_name` is accepted when building models
in Python (populate_by_name).
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    # Optional at the schema level so that missing fields reach the service's
    # presence check (400) instead of FastAPI's 422.
    username: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullName")

    model_config = {"populate_by_name": True}


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class UserRow(BaseModel):
    id: int
    username: str
    password: str
    full_name: str = Field(alias="fullName")

    model_config = {"populate_by_name": True}


class UserListItem(BaseModel):
    id: int
    full_name: str = Field(alias="fullName")
    username: str

    model_config = {"populate_by_name": True}
