"""
ClassHub Backend - Shared Response Schemas
===========================================

What:  Small response envelopes reused across routers: acknowledgments,
       the error body produced by the global exception handlers, and the
       health check payload.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Fixed acknowledgment returned by write endpoints, e.g. {"status": "ok"}."""
    status: str = Field(description="Acknowledgment keyword: ok, updated, deleted")


class MessageResponse(BaseModel):
    """Human-readable acknowledgment, e.g. {"message": "User created"}."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for every application error.

    Fields:
        error: Machine-readable error code (e.g. "validation_error")
        message: Human-readable description for display to users
        details: Optional extra context (e.g. which field failed)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
