"""
ClassHub Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the few error scenarios we have.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them onto
       HTTP status codes and a structured JSON body.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    ClassHubError (base)         → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request
    ├── AuthenticationError      → 401 Unauthorized
    ├── ForbiddenError           → 403 Forbidden
    └── DatabaseError            → 500 Internal Server Error

Store failures are always wrapped in DatabaseError by the service layer. The
driver's own message goes into `context` (logged) and never into the
response body.
"""

from typing import Any, Dict, Optional


class ClassHubError(Exception):
    """
    Base exception for all ClassHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ClassHubError):
    """
    Raised when client input fails a presence or format check.

    HTTP:    400 Bad Request

    FastAPI still answers malformed JSON bodies with its own 422; this class
    covers the checks we do by hand (e.g. empty registration fields).
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(ClassHubError):
    """Credentials did not match any user. HTTP 401."""

    def __init__(
        self,
        message: str = "Invalid username or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(ClassHubError):
    """
    Raised when an administrative operation is attempted without the
    configured admin token, or while the operation is disabled.

    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        message: str = "This operation is not permitted",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ClassHubError):
    """
    Raised when a store statement fails.

    HTTP:    500 Internal Server Error

    The message is written by the service that raised it and is safe to
    return. Driver details (constraint names, SQL text) stay in `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
