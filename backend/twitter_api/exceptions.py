"""
Twitter API — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the error scenarios of the API.
Why:   Services raise domain errors; global exception handlers (registered in
       main.py) translate them to HTTP status codes and JSON bodies, so no
       route needs its own try/except.
How:   Each exception carries a user-facing message and an optional context
       dict that is logged but never returned for server-side failures.

Exception Hierarchy:
    TwitterApiError (base)
    ├── ValidationError       → 400 Bad Request (client can fix)
    ├── AuthenticationError   → 401 Unauthorized
    ├── NotFoundError         → 404 Not Found
    ├── ConflictError         → 409 Conflict (duplicate email)
    └── DatabaseError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class TwitterApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TwitterApiError):
    """
    Raised when client input fails a business rule.

    When:    Missing required fields, malformed email, empty batch payload.
    HTTP:    400 Bad Request

    Pydantic handles the shape of request bodies; this covers the field rules
    checked by the services ("Title and description are required").
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


class AuthenticationError(TwitterApiError):
    """
    Raised when credentials or bearer tokens are rejected.

    HTTP:    401 Unauthorized

    Sign-in uses one message for unknown emails and wrong passwords so the
    response does not reveal which accounts exist.
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(TwitterApiError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None into
    NotFoundError so the handler can answer 404.

    The message defaults to "<Resource> not found" ("Post not found"), the
    wording clients of this API already match on.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(
            message=message or f"{resource.capitalize()} not found",
            context=ctx,
        )
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(TwitterApiError):
    """
    Raised when a write would violate a uniqueness rule.

    When:    Sign-up or user create/update with an email that is already taken.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Email already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(TwitterApiError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The SQL error
        type and the failing operation are logged server-side only.
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
