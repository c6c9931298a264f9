"""
Albums API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the error scenarios the API models.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    AlbumsApiError (base)
    ├── ValidationError            → 400 Bad Request (client can fix)
    ├── UnprocessableEntityError   → 422 Unprocessable Entity (ExceptionMessage body)
    └── DatabaseError              → 500 Internal Server Error

Status code choices for a missing album:
    404 is kept for URLs that match no route, 400 for malformed syntax.
    A well-formed request for an id that does not exist is 422.
"""

from typing import Any, Dict, Optional


class AlbumsApiError(Exception):
    """
    Base exception for all Albums API errors.

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


class ValidationError(AlbumsApiError):
    """
    Raised when client input fails a business rule.

    When:    Release date not strictly in the past.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Release date must be in the past",
            "details": {"field": "date"}
        }
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


class UnprocessableEntityError(AlbumsApiError):
    """
    Raised when a single-item lookup misses.

    What:    The URL and syntax are fine but the requested entity does not exist.
    When:    GET /albums/{id} with an id the existence guard rejects.
    HTTP:    422 Unprocessable Entity

    `detail` is the cause clause appended to the fixed user-facing sentence
    built by albums_api.schemas.messages.build_exception_message.
    Non-existence is not transient, so clients should not retry.
    """

    def __init__(
        self,
        detail: str,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=detail, context=ctx)
        self.detail = detail
        self.resource_id = resource_id

    @classmethod
    def for_missing_id(cls, resource_id: int) -> "UnprocessableEntityError":
        return cls(
            detail=f"the requested id {resource_id} does not exist",
            resource_id=resource_id,
        )


class DatabaseError(AlbumsApiError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver errors,
    SQL, and constraint names are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
