"""
Surf Spots Backend - Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for every failure a request can hit.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return a short plain-text message with the matching HTTP status.
Who:   Raised by storage backends, persistence and services; caught by handlers.

Exception Hierarchy:
    SurfSpotsError (base)
    ├── ValidationError   → 400 Bad Request (malformed request body)
    ├── NotFoundError     → 404 Not Found (no record with that id)
    ├── StorageError      → 500 (document missing, unreadable or unwritable)
    ├── DecodeError       → 500 (stored document is not a valid collection)
    └── EncodeError       → 500 (collection could not be serialized)

Every error is terminal for the current request. Nothing is retried.
"""

from typing import Any, Dict, Optional


class SurfSpotsError(Exception):
    """
    Base exception for all Surf Spots application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SurfSpotsError):
    """
    Raised when the client sent a request body that cannot be decoded.

    When:    Invalid JSON, a non-object body, or a field of the wrong type.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request payload",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(SurfSpotsError):
    """
    Raised when no record in the collection carries the requested id.

    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Spot",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class StorageError(SurfSpotsError):
    """
    Raised when the backing document cannot be read or written.

    When:    File missing, permission denied, disk full, rename failed.
    HTTP:    500 Internal Server Error

    The OS error and path go into `context` for the server log; the client
    only sees `message`.
    """

    def __init__(
        self,
        message: str = "Failed to access spot storage",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DecodeError(SurfSpotsError):
    """
    Raised when the stored document is not well-formed JSON or does not
    match the SpotCollection schema.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Failed to parse stored spots",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class EncodeError(SurfSpotsError):
    """
    Raised when a collection cannot be serialized back to JSON.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Failed to encode spots",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
