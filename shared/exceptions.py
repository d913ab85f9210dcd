"""
Base exception classes for the Quill backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status the API layer answers with, so the
mapping from failure kind to status code lives in one place.
"""

from typing import Optional, Any


class QuillError(Exception):
    """
    Base exception for all Quill errors.

    All custom exceptions should inherit from this class.
    Anything that is not one of the client-facing subclasses is a fault (500).
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(QuillError):
    """Resource not found."""

    status_code = 404


class ValidationError(QuillError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(QuillError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(QuillError):
    """Authorization failed (authenticated, but not allowed)."""

    status_code = 403


class ExternalServiceError(QuillError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class DatabaseError(ExternalServiceError):
    """A storage query failed for a reason other than a known constraint."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        super().__init__(
            f"Database operation failed: {operation}",
            service="supabase",
            code="DATABASE_ERROR",
            details={"operation": operation, "original_error": original_error},
        )
