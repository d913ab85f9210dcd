"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import QuillError, AuthenticationError, ValidationError


class InvalidTokenError(AuthenticationError):
    """
    Raised when a bearer token is invalid, malformed, or expired.

    Expired and forged tokens share this one error so that
    callers cannot tell the two apart.
    """

    def __init__(self, message: str = "Invalid token."):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when signin fails.

    Unknown email and wrong password both end up here. Answered with 400,
    matching the rest of the signin form errors.
    """

    status_code = 400

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that already has an account."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class HashingError(QuillError):
    """Raised when the password hasher fails internally."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, code="HASHING_FAILED")
