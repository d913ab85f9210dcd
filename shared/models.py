"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from verified token claims by the auth
    middleware and made available to route handlers via dependency
    injection. It is never read from a request body.
    """

    id: str = Field(..., description="Account ID")
    email: str = Field(..., description="Account email address (lowercase)")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
