"""Request middleware and dependencies."""

from .auth import get_current_user, extract_bearer_token

__all__ = ["get_current_user", "extract_bearer_token"]
