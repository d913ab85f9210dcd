"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser principal."""

    def test_create_with_required_fields(self):
        """Should create user with id and email."""
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        assert user.id == "user-123"
        assert user.email == "test@example.com"

    def test_missing_email(self):
        """Email is required."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(id="user-123")

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        with pytest.raises(ValidationError):
            user.id = "new-id"

    def test_extra_fields_ignored(self):
        """Extra claims should be dropped."""
        user = AuthenticatedUser(id="user-123", email="test@example.com", exp=123, role="admin")
        assert not hasattr(user, "exp")
        assert not hasattr(user, "role")
