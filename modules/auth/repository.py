"""
Account repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
The table carries a unique constraint on email; that constraint, not the
service-level pre-check, is what settles concurrent signups.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.exceptions import DatabaseError
from shared.repository import BaseRepository

from .exceptions import DuplicateEmailError
from .models import Account

USERS_TABLE = "users"


class AccountRepository(BaseRepository[Account]):
    """Repository for account data access."""

    def create(self, name: str, email: str, password_hash: str) -> Account:
        """
        Insert a new account.

        Args:
            name: Display name
            email: Normalized (lowercase) email
            password_hash: Output of the password hasher

        Returns:
            Created Account with generated ID and timestamps.

        Raises:
            DuplicateEmailError: If the email is already taken.
        """
        data = {"name": name, "email": email, "password_hash": password_hash}
        try:
            result = self._db.table(USERS_TABLE).insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                raise DuplicateEmailError() from None
            raise DatabaseError("create_account", original_error=e.code) from e

        return self._map_to_account(result.data[0])

    def get_by_email(self, email: str) -> Optional[Account]:
        """Get an account by its normalized email."""
        result = self._execute(
            "get_account_by_email",
            self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1),
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Get an account by ID."""
        result = self._execute(
            "get_account_by_id",
            self._db.table(USERS_TABLE).select("*").eq("id", account_id).limit(1),
        )
        if not result.data:
            return None
        return self._map_to_account(result.data[0])

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map database row to Account model."""
        return Account(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
