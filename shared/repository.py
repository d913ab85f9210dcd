"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of PostgREST failures.
"""

import logging
from typing import Any, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute(), which turns unexpected PostgREST errors into DatabaseError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally. Repositories
    are synchronous; services run them in a worker thread.

    Example:
        class BlogRepository(BaseRepository[Blog]):
            def get_by_id(self, blog_id: str) -> Optional[Blog]:
                result = self._execute(
                    "get_blog",
                    self._db.table("blogs").select("*").eq("id", blog_id).limit(1),
                )
                if not result.data:
                    return None
                return self._map_to_blog(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, operation: str, query: Any) -> Any:
        """
        Execute a prepared query builder.

        Args:
            operation: Short name of the operation, used in logs and errors.
            query: A PostgREST request builder, ready to execute.

        Returns:
            The PostgREST response (with .data and .count).

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            return query.execute()
        except APIError as e:
            logger.error(f"Database operation '{operation}' failed: {e.code} {e.message}")
            raise DatabaseError(operation, original_error=e.code) from e

    @staticmethod
    def _is_unique_violation(error: APIError) -> bool:
        return error.code == UNIQUE_VIOLATION
