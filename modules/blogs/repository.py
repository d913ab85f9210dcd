"""
Blog repository for database access.

Encapsulates all Supabase queries and data mapping for the blogs table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Blog

BLOGS_TABLE = "blogs"
# Embeds the author's public fields through the blogs.owner foreign key
LIST_COLUMNS = "*, owner_profile:users(id,name,email)"


def _contains_pattern(search: str) -> str:
    """
    ilike pattern matching `search` as a literal substring.

    PostgREST rewrites every `*` in a like pattern to `%` and has no escape
    for it, so `*` is sent as `_` and matches any single character.
    """
    escaped = (
        search.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
        .replace("*", "_")
    )
    return f"%{escaped}%"


def _quote(value: str) -> str:
    """Quote a value for use inside a PostgREST or=(...) filter."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class BlogRepository(BaseRepository[Blog]):
    """
    Repository for blog data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def create(
        self,
        owner: str,
        title: str,
        content: str,
        category: Optional[str] = None,
    ) -> Blog:
        """
        Create a new blog record.

        Returns:
            Created Blog with generated ID and timestamps.
        """
        data = {
            "owner": owner,
            "title": title,
            "content": content,
            "category": category,
        }
        result = self._execute("create_blog", self._db.table(BLOGS_TABLE).insert(data))
        return self._map_to_blog(result.data[0])

    def get_by_id(self, blog_id: str) -> Optional[Blog]:
        """
        Get a blog by ID.

        Returns:
            Blog if found, None otherwise.
        """
        result = self._execute(
            "get_blog",
            self._db.table(BLOGS_TABLE).select("*").eq("id", blog_id).limit(1),
        )
        if not result.data:
            return None
        return self._map_to_blog(result.data[0])

    def list_blogs(
        self,
        page: int = 1,
        limit: int = 10,
        owner: Optional[str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> tuple[list[Blog], int]:
        """
        List blogs with filtering and pagination, newest first.

        Args:
            page: Page number (1-indexed).
            limit: Items per page.
            owner: Restrict to one owner's blogs.
            category: Exact category match.
            search: Case-insensitive literal substring of title or content.

        Returns:
            The page of blogs, each with its owner_profile, and the total
            number of matches.
        """
        offset = (page - 1) * limit

        query = self._db.table(BLOGS_TABLE).select(LIST_COLUMNS, count="exact")
        if owner:
            query = query.eq("owner", owner)
        if category:
            query = query.eq("category", category)
        if search:
            pattern = _quote(_contains_pattern(search))
            query = query.or_(f"title.ilike.{pattern},content.ilike.{pattern}")

        query = query.order("created_at", desc=True).range(offset, offset + limit - 1)
        result = self._execute("list_blogs", query)

        blogs = [self._map_to_blog(row) for row in result.data]
        return blogs, result.count or 0

    def update(self, blog_id: str, changes: dict[str, Any]) -> Optional[Blog]:
        """
        Apply changes to a blog.

        Returns:
            The updated Blog, or None if no row matched (deleted meanwhile).
        """
        data = {**changes, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(
            "update_blog",
            self._db.table(BLOGS_TABLE).update(data).eq("id", blog_id),
        )
        if not result.data:
            return None
        return self._map_to_blog(result.data[0])

    def delete(self, blog_id: str) -> bool:
        """
        Delete a blog.

        Returns:
            True if a row was deleted.
        """
        result = self._execute(
            "delete_blog",
            self._db.table(BLOGS_TABLE).delete().eq("id", blog_id),
        )
        return bool(result.data)

    def ping(self) -> None:
        """Run a trivial query; raises DatabaseError if storage is unreachable."""
        self._execute("ping", self._db.table(BLOGS_TABLE).select("id").limit(1))

    def _map_to_blog(self, data: dict[str, Any]) -> Blog:
        """Map database row to Blog model."""
        return Blog(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            category=data.get("category"),
            owner=str(data["owner"]),
            owner_profile=data.get("owner_profile"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
