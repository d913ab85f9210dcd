"""
Blogs module interface.

The API layer depends on IBlogService for all blog operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    Blog,
    BlogListResponse,
    CreateBlogRequest,
    UpdateBlogRequest,
)


@runtime_checkable
class IBlogService(Protocol):
    """
    Interface for blog operations.

    Every method receives the authenticated principal explicitly.
    """

    async def create_blog(
        self,
        user: AuthenticatedUser,
        request: CreateBlogRequest,
    ) -> Blog:
        """
        Create a blog owned by the caller.

        Args:
            user: Authenticated caller, becomes the owner
            request: Blog fields

        Returns:
            The created blog
        """
        ...

    async def list_blogs(
        self,
        user: AuthenticatedUser,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> BlogListResponse:
        """
        List blogs visible to the caller, newest first.

        Args:
            user: Authenticated caller
            page: Page number (1-indexed)
            limit: Items per page
            category: Optional exact category filter
            search: Optional case-insensitive title/content search

        Returns:
            Paginated list of blogs
        """
        ...

    async def get_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
    ) -> Blog:
        """
        Get a blog by ID.

        Raises:
            BlogNotFoundError: If the blog doesn't exist or isn't visible
        """
        ...

    async def update_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
        request: UpdateBlogRequest,
    ) -> Blog:
        """
        Update a blog the caller owns.

        Raises:
            BlogNotFoundError: If the blog doesn't exist
            BlogAccessDeniedError: If the caller is not the owner
        """
        ...

    async def delete_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
    ) -> None:
        """
        Delete a blog the caller owns.

        Raises:
            BlogNotFoundError: If the blog doesn't exist
            BlogAccessDeniedError: If the caller is not the owner
        """
        ...
