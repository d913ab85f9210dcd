"""
Blogs service implementation.

Every update and delete follows the same sequence: resolve the blog
(404 if missing), ask the ownership guard (403 if not the owner), then
mutate. No other code path checks ownership.
"""

import asyncio
import logging
import math
from typing import Optional

from shared.models import AuthenticatedUser

from .interfaces import IBlogService
from .models import (
    Blog,
    BlogAction,
    BlogListResponse,
    BlogReadScope,
    CreateBlogRequest,
    Pagination,
    UpdateBlogRequest,
)
from .ownership import authorize, is_owner
from .repository import BlogRepository
from .exceptions import BlogNotFoundError

logger = logging.getLogger(__name__)


class BlogService(IBlogService):
    """
    Blog service with Supabase backend.

    Implements IBlogService with a configurable read policy.
    """

    def __init__(
        self,
        repository: BlogRepository,
        read_scope: BlogReadScope = BlogReadScope.ALL,
    ):
        self._repository = repository
        self._read_scope = read_scope

    async def create_blog(
        self,
        user: AuthenticatedUser,
        request: CreateBlogRequest,
    ) -> Blog:
        """Create a new blog owned by the caller."""
        blog = await asyncio.to_thread(
            self._repository.create,
            user.id,
            request.title,
            request.content,
            request.category,
        )
        logger.info(f"Account {user.id} created blog {blog.id}")
        return blog

    async def list_blogs(
        self,
        user: AuthenticatedUser,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> BlogListResponse:
        """List blogs visible under the read policy."""
        owner = user.id if self._read_scope == BlogReadScope.OWNER else None

        blogs, total = await asyncio.to_thread(
            self._repository.list_blogs,
            page,
            limit,
            owner,
            category,
            search,
        )

        return BlogListResponse(
            blogs=blogs,
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit),
            ),
        )

    async def get_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
    ) -> Blog:
        """Get a blog, hiding other owners' blogs under the owner read policy."""
        blog = await self._resolve(blog_id)
        if self._read_scope == BlogReadScope.OWNER and not is_owner(user.id, blog):
            raise BlogNotFoundError(blog_id)
        return blog

    async def update_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
        request: UpdateBlogRequest,
    ) -> Blog:
        """Update a blog after the ownership check."""
        blog = await self._resolve(blog_id)
        authorize(user.id, blog, BlogAction.EDIT)

        changes = request.changes()
        if not changes:
            return blog

        updated = await asyncio.to_thread(self._repository.update, blog_id, changes)
        if updated is None:
            # Deleted between the read and the write
            raise BlogNotFoundError(blog_id)
        return updated

    async def delete_blog(
        self,
        user: AuthenticatedUser,
        blog_id: str,
    ) -> None:
        """Delete a blog after the ownership check."""
        blog = await self._resolve(blog_id)
        authorize(user.id, blog, BlogAction.DELETE)

        deleted = await asyncio.to_thread(self._repository.delete, blog_id)
        if not deleted:
            raise BlogNotFoundError(blog_id)
        logger.info(f"Account {user.id} deleted blog {blog_id}")

    async def _resolve(self, blog_id: str) -> Blog:
        blog = await asyncio.to_thread(self._repository.get_by_id, blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id)
        return blog
