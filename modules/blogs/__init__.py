"""
Blogs module.

Handles blog post CRUD with owner-only mutation.

Public API:
- IBlogService: Interface for blog operations
- Blog: A stored blog post
- authorize / is_owner: The ownership guard
"""

from .interfaces import IBlogService
from .models import (
    Blog,
    BlogOwner,
    BlogAction,
    BlogReadScope,
    BlogListResponse,
    CreateBlogRequest,
    UpdateBlogRequest,
    Pagination,
)
from .ownership import authorize, is_owner
from .exceptions import BlogNotFoundError, BlogAccessDeniedError

__all__ = [
    # Interface
    "IBlogService",
    # Models
    "Blog",
    "BlogOwner",
    "BlogAction",
    "BlogReadScope",
    "BlogListResponse",
    "CreateBlogRequest",
    "UpdateBlogRequest",
    "Pagination",
    # Ownership
    "authorize",
    "is_owner",
    # Exceptions
    "BlogNotFoundError",
    "BlogAccessDeniedError",
]
