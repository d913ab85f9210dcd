"""
Ownership checks for blogs.

authorize() is the single place where write access to a blog is decided.
The blog service calls it once before every update and delete.
"""

import logging

from .exceptions import BlogAccessDeniedError
from .models import Blog, BlogAction

logger = logging.getLogger(__name__)


def is_owner(principal_id: str, blog: Blog) -> bool:
    return blog.owner == principal_id


def authorize(principal_id: str, blog: Blog, action: BlogAction) -> None:
    """
    Allow an action on an existing blog only for its owner.

    Args:
        principal_id: Account ID of the authenticated caller
        blog: The resolved blog (callers raise BlogNotFoundError first)
        action: The action being attempted

    Raises:
        BlogAccessDeniedError: If the caller is not the owner
    """
    if not is_owner(principal_id, blog):
        logger.info(f"Denied {action.value} on blog {blog.id} for account {principal_id}")
        raise BlogAccessDeniedError(blog.id, action)
