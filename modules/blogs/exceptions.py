"""
Blogs module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError

from .models import BlogAction


class BlogNotFoundError(NotFoundError):
    """Raised when a blog is not found."""

    def __init__(self, blog_id: str):
        super().__init__(
            "Blog not found.",
            code="BLOG_NOT_FOUND",
            details={"blog_id": blog_id},
        )


class BlogAccessDeniedError(AuthorizationError):
    """
    Raised when a user tries to change a blog they do not own.

    The message names the attempted action; nothing about the real
    owner is included.
    """

    def __init__(self, blog_id: str, action: BlogAction):
        super().__init__(
            f"Not authorized to {action.value} this blog.",
            code="BLOG_ACCESS_DENIED",
            details={"blog_id": blog_id, "action": action.value},
        )
        self.action = action
