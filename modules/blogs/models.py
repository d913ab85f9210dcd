"""
Blogs module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class BlogAction(str, Enum):
    """State-changing actions that require ownership."""

    EDIT = "edit"
    DELETE = "delete"


class BlogReadScope(str, Enum):
    """Which blogs an authenticated user may read."""

    ALL = "all"      # every blog, regardless of owner
    OWNER = "owner"  # only the user's own blogs


class BlogOwner(BaseModel):
    """Public fields of a blog's author."""

    id: str
    name: str
    email: str


class Blog(BaseModel):
    """
    A blog post as stored in the blogs table.

    owner_profile is only filled in by listings.
    """

    id: str
    title: str
    content: str
    category: Optional[str] = None
    owner: str = Field(..., description="Account ID of the author")
    owner_profile: Optional[BlogOwner] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _require_text(v: Optional[str], field: str) -> Optional[str]:
    if v is None or not v.strip():
        raise ValueError(f"{field} cannot be empty")
    return v


class CreateBlogRequest(BaseModel):
    """Request to create a blog post. The owner is always the caller."""

    title: str = Field(..., description="Blog title")
    content: str = Field(..., description="Blog content")
    category: Optional[str] = Field(None, description="Blog category")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return _require_text(v, "Title")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        return _require_text(v, "Content")


class UpdateBlogRequest(BaseModel):
    """
    Partial update of a blog post.

    Only fields present in the request are changed. Unknown fields,
    including owner, are ignored.
    """

    title: Optional[str] = Field(None, description="Blog title")
    content: Optional[str] = Field(None, description="Blog content")
    category: Optional[str] = Field(None, description="Blog category")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v, "Title")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v, "Content")

    def changes(self) -> dict:
        """Fields explicitly set by the client."""
        return self.model_dump(exclude_unset=True)


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class BlogListResponse(BaseModel):
    """Paginated list of blogs."""

    blogs: list[Blog]
    pagination: Pagination


class BlogCreatedResponse(BaseModel):
    message: str
    blog: Blog


class BlogUpdatedResponse(BaseModel):
    message: str
    updated: Blog


class BlogDeletedResponse(BaseModel):
    message: str
