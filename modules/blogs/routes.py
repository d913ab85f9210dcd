"""
Blog API endpoints.

Every endpoint requires a bearer token. Update and delete are further
restricted to the blog's owner by the blog service.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_blog_service
from shared.models import AuthenticatedUser

from .interfaces import IBlogService
from .models import (
    Blog,
    BlogCreatedResponse,
    BlogDeletedResponse,
    BlogListResponse,
    BlogUpdatedResponse,
    CreateBlogRequest,
    UpdateBlogRequest,
)

router = APIRouter()


@router.post("", response_model=BlogCreatedResponse, status_code=201)
async def create_blog(
    request: CreateBlogRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBlogService = Depends(get_blog_service),
) -> BlogCreatedResponse:
    """
    Create a new blog post owned by the caller.
    """
    blog = await service.create_blog(user, request)
    return BlogCreatedResponse(message="Blog created successfully.", blog=blog)


@router.get("", response_model=BlogListResponse)
async def list_blogs(
    category: Optional[str] = Query(default=None, description="Filter by category"),
    search: Optional[str] = Query(default=None, description="Search title and content"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBlogService = Depends(get_blog_service),
) -> BlogListResponse:
    """
    List blog posts, most recent first.
    """
    return await service.list_blogs(user, page, limit, category, search)


@router.get("/{blog_id}", response_model=Blog)
async def get_blog(
    blog_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBlogService = Depends(get_blog_service),
) -> Blog:
    """
    Get a single blog post.
    """
    return await service.get_blog(user, str(blog_id))


@router.put("/{blog_id}", response_model=BlogUpdatedResponse)
async def update_blog(
    blog_id: UUID,
    request: UpdateBlogRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBlogService = Depends(get_blog_service),
) -> BlogUpdatedResponse:
    """
    Update a blog post. Only the owner may do this.
    """
    updated = await service.update_blog(user, str(blog_id), request)
    return BlogUpdatedResponse(message="Blog updated successfully.", updated=updated)


@router.delete("/{blog_id}", response_model=BlogDeletedResponse)
async def delete_blog(
    blog_id: UUID,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IBlogService = Depends(get_blog_service),
) -> BlogDeletedResponse:
    """
    Delete a blog post. Only the owner may do this.
    """
    await service.delete_blog(user, str(blog_id))
    return BlogDeletedResponse(message="Blog deleted successfully.")
