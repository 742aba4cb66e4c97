"""
Blog post endpoints — list, fetch, create, update, delete.
All logic delegated to BlogPostService. EntityNotFoundError raised by the
service is turned into a 404 by the handler registered in main.py.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.config import settings
from app.dependencies import get_blog_post_service
from app.domain.models import BlogPost, BlogPostCreate, BlogPostUpdate
from app.services.blog_post_service import BlogPostService

router = APIRouter(prefix=f"{settings.api_prefix}/blog-posts", tags=["Blog Posts"])


@router.get("", response_model=list[BlogPost])
async def list_blog_posts(
    service: BlogPostService = Depends(get_blog_post_service),
):
    """List all blog posts in creation order."""
    return await service.get_all()


@router.get("/{post_id}", response_model=BlogPost)
async def get_blog_post(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Get a single blog post by id."""
    post = await service.get_by_id(post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Blog post not found",
        )
    return post


@router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    body: BlogPostCreate,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Create a new blog post. The id is assigned by the store."""
    return await service.create(title=body.title, text=body.text)


@router.put("/{post_id}", response_model=BlogPost)
async def update_blog_post(
    post_id: int,
    body: BlogPostUpdate,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Replace the text of a blog post. The title cannot be changed."""
    return await service.update(post_id, text=body.text)


@router.delete("/{post_id}", status_code=status.HTTP_200_OK)
async def delete_blog_post(
    post_id: int,
    service: BlogPostService = Depends(get_blog_post_service),
):
    """Delete a blog post. Responds with an empty body."""
    await service.delete(post_id)
    return Response(status_code=status.HTTP_200_OK)
