"""
Blog post service — CRUD facade over the blog post store.
Single Responsibility: turns store outcomes into domain results and errors.
"""

import logging

from app.domain.errors import EntityNotFoundError
from app.domain.models import BlogPost
from app.ports.blog_post_port import BlogPostPort

logger = logging.getLogger(__name__)

ENTITY_NAME = "blog post"


class BlogPostService:
    """Handles blog post CRUD operations."""

    def __init__(self, store: BlogPostPort) -> None:
        self._store = store

    async def get_all(self) -> list[BlogPost]:
        """List every blog post in the order they were created."""
        return await self._store.list_blog_posts()

    async def get_by_id(self, post_id: int) -> BlogPost | None:
        """Fetch a single post. Absence is not an error here; callers decide."""
        return await self._store.get_blog_post(post_id)

    async def create(self, title: str, text: str) -> BlogPost:
        """Store a new post and return it with its assigned id."""
        post = await self._store.create_blog_post(title, text)
        logger.info(f"Created blog post {post.id}")
        return post

    async def update(self, post_id: int, text: str) -> BlogPost:
        """
        Replace the text of an existing post. Title and id are untouched.

        Raises EntityNotFoundError if no post has this id.
        """
        post = await self._store.update_blog_post(post_id, text)
        if post is None:
            logger.warning(f"Update failed: blog post {post_id} not found")
            raise EntityNotFoundError(ENTITY_NAME, post_id)
        logger.info(f"Updated blog post {post_id}")
        return post

    async def delete(self, post_id: int) -> None:
        """Raises EntityNotFoundError if no post has this id."""
        if not await self._store.delete_blog_post(post_id):
            logger.warning(f"Delete failed: blog post {post_id} not found")
            raise EntityNotFoundError(ENTITY_NAME, post_id)
        logger.info(f"Deleted blog post {post_id}")
