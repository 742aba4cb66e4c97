from abc import ABC, abstractmethod

from app.domain.models import BlogPost


class BlogPostPort(ABC):
    """Storage contract for blog posts. Implementations own id allocation."""

    @abstractmethod
    async def list_blog_posts(self) -> list[BlogPost]:
        """Return every stored post in insertion order."""
        ...

    @abstractmethod
    async def get_blog_post(self, post_id: int) -> BlogPost | None:
        """Fetch a single post by id, or None if it does not exist."""
        ...

    @abstractmethod
    async def create_blog_post(self, title: str, text: str) -> BlogPost:
        """Assign the next id, store a new post and return it."""
        ...

    @abstractmethod
    async def update_blog_post(self, post_id: int, text: str) -> BlogPost | None:
        """Replace the text of a post. Returns None if the id is unknown."""
        ...

    @abstractmethod
    async def delete_blog_post(self, post_id: int) -> bool:
        """Remove a post. Returns False if the id is unknown."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every post without resetting id allocation."""
        ...
