"""
Concrete implementation of BlogPostPort backed by a process-local list.
Nothing survives a restart.
"""

import logging
import threading

from app.domain.models import BlogPost
from app.ports.blog_post_port import BlogPostPort

logger = logging.getLogger(__name__)

SAMPLE_POSTS = [
    ("Title 1", "Text 1"),
    ("Title 2", "Text 2"),
]


class InMemoryBlogPostAdapter(BlogPostPort):
    """
    Ordered list of posts plus a monotonically increasing id counter.

    One lock guards both the list and the counter, so concurrent requests
    never observe a half-applied mutation or receive a duplicate id.
    Records are copied on the way out; callers only change state through
    the methods below.
    """

    def __init__(self, seed_sample_posts: bool = False) -> None:
        self._lock = threading.Lock()
        self._posts: list[BlogPost] = []
        self._last_id = 0

        if seed_sample_posts:
            for title, text in SAMPLE_POSTS:
                self._insert(title, text)
            logger.info(f"Seeded {len(SAMPLE_POSTS)} sample blog posts")

    def _insert(self, title: str, text: str) -> BlogPost:
        # Caller must hold the lock (or be the constructor).
        self._last_id += 1
        post = BlogPost(id=self._last_id, title=title, text=text)
        self._posts.append(post)
        return post

    def _find(self, post_id: int) -> BlogPost | None:
        return next((p for p in self._posts if p.id == post_id), None)

    # ── Reads ─────────────────────────────────────────────────

    async def list_blog_posts(self) -> list[BlogPost]:
        with self._lock:
            return [p.model_copy() for p in self._posts]

    async def get_blog_post(self, post_id: int) -> BlogPost | None:
        with self._lock:
            post = self._find(post_id)
            return post.model_copy() if post else None

    # ── Writes ────────────────────────────────────────────────

    async def create_blog_post(self, title: str, text: str) -> BlogPost:
        with self._lock:
            return self._insert(title, text).model_copy()

    async def update_blog_post(self, post_id: int, text: str) -> BlogPost | None:
        with self._lock:
            post = self._find(post_id)
            if post is None:
                return None
            post.text = text
            return post.model_copy()

    async def delete_blog_post(self, post_id: int) -> bool:
        with self._lock:
            post = self._find(post_id)
            if post is None:
                return False
            self._posts.remove(post)
            return True

    async def clear(self) -> None:
        """Drop every post. The id counter is not reset; ids are never reused."""
        with self._lock:
            self._posts.clear()
