"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To back the API with a real
database, change the adapter instantiation here. Nothing else in the
codebase changes. Tests swap the store via ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from app.adapters.memory_adapter import InMemoryBlogPostAdapter
from app.config import settings
from app.ports.blog_post_port import BlogPostPort
from app.services.blog_post_service import BlogPostService


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_memory_adapter() -> InMemoryBlogPostAdapter:
    # One store for the lifetime of the process
    return InMemoryBlogPostAdapter(seed_sample_posts=settings.seed_sample_posts)


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_blog_post_store() -> BlogPostPort:
    """Inject the blog post store."""
    return _get_memory_adapter()


# ── Domain Services ───────────────────────────────────────────


def get_blog_post_service(
    store: BlogPostPort = Depends(get_blog_post_store),
) -> BlogPostService:
    """Injects the store into the blog post domain service."""
    return BlogPostService(store=store)
