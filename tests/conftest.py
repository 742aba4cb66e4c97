import pytest
from fastapi.testclient import TestClient

from app.adapters.memory_adapter import InMemoryBlogPostAdapter
from app.dependencies import get_blog_post_store
from app.services.blog_post_service import BlogPostService
from main import app


@pytest.fixture
def store():
    return InMemoryBlogPostAdapter()


@pytest.fixture
def service(store):
    return BlogPostService(store=store)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_blog_post_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
