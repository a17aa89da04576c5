import pytest
from fastapi.testclient import TestClient

from main import app
from services.comments import CommentService
from services.posts import PostService
from services.store import PostStore


@pytest.fixture(scope="function")
def client():
    """Test client with a fresh in-memory store (the lifespan runs per test)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store():
    return PostStore()


@pytest.fixture
def post_service(store):
    return PostService(store)


@pytest.fixture
def comment_service(store):
    return CommentService(store)


@pytest.fixture
def sample_post_data():
    return {
        "title": "Hello World",
        "author": "Alice",
        "content": "Python makes in-memory stores easy.",
        "tags": ["python", "intro"],
    }
