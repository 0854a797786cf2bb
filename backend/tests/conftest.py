"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import os

# Settings are read lazily; set test values before anything calls get_settings().
os.environ["JWT_SECRET"] = "test-secret-key-for-testing-only"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest

from api.app import create_app
from api.dependencies import get_auth_service, get_post_service, reset_container
from modules.auth.service import AuthService
from modules.posts.service import PostService
from shared.config import get_settings

from tests.fakes import (
    TEST_JWT_SECRET,
    InMemoryPostRepository,
    InMemoryUserRepository,
    auth_headers_for,
)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh settings and service container for every test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def auth_service(users: InMemoryUserRepository) -> AuthService:
    return AuthService(users=users)


@pytest.fixture
def post_service(posts: InMemoryPostRepository, users: InMemoryUserRepository) -> PostService:
    return PostService(posts=posts, users=users)


@pytest.fixture
def alice(users: InMemoryUserRepository):
    """A stored user."""
    return users.add_user(name="Alice", email="alice@x.com")


@pytest.fixture
def bob(users: InMemoryUserRepository):
    """Another stored user."""
    return users.add_user(name="Bob", email="bob@x.com")


@pytest.fixture
def app(auth_service: AuthService, post_service: PostService):
    """App wired to the in-memory repositories."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def alice_headers(alice) -> dict[str, str]:
    return auth_headers_for(alice.id)


@pytest.fixture
def bob_headers(bob) -> dict[str, str]:
    return auth_headers_for(bob.id)
