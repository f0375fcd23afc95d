# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

from main import create_app
from models.enums import UserRole
from models.user import User


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_user():
    return User(
        id="1",
        email="admin@example.com",
        name="Admin User",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def renter_user():
    return User(
        id="2",
        email="renter@example.com",
        name="Renter User",
        role=UserRole.RENTER,
    )


@pytest.fixture
def mock_auth_user():
    """Shape of a Supabase GoTrue user."""
    def build(user_id="auth-1", email="renter@example.com", metadata=None):
        auth_user = Mock()
        auth_user.id = user_id
        auth_user.email = email
        auth_user.user_metadata = metadata if metadata is not None else {"name": "Renter User", "role": "RENTER"}
        return auth_user
    return build


@pytest.fixture(autouse=True)
def reset_cache():
    """Reset cache before each test."""
    from core.cache import cache_clear
    cache_clear()
    yield
    cache_clear()
