"""
pytest configuration and fixtures for the Users API test suite
"""

import pytest
import pytest_asyncio
import httpx

from users_api.app import create_app
from users_api.repositories import InMemoryUserRepository


@pytest.fixture
def repository():
    """Fresh in-memory store per test"""
    return InMemoryUserRepository()


@pytest.fixture
def app(repository):
    return create_app(repository)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the application"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def alice():
    return {"name": "Alice", "email": "alice@example.com"}


@pytest.fixture
def bob():
    return {"name": "Bob", "email": "bob@example.com"}
