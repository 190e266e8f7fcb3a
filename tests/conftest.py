"""Pytest fixtures and configuration for habitica-py tests."""

from typing import Any

import pytest
import respx

from habitica import Connection, Habitica

ENDPOINT = "https://habitica.com"
API_URL = f"{ENDPOINT}/api/v3"

USER_ID = "myUuid"
API_KEY = "myToken"

SAMPLE_USER = {
    "id": "new-user-id",
    "apiToken": "new-api-token",
    "auth": {"local": {"username": "someone", "email": "someone@example.com"}},
}


def create_api_response(data: Any) -> dict[str, Any]:
    """Create a successful Habitica API envelope."""
    return {"success": True, "data": data}


def create_error_response(error: str, message: str) -> dict[str, Any]:
    """Create a Habitica API error body."""
    return {"success": False, "error": error, "message": message}


@pytest.fixture
def connection():
    """Authenticated connection against the production endpoint."""
    return Connection(id=USER_ID, api_key=API_KEY, endpoint=ENDPOINT)


@pytest.fixture
def anonymous_connection():
    """Connection without credentials."""
    return Connection(endpoint=ENDPOINT)


@pytest.fixture
def api():
    """Habitica client without credentials."""
    return Habitica(endpoint=ENDPOINT)


@pytest.fixture
def mock_api():
    """Fixture to mock the Habitica API using respx."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock
