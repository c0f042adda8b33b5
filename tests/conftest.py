"""Pytest configuration and fixtures for Raindrop MCP Server tests."""

from unittest.mock import AsyncMock, Mock

import pytest
import respx

from raindrop_mcp_server.client import RaindropClient
from raindrop_mcp_server.config import DEFAULT_API_BASE, Settings
from raindrop_mcp_server.models import CollectionsResponse, SearchResponse


@pytest.fixture
def mock_raindrop_items() -> list[dict]:
    """Sample raindrops as returned by GET /raindrops/{id}."""
    return [
        {
            "_id": 101,
            "title": "Python Testing Best Practices",
            "link": "https://example.com/python-testing",
            "tags": ["python", "testing"],
            "created": "2024-03-21T10:30:00Z",
            "lastUpdate": "2024-03-22T08:00:00Z",
        },
        {
            "_id": 102,
            "title": "FastAPI Tutorial",
            "link": "https://example.com/fastapi-tutorial",
            "created": "2024-03-10T15:45:00Z",
            "lastUpdate": "2024-03-10T15:45:00Z",
        },
    ]


@pytest.fixture
def mock_collections_data() -> list[dict]:
    """Sample collections as returned by GET /collections."""
    return [
        {
            "_id": 1001,
            "title": "Reading",
            "count": 12,
            "created": "2023-11-02T09:00:00Z",
        },
        {
            "_id": 1002,
            "title": "Python",
            "count": 4,
            "created": "2024-01-05T09:20:00Z",
            "parent": {"$id": 1001},
        },
    ]


@pytest.fixture
def search_response(mock_raindrop_items) -> SearchResponse:
    return SearchResponse.model_validate({"items": mock_raindrop_items, "count": 2})


@pytest.fixture
def collections_response(mock_collections_data) -> CollectionsResponse:
    return CollectionsResponse.model_validate({"items": mock_collections_data})


@pytest.fixture
def valid_token() -> str:
    """Raindrop API token for testing."""
    return "test-token"


@pytest.fixture
def settings(valid_token) -> Settings:
    return Settings(raindrop_token=valid_token)


@pytest.fixture
def api_token(monkeypatch, valid_token):
    """Set RAINDROP_TOKEN environment variable."""
    monkeypatch.setenv("RAINDROP_TOKEN", valid_token)
    return valid_token


@pytest.fixture
def mock_api():
    """Mock the Raindrop REST API."""
    with respx.mock(base_url=DEFAULT_API_BASE, assert_all_called=False) as respx_mock:
        yield respx_mock


@pytest.fixture
def mock_client():
    """Create a mocked RaindropClient for handler tests."""
    client = Mock(spec=RaindropClient)
    client.create_bookmark = AsyncMock()
    client.search_bookmarks = AsyncMock()
    client.list_collections = AsyncMock()
    client.close = AsyncMock()
    return client
