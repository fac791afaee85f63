"""
Test configuration and fixtures for monitor-client tests.

Provides shared fixtures for:
- Deployment payloads as returned by the monitor API
- Mock HTTP responses and transports
- Clients wired to a mock transport
"""

from typing import Any, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest

from monitor_client import Client


@pytest.fixture
def sample_deployment_data() -> Dict[str, Any]:
    """Provide a deployment as serialized by the monitor API.

    Returns:
        Dictionary using the API wire field names.
    """
    return {
        "_id": "64b7f0c2a1b2c3d4e5f60718",
        "name": "api",
        "serverID": "server-1",
        "image": "nginx:latest",
        "ports": [{"local": "8080", "container": "80"}],
        "environment": [{"variable": "MODE", "value": "production"}],
        "restart": "unless-stopped",
        "dockerAccount": "acme",
    }


@pytest.fixture
def deployments_by_id() -> Dict[str, Dict[str, Any]]:
    """Provide a deployment map with three entries, two on server-1."""
    return {
        "dep-1": {"_id": "dep-1", "name": "api", "serverID": "server-1"},
        "dep-2": {"_id": "dep-2", "name": "db", "serverID": "server-2"},
        "dep-3": {"_id": "dep-3", "name": "worker", "serverID": "server-1"},
    }


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Provide a factory for mock httpx responses."""

    def _make(status_code: int = 200, json_data: Any = None, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def mock_http_client() -> AsyncMock:
    """Provide a mock httpx.AsyncClient that reports itself open."""
    http_client = AsyncMock()
    http_client.is_closed = False
    return http_client


@pytest.fixture
def client(mock_http_client: AsyncMock) -> Client:
    """Provide a client with a fixed token and a mock transport."""
    return Client("http://monitor.local/", "test-token", http_client=mock_http_client)
