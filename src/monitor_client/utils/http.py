"""HTTP utilities for monitor API communication."""

from typing import Optional

import httpx

from ..config import DEFAULT_REQUEST_TIMEOUT
from .user_agent import get_user_agent


def create_http_client(
    timeout: Optional[float] = None,
) -> httpx.AsyncClient:
    """Create an httpx AsyncClient for the monitor API.

    Sends the client User-Agent on every request. The bearer token is added
    per request by the caller.

    Args:
        timeout: Request timeout in seconds. Defaults to DEFAULT_REQUEST_TIMEOUT.

    Returns:
        Configured httpx.AsyncClient

    Example:
        async with create_http_client() as client:
            response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
    """
    headers = {"User-Agent": get_user_agent()}

    timeout_config = timeout if timeout is not None else DEFAULT_REQUEST_TIMEOUT
    return httpx.AsyncClient(timeout=timeout_config, headers=headers)
