"""Async HTTP client for the monitor deployment API."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import TypeAdapter

from .config import (
    CREATE_DEPLOYMENT_PATH,
    DEFAULT_REQUEST_TIMEOUT,
    DELETE_DEPLOYMENT_PATH,
    DEPLOY_DEPLOYMENT_PATH,
    DEPLOYMENT_PATH,
    LIST_DEPLOYMENTS_PATH,
    LOGIN_PATH,
)
from .exceptions import (
    LoginError,
    ResponseDecodeError,
    ResponseStatusError,
    TransportError,
)
from .models import Deployment, LoginCredentials, WireModel
from .utils.http import create_http_client

log = logging.getLogger(__name__)

T = TypeVar("T")

OnDelete = Callable[[Deployment], Union[None, Awaitable[None]]]

_DEPLOYMENT_MAP = TypeAdapter(Dict[str, Deployment])


class Client:
    """Client for the monitor deployment API.

    Holds the normalized base URL, the bearer token and an httpx transport.
    The URL and token never change after construction, so one instance can
    serve concurrent calls.

    Example:
        async with await Client.login(url, "admin", "secret") as client:
            created = await client.create_deployment(deployment)
            await client.deploy(created.id)
    """

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client with a pre-obtained token. No request is made.

        Args:
            url: Base URL of the monitor API. One trailing slash is stripped.
            token: Bearer token returned by a previous login.
            timeout: Request timeout in seconds for the owned transport.
            http_client: Optional transport to use instead of creating one.
                A transport passed in is never closed by this client.
        """
        self.url = self.parse_url(url)
        self.token = token
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def with_token(cls, url: str, token: str, **kwargs: Any) -> "Client":
        return cls(url, token, **kwargs)

    @classmethod
    async def login(
        cls,
        url: str,
        username: str,
        password: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "Client":
        """Log in with local credentials and return an authenticated client.

        The raw body of the login response is used as the bearer token.

        Raises:
            LoginError: If the login request fails or is not answered with 200.
        """
        base_url = cls.parse_url(url)
        transport = http_client or create_http_client(timeout=timeout)
        credentials = LoginCredentials(username=username, password=password)

        log.debug(f"Logging in to {base_url} as {username}")
        try:
            response = await transport.post(
                f"{base_url}{LOGIN_PATH}",
                json=credentials.to_wire(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            log.error(f"Login request to {base_url} failed: {e}")
            if http_client is None:
                await transport.aclose()
            raise LoginError(f"Login request to {base_url} failed: {e}") from e

        if response.status_code != 200:
            if http_client is None:
                await transport.aclose()
            raise LoginError(
                f"Login to {base_url} rejected: {response.status_code}: {response.text}"
            )

        client = cls(base_url, response.text, timeout=timeout, http_client=transport)
        client._owns_client = http_client is None
        log.info(f"Logged in to {base_url} as {username}")
        return client

    @staticmethod
    def parse_url(url: str) -> str:
        """Strip a single trailing slash from the base URL."""
        if url.endswith("/"):
            return url[:-1]
        return url

    async def create_deployment(self, deployment: Deployment) -> Deployment:
        """Create a deployment and return the server's copy, including its id."""
        created = await self._post(
            CREATE_DEPLOYMENT_PATH, deployment.into_create_body(), Deployment
        )
        log.info(f"Created deployment: {created.id} - {created.name}")
        return created

    async def deploy(self, deployment_id: str) -> str:
        """Trigger the server-side deployment action. Returns the raw response text."""
        return await self._get_string(
            DEPLOY_DEPLOYMENT_PATH.format(deployment_id=deployment_id)
        )

    async def get_deployment(self, deployment_id: str) -> Deployment:
        return await self._get(
            DEPLOYMENT_PATH.format(deployment_id=deployment_id), Deployment
        )

    async def delete_deployment(self, deployment_id: str) -> str:
        """Delete a deployment. Returns the raw response text."""
        result = await self._delete_string(
            DELETE_DEPLOYMENT_PATH.format(deployment_id=deployment_id)
        )
        log.info(f"Deleted deployment: {deployment_id}")
        return result

    async def get_deployments(self) -> Dict[str, Deployment]:
        """List all deployments, keyed by their server-assigned identifier."""
        response = await self._send("GET", LIST_DEPLOYMENTS_PATH)
        return self._decode(response, _DEPLOYMENT_MAP)

    async def delete_all_deployments_on_server(
        self, server_id: str, on_delete: Optional[OnDelete] = None
    ) -> None:
        """Delete every deployment that belongs to ``server_id``, one at a time.

        ``on_delete`` is called with each deleted deployment right after its
        delete succeeds; awaitable results are awaited. The first failing
        delete is re-raised and the remaining deployments are left untouched.
        Deletions already done are not rolled back.
        """
        deployments = await self.get_deployments()
        targets = [
            (deployment_id, deployment)
            for deployment_id, deployment in deployments.items()
            if deployment.server_id == server_id
        ]
        log.debug(f"Deleting {len(targets)} deployments on server {server_id}")

        for deployment_id, deployment in targets:
            await self.delete_deployment(deployment_id)
            if on_delete is not None:
                result = on_delete(deployment)
                if inspect.isawaitable(result):
                    await result

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    async def _send(
        self, method: str, endpoint: str, body: Optional[WireModel] = None
    ) -> httpx.Response:
        """Send an authenticated request and return the 200 response.

        Raises:
            TransportError: If no response was received.
            ResponseStatusError: If the status is anything but 200.
        """
        client = await self._get_client()
        headers = self._auth_headers()
        kwargs: Dict[str, Any] = {"headers": headers}
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body.to_wire()

        url = f"{self.url}{endpoint}"
        log.debug(f"{method} {url}")
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            log.error(f"{method} {url} failed: {e}")
            raise TransportError(str(e)) from e

        log.debug(f"{method} {url} -> {response.status_code}")
        if response.status_code != 200:
            raise ResponseStatusError(response.status_code, response.text)
        return response

    def _decode(self, response: httpx.Response, target: Union[Type[T], TypeAdapter]) -> T:
        adapter = target if isinstance(target, TypeAdapter) else TypeAdapter(target)
        try:
            return adapter.validate_python(response.json())
        except ValueError as e:  # JSONDecodeError and ValidationError
            raise ResponseDecodeError(response.status_code, str(e)) from e

    async def _get(self, endpoint: str, target: Type[T]) -> T:
        response = await self._send("GET", endpoint)
        return self._decode(response, target)

    async def _get_string(self, endpoint: str) -> str:
        response = await self._send("GET", endpoint)
        return response.text

    async def _post(self, endpoint: str, body: WireModel, target: Type[T]) -> T:
        response = await self._send("POST", endpoint, body)
        return self._decode(response, target)

    async def _delete_string(self, endpoint: str) -> str:
        response = await self._send("DELETE", endpoint)
        return response.text

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP transport."""
        if self._client is None or self._client.is_closed:
            self._client = create_http_client(timeout=self.timeout)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
