"""
HTTP client that dispatches request models through httpx.
"""

import httpx

from httpcat.config import ClientConfig, get_config
from httpcat.exceptions import TransportError
from httpcat.http.models import PostRequest, PutRequest, Request
from httpcat.logging_config import get_logger


logger = get_logger(__name__)


class HTTPClient:
    """Sends one request model at a time with the configured default headers."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or get_config()
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self.config.default_headers(),
                transport=self.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def build_request(self, request: Request) -> httpx.Request:
        """Translate a request model into an httpx request."""
        client = self._get_client()
        form = request.form() if isinstance(request, (PostRequest, PutRequest)) else None
        return client.build_request(request.method, request.url, data=form)

    async def send(self, request: Request) -> httpx.Response:
        """Send request and return the response with its body still unread.

        The caller owns the returned response and must close it.
        """
        http_request = self.build_request(request)
        logger.debug("Sending %s %s", request.method, request.url)

        try:
            response = await self._get_client().send(http_request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        logger.debug(
            "Received %s %s from %s",
            response.status_code, response.reason_phrase, request.url,
        )
        return response
