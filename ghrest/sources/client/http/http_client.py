import logging
from typing import Dict, Optional

import httpx  # type: ignore

from ghrest.sources.client.http.http_request import HTTPRequest
from ghrest.sources.client.http.http_response import HTTPResponse
from ghrest.sources.client.iclient import IClient


class HTTPClient(IClient):
    """
    HTTP client holding one pooled httpx.AsyncClient.

    The underlying client is created on first use and reused by every
    request until close() is called, so concurrent requests share one
    connection pool. Nothing on this object is mutated after the client
    has been created.

    Args:
        headers: Headers sent with every request
        timeout: Default request timeout in seconds (default: 30.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        transport: Optional httpx transport, mainly for tests
        logger: Optional logger instance
    """
    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure client is created and available.
        """
        if self.client is None:
            self.client = httpx.AsyncClient(
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self.transport,
            )
        return self.client

    async def execute(self, request: HTTPRequest, **kwargs) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            kwargs: Additional keyword arguments to pass to the request
        Returns:
            A HTTPResponse object containing the response from the server
        Raises:
            httpx.HTTPError: If the request could not be completed
        """
        client = await self._ensure_client()

        # Client headers are sent by httpx; request headers take precedence
        request_kwargs = {
            "params": request.query_params,
            "headers": request.headers or None,
            **kwargs
        }

        if isinstance(request.body, (dict, list)):
            request_kwargs["json"] = request.body
        elif isinstance(request.body, bytes):
            request_kwargs["content"] = request.body
        elif isinstance(request.body, str):
            request_kwargs["content"] = request.body.encode("utf-8")

        response = await client.request(request.method, request.url, **request_kwargs)
        return HTTPResponse(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
