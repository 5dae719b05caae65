import logging
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx  # type: ignore
from pydantic import BaseModel, TypeAdapter, ValidationError  # type: ignore

from ghrest.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GitHubSettings,
)
from ghrest.exceptions.github_exceptions import DeserializationError, TransportError
from ghrest.sources.client.github.endpoint import EndPoint
from ghrest.sources.client.http.http_client import HTTPClient
from ghrest.sources.client.http.http_request import HTTPRequest
from ghrest.sources.client.http.http_response import HTTPResponse
from ghrest.sources.client.iclient import IClient
from ghrest.utils.logger import create_logger

Query = Union[Mapping[str, Any], Sequence[Tuple[str, Any]], BaseModel]
Body = Union[bytes, str, Mapping[str, Any], List[Any], BaseModel]
ResponseHook = Callable[[EndPoint, HTTPResponse], None]

# Longest slice of a response body kept in logs and exceptions
MAX_LOGGED_BODY = 2000

logger = create_logger("ghrest.github")


class GitHubRESTClient(HTTPClient):
    """GitHub REST client bound to one API host

    Only the identifying User-Agent header is attached by default; anything in
    ``headers`` is added to every request.

    Args:
        base_url: The API host, e.g. https://api.github.com
        user_agent: The User-Agent header value
        timeout: Default request timeout in seconds
        follow_redirects: Whether to follow HTTP redirects
        headers: Extra headers sent with every request
        transport: Optional httpx transport
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        follow_redirects: bool = True,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            headers={"User-Agent": user_agent, **(headers or {})},
            timeout=timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            logger=logger,
        )
        self.base_url = base_url.rstrip("/")

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.base_url


@dataclass
class GitHubConfig:
    """Configuration for the GitHub REST client

    Args:
        base_url: The API host (default: https://api.github.com)
        user_agent: The User-Agent header value
        timeout: Default request timeout in seconds
        follow_redirects: Whether to follow HTTP redirects
        headers: Extra headers sent with every request
    """
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: GitHubSettings) -> "GitHubConfig":
        return cls(
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        )

    def create_client(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> GitHubRESTClient:
        return GitHubRESTClient(
            base_url=self.base_url,
            user_agent=self.user_agent,
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            headers=self.headers,
            transport=transport,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def _query_params(query: Optional[Query]) -> Optional[Any]:
    if query is None:
        return None
    if isinstance(query, BaseModel):
        return query.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(query, Mapping):
        return dict(query)
    return list(query)


def _body_payload(body: Optional[Body]) -> Union[bytes, str, Dict[str, Any], List[Any], None]:
    if body is None or isinstance(body, (bytes, str, list)):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    raise TypeError(f"Unsupported request body type: {type(body).__name__}")


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _error_message(response: HTTPResponse) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.response.reason_phrase or f"HTTP {response.status}"


class GitHubClient(IClient):
    """Builder and request executor for the GitHub REST API

    Every convenience method on GitHubDataSource ends up in ``req``: one
    endpoint, one HTTP round trip, one typed result.
    """

    def __init__(self, client: GitHubRESTClient, on_response: Optional[ResponseHook] = None) -> None:
        """Initialize with a GitHub REST client object"""
        self.client = client
        self.on_response = on_response

    def get_client(self) -> GitHubRESTClient:
        """Return the GitHub REST client object"""
        return self.client

    def get_base_url(self) -> str:
        """Return the base URL"""
        return self.client.get_base_url()

    @classmethod
    def build_with_config(
        cls,
        config: GitHubConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_response: Optional[ResponseHook] = None,
    ) -> "GitHubClient":
        """Build GitHubClient with configuration"""
        return cls(config.create_client(transport), on_response=on_response)

    @classmethod
    def build_from_env(cls, log: Optional[logging.Logger] = None) -> "GitHubClient":
        """Build GitHubClient from GITHUB_* environment variables (and .env)

        Args:
            log: Logger used to report configuration problems
        Returns:
            GitHubClient instance
        """
        log = log or logger
        try:
            settings = GitHubSettings.from_env()
        except (ValueError, ValidationError) as e:
            log.error(f"Failed to load GitHub client settings: {str(e)}")
            raise
        logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
        return cls.build_with_config(GitHubConfig.from_settings(settings))

    async def req(
        self,
        endpoint: EndPoint,
        query: Optional[Query] = None,
        body: Optional[Body] = None,
        response_model: Any = Any,
        *,
        timeout: Optional[float] = None,
    ) -> Any:
        """Execute one request and deserialize the response.

        Args:
            endpoint: The endpoint to call
            query: Query parameters, serialized into the query string
            body: Request body. Bytes and str are sent as-is, mappings, lists
                and pydantic models as JSON
            response_model: Type the JSON body is validated into. None skips
                decoding and returns None, str returns the body text verbatim
            timeout: Overrides the client timeout for this request
        Returns:
            The response body validated as ``response_model``
        Raises:
            TransportError: The request failed or the status code signals an error
            DeserializationError: The body is not JSON or does not match ``response_model``
        """
        request = HTTPRequest(
            url=self.get_base_url() + endpoint.path(),
            method=endpoint.method.value,
            query_params=_query_params(query),
            body=_body_payload(body),
        )
        kwargs = {} if timeout is None else {"timeout": timeout}

        try:
            response = await self.client.execute(request, **kwargs)
        except httpx.HTTPError as e:
            logger.debug(f"GitHub {endpoint} failed: {type(e).__name__}: {e}")
            raise TransportError(
                f"{type(e).__name__}: {e}" if str(e) else type(e).__name__,
                endpoint=str(endpoint),
            ) from e

        text = response.text()
        logger.debug(f"GitHub {endpoint} -> {response.status}")
        logger.debug(f"GitHub {endpoint} body: {text[:MAX_LOGGED_BODY]}")
        if self.on_response is not None:
            self.on_response(endpoint, response)

        if response.is_error:
            raise TransportError(
                _error_message(response),
                endpoint=str(endpoint),
                status_code=response.status,
                details={"body": text[:MAX_LOGGED_BODY]},
            )

        if response_model is None:
            return None
        # Plain-text routes (zen, octocat) return the body as-is
        if response_model is str:
            return text

        try:
            return _adapter(response_model).validate_json(text)
        except ValidationError as e:
            raise DeserializationError(
                f"Response does not match {getattr(response_model, '__name__', response_model)}: "
                f"{e.error_count()} validation error(s)",
                endpoint=str(endpoint),
                body=text[:MAX_LOGGED_BODY],
                details={"errors": e.errors(include_url=False)},
            ) from e

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> "GitHubClient":
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


@lru_cache(maxsize=1)
def get_shared_client() -> GitHubClient:
    """Return the process-wide client, building it from the environment once"""
    logger.info("Creating shared GitHub client")
    return GitHubClient.build_from_env()
