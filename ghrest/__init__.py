"""Async client for the GitHub REST API."""

from ghrest.version import __version__

from ghrest.exceptions.github_exceptions import (
    DeserializationError,
    GitHubError,
    TransportError,
)
from ghrest.sources.client.github.endpoint import EndPoint, HttpMethod
from ghrest.sources.client.github.github import (
    GitHubClient,
    GitHubConfig,
    get_shared_client,
)
from ghrest.sources.external.github.github_ import GitHubDataSource
from ghrest.sources.external.github.routes import Route

__all__ = [
    "DeserializationError",
    "EndPoint",
    "GitHubClient",
    "GitHubConfig",
    "GitHubDataSource",
    "GitHubError",
    "HttpMethod",
    "Route",
    "TransportError",
    "get_shared_client",
]
