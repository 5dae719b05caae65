"""GitHub client module."""
from ghrest.sources.client.github.endpoint import EndPoint, HttpMethod, RouteEnum
from ghrest.sources.client.github.github import (
    GitHubClient,
    GitHubConfig,
    GitHubRESTClient,
    get_shared_client,
)

__all__ = [
    "EndPoint",
    "GitHubClient",
    "GitHubConfig",
    "GitHubRESTClient",
    "HttpMethod",
    "RouteEnum",
    "get_shared_client",
]
