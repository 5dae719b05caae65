"""
Global pytest configuration and fixtures for the ghrest test suite.

Every test talks to an in-process httpx.MockTransport; nothing here opens a
network connection.
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Dict, Generator

import httpx  # type: ignore
import pytest  # type: ignore
import pytest_asyncio  # type: ignore
from faker import Faker  # type: ignore

# Add the project root to Python path
project_root: Path = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ghrest.sources.client.github.github import GitHubClient, GitHubConfig  # noqa: E402
from ghrest.sources.external.github.github_ import GitHubDataSource  # noqa: E402
from tests.utils.mock_transport import (  # noqa: E402
    TEST_BASE_URL,
    RecordingTransport,
    json_response,
    request_path,
)


fake: Faker = Faker()


# ============================================================================
# Session-level fixtures
# ============================================================================


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


# ============================================================================
# Function-level fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """
    Reset environment state around each test.
    GITHUB_* variables from the developer's shell are hidden from the tests.
    """
    original_env: Dict[str, str] = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("GITHUB_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def responses() -> Dict[str, httpx.Response]:
    """
    Canned responses keyed by "METHOD /path". Tests fill it in; requests
    with no entry get a GitHub-style 404.
    """
    return {}


@pytest.fixture
def transport(responses: Dict[str, httpx.Response]) -> RecordingTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        key = f"{request.method} {request_path(request)}"
        if key in responses:
            canned = responses[key]
            return httpx.Response(canned.status_code, headers=canned.headers, content=canned.content)
        return json_response(
            {"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
            status_code=404,
        )

    return RecordingTransport(handler)


@pytest_asyncio.fixture
async def github_client(transport: RecordingTransport) -> AsyncGenerator[GitHubClient, None]:
    """
    Provide a GitHubClient wired to the recording transport.

    Yields:
        GitHubClient instance, closed after the test
    """
    client = GitHubClient.build_with_config(GitHubConfig(base_url=TEST_BASE_URL), transport=transport)

    yield client

    await client.close()


@pytest.fixture
def data_source(github_client: GitHubClient) -> GitHubDataSource:
    return GitHubDataSource(github_client)
