"""
Tests for GitHubClient.req, the generic executor every convenience method
goes through.
"""

import json
from typing import Any, Dict, List

import httpx  # type: ignore
import pytest  # type: ignore
from pydantic import BaseModel  # type: ignore

from ghrest.config.settings import DEFAULT_USER_AGENT
from ghrest.exceptions.github_exceptions import (
    DeserializationError,
    GitHubError,
    TransportError,
)
from ghrest.sources.client.github.github import (
    GitHubClient,
    GitHubConfig,
    get_shared_client,
)
from ghrest.sources.external.github import models
from ghrest.sources.external.github.routes import Route
from tests.utils.data_factory import GitHubDataFactory
from tests.utils.mock_transport import (
    TEST_BASE_URL,
    RecordingTransport,
    json_response,
    request_path,
)


class IssueFilter(BaseModel):
    state: str = "open"
    labels: str = None
    per_page: int = 30


class NewLabel(BaseModel):
    name: str
    color: str
    description: str = None


@pytest.mark.executor
class TestRequestShape:
    """What goes over the wire."""

    @pytest.mark.asyncio
    async def test_url_and_method(self, github_client, transport, responses):
        responses["GET /repos/octo/hello-world"] = json_response(GitHubDataFactory.repository("octo", "hello-world"))

        await github_client.req(Route.GET_REPOS_OWNER_REPO.bind("octo", "hello-world"))

        assert transport.last.method == "GET"
        assert str(transport.last.url) == f"{TEST_BASE_URL}/repos/octo/hello-world"

    @pytest.mark.asyncio
    async def test_user_agent_and_no_auth(self, github_client, transport, responses):
        responses["GET /rate_limit"] = json_response(GitHubDataFactory.rate_limit())

        await github_client.req(Route.GET_RATE_LIMIT.bind())

        assert transport.last.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert "Authorization" not in transport.last.headers

    @pytest.mark.asyncio
    async def test_no_query_no_body(self, github_client, transport, responses):
        responses["GET /rate_limit"] = json_response(GitHubDataFactory.rate_limit())

        await github_client.req(Route.GET_RATE_LIMIT.bind())

        assert transport.last.url.query == b""
        assert transport.last.content == b""

    @pytest.mark.asyncio
    async def test_query_from_mapping(self, github_client, transport, responses):
        responses["GET /repos/octo/hello-world/issues"] = json_response([])

        await github_client.req(
            Route.GET_REPOS_OWNER_REPO_ISSUES.bind("octo", "hello-world"),
            query={"state": "closed", "per_page": 5},
        )

        assert transport.last.url.params["state"] == "closed"
        assert transport.last.url.params["per_page"] == "5"
        assert transport.last.content == b""

    @pytest.mark.asyncio
    async def test_query_from_pairs_keeps_repeats(self, github_client, transport, responses):
        responses["GET /search/issues"] = json_response({"total_count": 0, "items": []})

        await github_client.req(Route.GET_SEARCH_ISSUES.bind(), query=[("q", "is:open"), ("q", "repo:octo/x")])

        assert transport.last.url.params.get_list("q") == ["is:open", "repo:octo/x"]

    @pytest.mark.asyncio
    async def test_query_from_model_drops_unset(self, github_client, transport, responses):
        responses["GET /repos/octo/hello-world/issues"] = json_response([])

        await github_client.req(
            Route.GET_REPOS_OWNER_REPO_ISSUES.bind("octo", "hello-world"),
            query=IssueFilter(per_page=10),
        )

        assert dict(transport.last.url.params) == {"state": "open", "per_page": "10"}

    @pytest.mark.asyncio
    async def test_body_only(self, github_client, transport, responses, faker_instance):
        title = faker_instance.sentence()
        responses["POST /repos/octo/hello-world/issues"] = json_response(
            GitHubDataFactory.issue(number=1, title=title), status_code=201
        )

        issue = await github_client.req(
            Route.POST_REPOS_OWNER_REPO_ISSUES.bind("octo", "hello-world"),
            body={"title": title},
            response_model=models.Issue,
        )

        assert json.loads(transport.last.content) == {"title": title}
        assert transport.last.headers["Content-Type"] == "application/json"
        assert transport.last.url.query == b""
        assert issue.title == title

    @pytest.mark.asyncio
    async def test_body_from_model(self, github_client, transport, responses):
        responses["POST /repos/octo/hello-world/labels"] = json_response(
            {"id": 1, "name": "bug", "color": "f29513"}, status_code=201
        )

        await github_client.req(
            Route.POST_REPOS_OWNER_REPO_LABELS.bind("octo", "hello-world"),
            body=NewLabel(name="bug", color="f29513"),
        )

        assert json.loads(transport.last.content) == {"name": "bug", "color": "f29513"}

    @pytest.mark.asyncio
    async def test_raw_body_is_sent_verbatim(self, github_client, transport, responses):
        responses["PUT /repos/octo/hello-world/topics"] = json_response({"names": ["a"]})
        raw = b'{"names": ["a"]}'

        await github_client.req(Route.PUT_REPOS_OWNER_REPO_TOPICS.bind("octo", "hello-world"), body=raw)

        assert transport.last.content == raw

    @pytest.mark.asyncio
    async def test_str_body_is_utf8(self, github_client, transport, responses):
        responses["POST /gists"] = json_response({"id": "abc"}, status_code=201)

        await github_client.req(Route.POST_GISTS.bind(), body="héllo")

        assert transport.last.content == "héllo".encode("utf-8")

    @pytest.mark.asyncio
    async def test_unsupported_body_type(self, github_client):
        with pytest.raises(TypeError):
            await github_client.req(Route.POST_GISTS.bind(), body=object())

    @pytest.mark.asyncio
    async def test_encoded_path_reaches_the_wire(self, github_client, transport):
        with pytest.raises(TransportError):
            await github_client.req(Route.GET_REPOS_OWNER_REPO_LABELS_NAME.bind("octo", "x", "good first issue"))

        assert request_path(transport.last) == "/repos/octo/x/labels/good%20first%20issue"

    @pytest.mark.asyncio
    async def test_extra_headers_from_config(self, transport, responses):
        responses["GET /meta"] = json_response({"verifiable_password_authentication": False})
        config = GitHubConfig(base_url=TEST_BASE_URL, user_agent="my-app/2.0", headers={"X-GitHub-Api-Version": "2022-11-28"})

        async with GitHubClient.build_with_config(config, transport=transport) as client:
            await client.req(Route.GET_META.bind())

        assert transport.last.headers["User-Agent"] == "my-app/2.0"
        assert transport.last.headers["X-GitHub-Api-Version"] == "2022-11-28"


@pytest.mark.executor
class TestResponseDecoding:
    """How the response body becomes a typed value."""

    @pytest.mark.asyncio
    async def test_default_returns_plain_json(self, github_client, responses):
        payload = GitHubDataFactory.rate_limit()
        responses["GET /rate_limit"] = json_response(payload)

        result = await github_client.req(Route.GET_RATE_LIMIT.bind())

        assert result == payload

    @pytest.mark.asyncio
    async def test_model_result(self, github_client, responses):
        responses["GET /rate_limit"] = json_response(GitHubDataFactory.rate_limit(limit=60, remaining=59))

        result = await github_client.req(Route.GET_RATE_LIMIT.bind(), response_model=models.RateLimitOverview)

        assert isinstance(result, models.RateLimitOverview)
        assert result.rate.limit == 60
        assert result.resources["core"].remaining == 59

    @pytest.mark.asyncio
    async def test_generic_result(self, github_client, responses):
        responses["GET /repos/octo/hello-world/labels"] = json_response(
            [{"id": 1, "name": "bug", "color": "f29513"}, {"id": 2, "name": "docs", "color": "0075ca"}]
        )

        labels = await github_client.req(
            Route.GET_REPOS_OWNER_REPO_LABELS.bind("octo", "hello-world"),
            response_model=List[models.Label],
        )

        assert [label.name for label in labels] == ["bug", "docs"]

    @pytest.mark.asyncio
    async def test_unknown_fields_are_kept(self, github_client, responses):
        payload = GitHubDataFactory.repository("octo", "hello-world", brand_new_field={"x": 1})
        responses["GET /repos/octo/hello-world"] = json_response(payload)

        repo = await github_client.req(
            Route.GET_REPOS_OWNER_REPO.bind("octo", "hello-world"),
            response_model=models.FullRepository,
        )

        assert repo.brand_new_field == {"x": 1}

    @pytest.mark.asyncio
    async def test_none_skips_decoding(self, github_client, responses):
        responses["DELETE /repos/octo/hello-world"] = httpx.Response(204)

        result = await github_client.req(Route.DELETE_REPOS_OWNER_REPO.bind("octo", "hello-world"), response_model=None)

        assert result is None

    @pytest.mark.asyncio
    async def test_str_returns_text_body(self, github_client, responses):
        responses["GET /zen"] = httpx.Response(
            200, content=b"Keep it logically awesome.", headers={"Content-Type": "text/plain"}
        )

        result = await github_client.req(Route.GET_ZEN.bind(), response_model=str)

        assert result == "Keep it logically awesome."

    @pytest.mark.asyncio
    async def test_on_response_hook(self, transport, responses):
        seen = []
        responses["GET /rate_limit"] = json_response(GitHubDataFactory.rate_limit(), headers={"X-RateLimit-Remaining": "42"})
        client = GitHubClient.build_with_config(
            GitHubConfig(base_url=TEST_BASE_URL),
            transport=transport,
            on_response=lambda endpoint, response: seen.append((str(endpoint), response.headers["X-RateLimit-Remaining"])),
        )

        await client.req(Route.GET_RATE_LIMIT.bind())
        await client.close()

        assert seen == [("GET /rate_limit", "42")]


@pytest.mark.executor
class TestTransportErrors:
    """Failures at the network or HTTP layer."""

    @pytest.mark.asyncio
    async def test_not_found(self, github_client):
        with pytest.raises(TransportError) as exc_info:
            await github_client.req(Route.GET_REPOS_OWNER_REPO.bind("octo", "missing"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"
        assert exc_info.value.endpoint == "GET /repos/octo/missing"
        assert str(exc_info.value) == "GET /repos/octo/missing: Not Found"

    @pytest.mark.asyncio
    async def test_server_error_without_json(self, github_client, responses):
        responses["GET /meta"] = httpx.Response(502, content=b"<html>bad gateway</html>")

        with pytest.raises(TransportError) as exc_info:
            await github_client.req(Route.GET_META.bind())

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        assert "bad gateway" in exc_info.value.details["body"]

    @pytest.mark.asyncio
    async def test_error_beats_none_result(self, github_client, responses):
        responses["DELETE /repos/octo/hello-world"] = json_response({"message": "Must have admin rights"}, status_code=403)

        with pytest.raises(TransportError) as exc_info:
            await github_client.req(Route.DELETE_REPOS_OWNER_REPO.bind("octo", "hello-world"), response_model=None)

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = GitHubClient.build_with_config(GitHubConfig(base_url=TEST_BASE_URL), transport=RecordingTransport(refuse))

        with pytest.raises(TransportError) as exc_info:
            await client.req(Route.GET_RATE_LIMIT.bind())
        await client.close()

        assert exc_info.value.status_code is None
        assert "ConnectError" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout(self):
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = GitHubClient.build_with_config(GitHubConfig(base_url=TEST_BASE_URL), transport=RecordingTransport(slow))

        with pytest.raises(TransportError, match="ReadTimeout"):
            await client.req(Route.GET_RATE_LIMIT.bind(), timeout=0.5)
        await client.close()

    @pytest.mark.asyncio
    async def test_all_failures_share_a_base(self, github_client):
        with pytest.raises(GitHubError):
            await github_client.req(Route.GET_ZEN.bind())


@pytest.mark.executor
class TestDeserializationErrors:
    """A successful response whose body does not fit the requested type."""

    @pytest.mark.asyncio
    async def test_not_json(self, github_client, responses):
        responses["GET /rate_limit"] = httpx.Response(200, content=b"<!doctype html>")

        with pytest.raises(DeserializationError) as exc_info:
            await github_client.req(Route.GET_RATE_LIMIT.bind())

        assert exc_info.value.body == "<!doctype html>"
        assert exc_info.value.endpoint == "GET /rate_limit"

    @pytest.mark.asyncio
    async def test_shape_mismatch(self, github_client, responses):
        responses["GET /rate_limit"] = json_response({"rate": {"limit": "lots"}})

        with pytest.raises(DeserializationError) as exc_info:
            await github_client.req(Route.GET_RATE_LIMIT.bind(), response_model=models.RateLimitOverview)

        assert exc_info.value.details["errors"]
        assert "RateLimitOverview" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_list_where_object_expected(self, github_client, responses):
        responses["GET /repos/octo/hello-world"] = json_response([1, 2, 3])

        with pytest.raises(DeserializationError):
            await github_client.req(Route.GET_REPOS_OWNER_REPO.bind("octo", "hello-world"), response_model=Dict[str, Any])

    @pytest.mark.asyncio
    async def test_empty_body_when_json_expected(self, github_client, responses):
        responses["GET /meta"] = httpx.Response(200)

        with pytest.raises(DeserializationError) as exc_info:
            await github_client.req(Route.GET_META.bind(), response_model=Dict[str, Any])

        assert exc_info.value.body == ""


@pytest.mark.executor
class TestClientLifecycle:
    """Pooling and configuration."""

    @pytest.mark.asyncio
    async def test_one_pool_for_many_requests(self, github_client, responses):
        responses["GET /meta"] = json_response({"verifiable_password_authentication": False})

        await github_client.req(Route.GET_META.bind())
        first = github_client.get_client().client
        await github_client.req(Route.GET_META.bind())

        assert github_client.get_client().client is first

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, github_client):
        await github_client.close()
        await github_client.close()
        assert github_client.get_client().client is None

    def test_base_url_is_normalized(self):
        client = GitHubClient.build_with_config(GitHubConfig(base_url="https://ghe.example.com/api/v3/"))
        assert client.get_base_url() == "https://ghe.example.com/api/v3"

    def test_build_from_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
        monkeypatch.setenv("GITHUB_USER_AGENT", "ci-bot/1.0")
        monkeypatch.setenv("GITHUB_TIMEOUT", "5")

        client = GitHubClient.build_from_env()

        assert client.get_base_url() == "https://ghe.example.com/api/v3"
        assert client.get_client().headers["User-Agent"] == "ci-bot/1.0"
        assert client.get_client().timeout == 5.0

    def test_build_from_env_rejects_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            GitHubClient.build_from_env()

    def test_shared_client_is_built_once(self, monkeypatch):
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")
        get_shared_client.cache_clear()
        try:
            first = get_shared_client()
            assert get_shared_client() is first
            assert first.get_base_url() == "https://ghe.example.com/api/v3"
        finally:
            get_shared_client.cache_clear()
