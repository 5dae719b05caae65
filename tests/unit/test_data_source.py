"""
Tests for GitHubDataSource, the generated convenience methods.
"""

import inspect
import json
import typing

import httpx  # type: ignore
import pytest  # type: ignore

from ghrest.exceptions.github_exceptions import DeserializationError, TransportError
from ghrest.sources.external.github import models
from ghrest.sources.external.github.github_ import GitHubDataSource
from ghrest.sources.external.github.routes import Route
from tests.utils.data_factory import GitHubDataFactory
from tests.utils.mock_transport import TEST_BASE_URL, json_response, request_path


def public_methods():
    return {
        name: fn
        for name, fn in inspect.getmembers(GitHubDataSource, inspect.iscoroutinefunction)
        if not name.startswith("_")
    }


@pytest.mark.datasource
class TestCoverage:
    """One method per route, with a signature derived from the route."""

    def test_every_route_has_a_method(self):
        methods = public_methods()
        for route in Route:
            assert route.name.lower() in methods, route

    def test_no_method_without_a_route(self):
        names = {route.name.lower() for route in Route}
        assert set(public_methods()) == names

    def test_signature_mirrors_path_params(self):
        for route in Route:
            params = list(inspect.signature(getattr(GitHubDataSource, route.name.lower())).parameters)
            expected = [name.replace("-", "_") for name in route.param_names]
            assert params == ["self", *expected, "query", "body", "response_model"], route

    def test_query_and_body_default_to_none(self):
        signature = inspect.signature(GitHubDataSource.get_repos_owner_repo)
        assert signature.parameters["query"].default is None
        assert signature.parameters["body"].default is None

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("get_rate_limit", models.RateLimitOverview),
            ("get_repos_owner_repo", models.FullRepository),
            ("get_repos_owner_repo_labels", typing.List[models.Label]),
            ("get_gitignore_templates", typing.List[str]),
            ("delete_repos_owner_repo", None),
            ("get_root", typing.Dict[str, typing.Any]),
            ("get_zen", str),
            ("get_octocat", str),
        ],
    )
    def test_default_result_types(self, method, expected):
        signature = inspect.signature(getattr(GitHubDataSource, method))
        assert signature.parameters["response_model"].default == expected

    def test_docstrings_name_the_route(self):
        assert "HTTP GET /rate_limit" in GitHubDataSource.get_rate_limit.__doc__


@pytest.mark.datasource
@pytest.mark.slow
class TestEveryRouteIsWired:
    """Each method calls exactly its own route."""

    @pytest.mark.asyncio
    async def test_each_method_hits_its_route(self, data_source, transport, faker_instance):
        for route in Route:
            values = [faker_instance.slug() for _ in route.param_names]
            method = getattr(data_source, route.name.lower())

            with pytest.raises(TransportError):
                await method(*values)

            assert transport.last.method == route.method.value
            assert request_path(transport.last) == route.bind(*values).path()


@pytest.mark.datasource
class TestWorkedExamples:
    """End-to-end calls through a data source."""

    @pytest.mark.asyncio
    async def test_rate_limit(self, data_source, transport, responses):
        responses["GET /rate_limit"] = json_response(GitHubDataFactory.rate_limit(limit=60, remaining=57))

        limits = await data_source.get_rate_limit()

        assert str(transport.last.url) == f"{TEST_BASE_URL}/rate_limit"
        assert transport.last.content == b""
        assert isinstance(limits, models.RateLimitOverview)
        assert limits.rate.remaining == 57
        assert limits.rate.used == 3

    @pytest.mark.asyncio
    async def test_get_repository(self, data_source, transport, responses):
        payload = GitHubDataFactory.repository("octo", "hello-world")
        responses["GET /repos/octo/hello-world"] = json_response(payload)

        repo = await data_source.get_repos_owner_repo("octo", "hello-world")

        assert str(transport.last.url) == f"{TEST_BASE_URL}/repos/octo/hello-world"
        assert repo.full_name == payload["full_name"]
        assert repo.owner.login == "octo"
        assert repo.id == payload["id"]

    @pytest.mark.asyncio
    async def test_query_and_list_result(self, data_source, transport, responses):
        issues = [GitHubDataFactory.issue(number=n) for n in (1, 2)]
        responses["GET /repos/octo/hello-world/issues"] = json_response(issues)

        result = await data_source.get_repos_owner_repo_issues("octo", "hello-world", query={"state": "all"})

        assert transport.last.url.params["state"] == "all"
        assert [issue.number for issue in result] == [1, 2]
        assert all(isinstance(issue, models.Issue) for issue in result)

    @pytest.mark.asyncio
    async def test_body_is_forwarded(self, data_source, transport, responses):
        responses["PATCH /repos/octo/hello-world/issues/7"] = json_response(GitHubDataFactory.issue(number=7, state="closed"))

        issue = await data_source.patch_repos_owner_repo_issues_issue_number(
            "octo", "hello-world", 7, body={"state": "closed"}
        )

        assert json.loads(transport.last.content) == {"state": "closed"}
        assert issue.state == "closed"

    @pytest.mark.asyncio
    async def test_no_content_route(self, data_source, responses):
        responses["PUT /user/starred/octo/hello-world"] = httpx.Response(204)

        assert await data_source.put_user_starred_owner_repo("octo", "hello-world") is None

    @pytest.mark.asyncio
    async def test_text_routes_return_the_body(self, data_source, responses):
        responses["GET /zen"] = httpx.Response(
            200, content=b"Keep it logically awesome.", headers={"Content-Type": "text/plain"}
        )
        responses["GET /octocat"] = httpx.Response(
            200, content=b"MMM. .MMM\n", headers={"Content-Type": "application/octocat-stream"}
        )

        assert await data_source.get_zen() == "Keep it logically awesome."
        assert await data_source.get_octocat() == "MMM. .MMM\n"

    @pytest.mark.asyncio
    async def test_result_type_can_be_overridden(self, data_source, responses):
        payload = GitHubDataFactory.repository("octo", "hello-world")
        responses["GET /repos/octo/hello-world"] = json_response(payload)

        raw = await data_source.get_repos_owner_repo("octo", "hello-world", response_model=dict)

        assert raw == payload


@pytest.mark.datasource
class TestErrorsPropagate:
    """Executor errors reach the caller unchanged."""

    @pytest.mark.asyncio
    async def test_transport_error(self, data_source):
        with pytest.raises(TransportError) as exc_info:
            await data_source.get_repos_owner_repo("octo", "missing")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_deserialization_error(self, data_source, responses):
        responses["GET /repos/octo/hello-world"] = json_response({"name": "hello-world"})

        with pytest.raises(DeserializationError):
            await data_source.get_repos_owner_repo("octo", "hello-world")
