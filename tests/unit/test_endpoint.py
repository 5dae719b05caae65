"""
Tests for the endpoint registry: route metadata, parameter binding and
path building.
"""

import re

import pytest  # type: ignore

from ghrest.sources.client.github.endpoint import (
    EndPoint,
    HttpMethod,
    RouteEnum,
    encode_path_param,
)
from ghrest.sources.external.github.routes import Route

METHOD_ORDER = ("GET", "POST", "PUT", "PATCH", "DELETE")


class EnterpriseRoute(RouteEnum):
    GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM = (
        HttpMethod.GET,
        "/enterprises/{enterprise}/teams/{enterprise-team}",
    )


@pytest.mark.registry
class TestRouteRegistry:
    """Every Route member carries a verb and a well-formed template."""

    def test_registry_is_large_and_closed(self):
        assert len(Route) >= 400
        assert all(isinstance(r.method, HttpMethod) for r in Route)

    def test_no_aliases(self):
        # Enum silently aliases members with equal values
        assert len(Route.__members__) == len(list(Route))

    def test_templates_are_absolute_and_balanced(self):
        for route in Route:
            assert route.template.startswith("/"), route
            assert route.template.count("{") == route.template.count("}"), route
            assert "?" not in route.template, route

    def test_member_names_follow_method_and_path(self):
        for route in Route:
            parts = [p.upper() for p in re.split(r"[/{}_\-]+", route.template) if p]
            expected = "_".join([route.method.value, *(parts or ["ROOT"])])
            assert route.name == expected

    def test_members_are_sorted_by_path_then_method(self):
        keys = [(r.template, METHOD_ORDER.index(r.method.value)) for r in Route]
        assert keys == sorted(keys)

    def test_method_and_path_are_unique(self):
        pairs = [(r.method, r.template) for r in Route]
        assert len(pairs) == len(set(pairs))

    @pytest.mark.parametrize(
        "route, method, template",
        [
            (Route.GET_ROOT, HttpMethod.GET, "/"),
            (Route.GET_RATE_LIMIT, HttpMethod.GET, "/rate_limit"),
            (Route.GET_REPOS_OWNER_REPO, HttpMethod.GET, "/repos/{owner}/{repo}"),
            (Route.PATCH_REPOS_OWNER_REPO, HttpMethod.PATCH, "/repos/{owner}/{repo}"),
            (Route.GET_REPOS_OWNER_REPO_GIT_REF_REF, HttpMethod.GET, "/repos/{owner}/{repo}/git/ref/{ref}"),
            (Route.PATCH_REPOS_OWNER_REPO_GIT_REFS_REF, HttpMethod.PATCH, "/repos/{owner}/{repo}/git/refs/{ref}"),
            (
                Route.POST_REPOS_OWNER_REPO_BRANCHES_BRANCH_PROTECTION_ENFORCE_ADMINS,
                HttpMethod.POST,
                "/repos/{owner}/{repo}/branches/{branch}/protection/enforce_admins",
            ),
            (
                Route.DELETE_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REQUESTED_REVIEWERS,
                HttpMethod.DELETE,
                "/repos/{owner}/{repo}/pulls/{pull_number}/requested_reviewers",
            ),
            (
                Route.GET_SCIM_V2_ENTERPRISES_ENTERPRISE_GROUPS_SCIM_GROUP_ID,
                HttpMethod.GET,
                "/scim/v2/enterprises/{enterprise}/Groups/{scim_group_id}",
            ),
            (Route.GET_GISTS_GIST_ID_SHA, HttpMethod.GET, "/gists/{gist_id}/{sha}"),
            (
                Route.PUT_AUTHORIZATIONS_CLIENTS_CLIENT_ID_FINGERPRINT,
                HttpMethod.PUT,
                "/authorizations/clients/{client_id}/{fingerprint}",
            ),
            (
                Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_TEAM_SYNC_GROUP_MAPPINGS,
                HttpMethod.GET,
                "/orgs/{org}/teams/{team_slug}/team-sync/group-mappings",
            ),
            (Route.GET_ORGS_ORG_EXTERNAL_GROUP_GROUP_ID, HttpMethod.GET, "/orgs/{org}/external-group/{group_id}"),
            (Route.GET_USER_GPG_KEYS_GPG_KEY_ID, HttpMethod.GET, "/user/gpg_keys/{gpg_key_id}"),
            (Route.DELETE_REPOS_OWNER_REPO, HttpMethod.DELETE, "/repos/{owner}/{repo}"),
        ],
    )
    def test_spot_checks(self, route, method, template):
        assert route.method is method
        assert route.template == template

    def test_param_names_in_template_order(self):
        route = Route.GET_ORGS_ORG_TEAMS_TEAM_SLUG_DISCUSSIONS_DISCUSSION_NUMBER_COMMENTS_COMMENT_NUMBER
        assert route.param_names == ("org", "team_slug", "discussion_number", "comment_number")
        assert Route.GET_RATE_LIMIT.param_names == ()


@pytest.mark.registry
class TestEndPoint:
    """Binding parameters and building paths."""

    def test_path_without_params(self):
        assert Route.GET_RATE_LIMIT.bind().path() == "/rate_limit"
        assert Route.GET_ROOT.bind().path() == "/"

    def test_path_substitutes_in_order(self):
        endpoint = Route.GET_REPOS_OWNER_REPO_PULLS_PULL_NUMBER_REVIEWS_REVIEW_ID.bind("octo", "hello-world", 42, 7)
        assert endpoint.path() == "/repos/octo/hello-world/pulls/42/reviews/7"
        assert endpoint.method is HttpMethod.GET

    def test_int_params_are_stringified(self):
        endpoint = Route.GET_TEAMS_TEAM_ID.bind(1234)
        assert endpoint.params == ("1234",)
        assert endpoint.path() == "/teams/1234"

    def test_path_is_deterministic(self):
        endpoint = Route.GET_USERS_USERNAME_HOVERCARD.bind("octocat")
        assert endpoint.path() == endpoint.path() == "/users/octocat/hovercard"

    def test_every_route_builds_a_path(self, faker_instance):
        for route in Route:
            values = [faker_instance.slug() for _ in route.param_names]
            path = route.bind(*values).path()
            assert "{" not in path and "}" not in path, route
            for value in values:
                assert value in path

    def test_endpoints_are_values(self):
        a = Route.GET_REPOS_OWNER_REPO.bind("octo", "hello-world")
        b = EndPoint(Route.GET_REPOS_OWNER_REPO, ("octo", "hello-world"))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Route.PATCH_REPOS_OWNER_REPO.bind("octo", "hello-world")

    def test_str_shows_method_and_path(self):
        assert str(Route.GET_REPOS_OWNER_REPO.bind("octo", "hello-world")) == "GET /repos/octo/hello-world"

    def test_too_few_params(self):
        with pytest.raises(ValueError, match="takes 2 path parameter"):
            Route.GET_REPOS_OWNER_REPO.bind("octo")

    def test_too_many_params(self):
        with pytest.raises(ValueError):
            Route.GET_RATE_LIMIT.bind("extra")

    def test_direct_construction_checks_arity(self):
        with pytest.raises(ValueError):
            EndPoint(Route.GET_ORGS_ORG, ())


@pytest.mark.registry
class TestPathEncoding:
    """Parameter values are percent-encoded so they cannot reshape the path."""

    def test_reserved_characters_are_escaped(self):
        endpoint = Route.GET_REPOS_OWNER_REPO_LABELS_NAME.bind("octo", "hello-world", "bug fix?#1")
        assert endpoint.path() == "/repos/octo/hello-world/labels/bug%20fix%3F%231"

    def test_slash_is_escaped_in_ordinary_params(self):
        endpoint = Route.GET_REPOS_OWNER_REPO.bind("octo", "../admin")
        assert endpoint.path() == "/repos/octo/..%2Fadmin"

    def test_slash_is_kept_in_path_like_params(self):
        assert (
            Route.GET_REPOS_OWNER_REPO_GIT_REF_REF.bind("octo", "hello-world", "heads/feature/x").path()
            == "/repos/octo/hello-world/git/ref/heads/feature/x"
        )
        assert (
            Route.PUT_REPOS_OWNER_REPO_CONTENTS_PATH.bind("octo", "hello-world", "docs/read me.md").path()
            == "/repos/octo/hello-world/contents/docs/read%20me.md"
        )
        assert (
            Route.GET_REPOS_OWNER_REPO_BRANCHES_BRANCH.bind("octo", "hello-world", "release/1.0").path()
            == "/repos/octo/hello-world/branches/release/1.0"
        )

    def test_non_ascii_is_utf8_encoded(self):
        assert encode_path_param("username", "zoë") == "zo%C3%AB"

    def test_unreserved_characters_pass_through(self):
        assert encode_path_param("repo", "hello-world_1.0~x") == "hello-world_1.0~x"


@pytest.mark.registry
class TestHyphenatedPlaceholders:
    """Placeholder names may contain '-' as in {enterprise-team}."""

    def test_param_names_keep_the_hyphen(self):
        route = EnterpriseRoute.GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM
        assert route.param_names == ("enterprise", "enterprise-team")

    def test_path_substitutes_every_placeholder(self):
        endpoint = EnterpriseRoute.GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM.bind("acme", "platform")
        assert endpoint.path() == "/enterprises/acme/teams/platform"

    def test_arity_counts_hyphenated_names(self):
        with pytest.raises(ValueError, match="takes 2 path parameter"):
            EnterpriseRoute.GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM.bind("acme")
