"""
Tests for code-generator/github.py, which turns the OpenAPI description into
routes.py and github_.py.
"""

import importlib.util
import json
import re
from pathlib import Path

import pytest  # type: ignore

from ghrest.sources.external.github.routes import Route

PROJECT_ROOT = Path(__file__).resolve().parents[2]
GENERATOR_PATH = PROJECT_ROOT / "code-generator" / "github.py"
GENERATED_DIR = PROJECT_ROOT / "ghrest" / "sources" / "external" / "github"


def load_generator():
    spec = importlib.util.spec_from_file_location("ghrest_codegen_github", GENERATOR_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


gen = load_generator()

TINY_SPEC = {
    "openapi": "3.0.3",
    "paths": {
        "/repos/{owner}/{repo}": {
            "get": {
                "summary": "Get a repository",
                "responses": {"200": {"$ref": "#/components/responses/repo"}},
            },
            "delete": {"summary": "Delete a repository", "responses": {"204": {"description": "No Content"}}},
            "parameters": [{"$ref": "#/components/parameters/owner"}],
        },
        "/repos/{owner}/{repo}/labels": {
            "get": {
                "summary": "List labels for a repository",
                "responses": {
                    "200": {
                        "content": {
                            "application/json": {"schema": {"type": "array", "items": {"$ref": "#/components/schemas/label"}}}
                        }
                    }
                },
            },
        },
        "/gitignore/templates": {
            "get": {
                "summary": "Get all gitignore templates",
                "responses": {
                    "200": {"content": {"application/json": {"schema": {"type": "array", "items": {"type": "string"}}}}}
                },
            },
        },
        "/repos/{owner}/{repo}/contents/{path}": {
            "get": {
                "summary": "Get repository\n  content",
                "responses": {
                    "200": {
                        "content": {
                            "application/json": {"schema": {"oneOf": [{"type": "array"}, {"type": "object"}]}}
                        }
                    }
                },
            },
        },
        "/emojis": {
            "get": {
                "responses": {
                    "200": {"content": {"application/json": {"schema": {"$ref": "#/components/schemas/emoji-map"}}}}
                },
            },
        },
        "/enterprises/{enterprise}/teams/{enterprise-team}": {
            "get": {
                "summary": "Get an enterprise team",
                "externalDocs": {"url": "https://docs.github.com/rest/enterprise-teams/enterprise-teams#get-an-enterprise-team"},
                "responses": {"200": {"content": {"application/json": {"schema": {"type": "object"}}}}},
            },
        },
        "/zen": {
            "get": {
                "summary": "Get the Zen of GitHub",
                "responses": {"200": {"content": {"text/plain": {"schema": {"type": "string"}}}}},
            },
        },
    },
    "components": {
        "schemas": {
            "full-repository": {"type": "object", "properties": {"id": {"type": "integer"}}},
            "label": {"type": "object"},
            "emoji-map": {"type": "object", "additionalProperties": {"type": "string"}},
        },
        "responses": {
            "repo": {
                "description": "Response",
                "content": {"application/json": {"schema": {"$ref": "#/components/schemas/full-repository"}}},
            },
        },
        "parameters": {"owner": {"name": "owner", "in": "path"}},
    },
}

KNOWN = {"FullRepository", "Label"}


@pytest.mark.codegen
class TestNaming:

    @pytest.mark.parametrize(
        "method, path, expected",
        [
            ("get", "/", "get_root"),
            ("get", "/rate_limit", "get_rate_limit"),
            ("GET", "/repos/{owner}/{repo}", "get_repos_owner_repo"),
            ("post", "/orgs/{org}/teams/{team_slug}/team-sync/group-mappings", "post_orgs_org_teams_team_slug_team_sync_group_mappings"),
            ("get", "/scim/v2/enterprises/{enterprise}/Groups", "get_scim_v2_enterprises_enterprise_groups"),
        ],
    )
    def test_route_name(self, method, path, expected):
        assert gen.route_name(method, path) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [("full-repository", "FullRepository"), ("simple-user", "SimpleUser"), ("api-overview", "ApiOverview"), ("rate_limit", "RateLimit")],
    )
    def test_to_pascal(self, name, expected):
        assert gen.to_pascal(name) == expected

    def test_check_unique_rejects_collisions(self):
        ops = [
            gen.Operation("GET", "/a/b-c", "x", "Any"),
            gen.Operation("GET", "/a/b_c", "y", "Any"),
        ]
        with pytest.raises(ValueError, match="get_a_b_c"):
            gen.check_unique(ops)


@pytest.mark.codegen
class TestExtraction:

    def test_operations_sorted_by_path_then_method(self):
        ops = gen.extract_operations(TINY_SPEC, KNOWN)
        assert [(o.http_method, o.path) for o in ops] == [
            ("GET", "/emojis"),
            ("GET", "/enterprises/{enterprise}/teams/{enterprise-team}"),
            ("GET", "/gitignore/templates"),
            ("GET", "/repos/{owner}/{repo}"),
            ("DELETE", "/repos/{owner}/{repo}"),
            ("GET", "/repos/{owner}/{repo}/contents/{path}"),
            ("GET", "/repos/{owner}/{repo}/labels"),
            ("GET", "/zen"),
        ]

    def test_non_operation_keys_are_skipped(self):
        ops = gen.extract_operations(TINY_SPEC, KNOWN)
        assert all(o.http_method != "PARAMETERS" for o in ops)

    def test_result_types(self):
        ops = {(o.http_method, o.path): o for o in gen.extract_operations(TINY_SPEC, KNOWN)}
        assert ops[("GET", "/repos/{owner}/{repo}")].result_type == "models.FullRepository"
        assert ops[("DELETE", "/repos/{owner}/{repo}")].result_type == "None"
        assert ops[("GET", "/repos/{owner}/{repo}/labels")].result_type == "List[models.Label]"
        assert ops[("GET", "/gitignore/templates")].result_type == "List[str]"
        assert ops[("GET", "/repos/{owner}/{repo}/contents/{path}")].result_type == "Any"
        assert ops[("GET", "/emojis")].result_type == "Dict[str, Any]"
        assert ops[("GET", "/zen")].result_type == "str"

    def test_unknown_model_falls_back_to_shape(self):
        ops = {(o.http_method, o.path): o for o in gen.extract_operations(TINY_SPEC, set())}
        assert ops[("GET", "/repos/{owner}/{repo}")].result_type == "Dict[str, Any]"
        assert ops[("GET", "/repos/{owner}/{repo}/labels")].result_type == "List[Dict[str, Any]]"

    def test_summaries(self):
        ops = {(o.http_method, o.path): o for o in gen.extract_operations(TINY_SPEC, KNOWN)}
        assert ops[("GET", "/repos/{owner}/{repo}/contents/{path}")].summary == "Get repository content"
        assert ops[("GET", "/emojis")].summary == "GET /emojis"

    def test_params(self):
        op = gen.Operation("GET", "/repos/{owner}/{repo}/git/ref/{ref}", "Get a reference", "Any")
        assert op.params == ["owner", "repo", "ref"]
        assert op.member_name == "GET_REPOS_OWNER_REPO_GIT_REF_REF"

    def test_hyphenated_params_become_identifiers(self):
        ops = {(o.http_method, o.path): o for o in gen.extract_operations(TINY_SPEC, KNOWN)}
        op = ops[("GET", "/enterprises/{enterprise}/teams/{enterprise-team}")]
        assert op.params == ["enterprise", "enterprise_team"]
        assert op.wrapper_name == "get_enterprises_enterprise_teams_enterprise_team"
        assert op.result_type == "Dict[str, Any]"

    def test_docs_url(self):
        ops = {(o.http_method, o.path): o for o in gen.extract_operations(TINY_SPEC, KNOWN)}
        op = ops[("GET", "/enterprises/{enterprise}/teams/{enterprise-team}")]
        assert op.docs_url.startswith("https://docs.github.com/rest/enterprise-teams/")
        assert ops[("GET", "/zen")].docs_url == ""


@pytest.mark.codegen
class TestAllowlist:
    """Only listed routes are rendered, and every listed route must exist."""

    def test_filters_operations(self):
        allowlist = {("GET", "/zen"), ("DELETE", "/repos/{owner}/{repo}")}
        ops = gen.extract_operations(TINY_SPEC, KNOWN, allowlist)
        assert [(o.http_method, o.path) for o in ops] == [("DELETE", "/repos/{owner}/{repo}"), ("GET", "/zen")]

    def test_empty_allowlist_renders_nothing(self):
        assert gen.extract_operations(TINY_SPEC, KNOWN, set()) == []

    def test_missing_route_fails(self):
        allowlist = {("GET", "/zen"), ("POST", "/zen"), ("GET", "/nope")}
        with pytest.raises(ValueError, match="GET /nope, POST /zen"):
            gen.extract_operations(TINY_SPEC, KNOWN, allowlist)

    def test_load_skips_comments_and_blanks(self, tmp_path):
        routes_file = tmp_path / "routes.txt"
        routes_file.write_text("# exposed routes\n\nGET /zen\ndelete /repos/{owner}/{repo}\n", encoding="utf-8")

        assert gen.load_route_allowlist(str(routes_file)) == {("GET", "/zen"), ("DELETE", "/repos/{owner}/{repo}")}

    def test_load_rejects_malformed_lines(self, tmp_path):
        routes_file = tmp_path / "routes.txt"
        routes_file.write_text("GET /zen\nFETCH /zen\n", encoding="utf-8")

        with pytest.raises(ValueError, match=":2:"):
            gen.load_route_allowlist(str(routes_file))

    def test_generate_uses_routes_file(self, tmp_path):
        spec_file = tmp_path / "api.json"
        spec_file.write_text(json.dumps(TINY_SPEC), encoding="utf-8")
        routes_file = tmp_path / "routes.txt"
        routes_file.write_text("GET /zen\n", encoding="utf-8")

        gen.generate_github_client(str(spec_file), str(tmp_path / "out"), "TinyDataSource", str(routes_file))

        routes = (tmp_path / "out" / "routes.py").read_text(encoding="utf-8")
        assert 'GET_ZEN = (HttpMethod.GET, "/zen")' in routes
        assert "DELETE_REPOS_OWNER_REPO" not in routes


@pytest.mark.codegen
class TestRendering:

    def test_route_line(self):
        op = gen.Operation("GET", "/rate_limit", "Get rate limit status", "models.RateLimitOverview")
        assert gen.build_route_line(op) == '    GET_RATE_LIMIT = (HttpMethod.GET, "/rate_limit")\n'

    def test_method_code(self):
        op = gen.Operation("GET", "/repos/{owner}/{repo}", "Get a repository", "models.FullRepository")
        code = gen.build_method_code(op)
        assert "    async def get_repos_owner_repo(\n" in code
        assert "        owner: PathParam,\n        repo: PathParam,\n" in code
        assert "        response_model: Any = models.FullRepository,\n    ) -> models.FullRepository:\n" in code
        assert "Route.GET_REPOS_OWNER_REPO.bind(owner, repo), query, body, response_model)" in code
        assert '        """Get a repository (HTTP GET /repos/{owner}/{repo})"""\n' in code

    def test_method_code_with_hyphenated_param_and_docs(self):
        op = gen.Operation(
            "GET",
            "/enterprises/{enterprise}/teams/{enterprise-team}",
            "Get an enterprise team",
            "Dict[str, Any]",
            "https://docs.github.com/rest/enterprise-teams",
        )
        code = gen.build_method_code(op)
        assert "        enterprise_team: PathParam,\n" in code
        assert "Route.GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM.bind(enterprise, enterprise_team)" in code
        assert (
            '        """Get an enterprise team (HTTP GET /enterprises/{enterprise}/teams/{enterprise-team})\n'
            "\n"
            "        Docs: https://docs.github.com/rest/enterprise-teams\n"
            '        """\n'
        ) in code
        assert gen.build_route_line(op) == (
            '    GET_ENTERPRISES_ENTERPRISE_TEAMS_ENTERPRISE_TEAM = '
            '(HttpMethod.GET, "/enterprises/{enterprise}/teams/{enterprise-team}")\n'
        )

    def test_text_route_code(self):
        op = gen.Operation("GET", "/zen", "Get the Zen of GitHub", "str")
        assert "        response_model: Any = str,\n    ) -> str:\n" in gen.build_method_code(op)

    def test_generated_code_compiles(self):
        ops = gen.extract_operations(TINY_SPEC, KNOWN)
        compile(gen.build_routes_code(ops), "routes.py", "exec")
        compile(gen.build_class_code("TinyDataSource", ops), "github_.py", "exec")

    def test_generate_writes_both_modules(self, tmp_path):
        spec_file = tmp_path / "api.json"
        spec_file.write_text(json.dumps(TINY_SPEC), encoding="utf-8")

        written = gen.generate_github_client(
            str(spec_file), str(tmp_path / "out"), "TinyDataSource", routes_file=None
        )

        assert [Path(p).name for p in written] == ["routes.py", "github_.py"]
        routes = (tmp_path / "out" / "routes.py").read_text(encoding="utf-8")
        data_source = (tmp_path / "out" / "github_.py").read_text(encoding="utf-8")
        assert 'DELETE_REPOS_OWNER_REPO = (HttpMethod.DELETE, "/repos/{owner}/{repo}")' in routes
        assert "class TinyDataSource:" in data_source
        assert '__all__ = ["TinyDataSource"]' in data_source

    def test_known_model_names(self):
        names = gen.known_model_names()
        assert {"FullRepository", "RateLimitOverview", "SimpleUser"} <= names


@pytest.mark.codegen
class TestCommittedOutput:
    """The checked-in modules are exactly what the generator renders."""

    METHOD_RE = re.compile(
        r'    async def \w+\(\n'
        r'        self,\n'
        r'(?:        \w+: PathParam,\n)*'
        r'        query: Optional\[Query\] = None,\n'
        r'        body: Optional\[Body\] = None,\n'
        r'        response_model: Any = (?P<result>.+),\n'
        r'    \) -> .+:\n'
        r'        """(?P<summary>.*) \(HTTP (?P<method>\w+) (?P<path>\S+)\)'
        r'(?:\n\n        Docs: (?P<docs>\S+)\n        )?"""\n'
    )

    def committed_operations(self):
        source = (GENERATED_DIR / "github_.py").read_text(encoding="utf-8")
        return [
            gen.Operation(m["method"], m["path"], m["summary"], m["result"], m["docs"] or "")
            for m in self.METHOD_RE.finditer(source)
        ]

    def test_every_method_is_parsed(self):
        assert len(self.committed_operations()) == len(Route)

    def test_operations_match_registry(self):
        ops = self.committed_operations()
        assert len(ops) == len(Route)
        assert [(o.http_method, o.path) for o in ops] == [(r.method.value, r.template) for r in Route]

    def test_allowlist_matches_registry(self):
        assert gen.load_route_allowlist() == {(r.method.value, r.template) for r in Route}

    def test_routes_module_is_reproducible(self):
        expected = gen.build_routes_code(self.committed_operations())
        assert (GENERATED_DIR / "routes.py").read_text(encoding="utf-8") == expected

    def test_data_source_module_is_reproducible(self):
        expected = gen.build_class_code("GitHubDataSource", self.committed_operations())
        assert (GENERATED_DIR / "github_.py").read_text(encoding="utf-8") == expected

    def test_committed_names_are_unique(self):
        ops = self.committed_operations()
        assert ops
        gen.check_unique(ops)
