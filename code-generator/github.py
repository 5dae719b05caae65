#!/usr/bin/env python3
"""
Generate the GitHub route registry and data source from the OpenAPI description.

Writes two modules into ghrest/sources/external/github:
    routes.py   - the Route enum, one member per (method, path)
    github_.py  - GitHubDataSource, one async method per route

Only the operations listed in github_routes.txt are rendered.
"""
import argparse
import json
import logging
import re
import urllib.request
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_SPEC_URL = "https://raw.githubusercontent.com/github/rest-api-description/main/descriptions/api.github.com/api.github.com.json"
DEFAULT_OUT_DIR = "ghrest/sources/external/github"
DEFAULT_CLASS = "GitHubDataSource"
DEFAULT_ROUTES_FILE = str(Path(__file__).with_name("github_routes.txt"))

HTTP_METHODS = ("get", "post", "put", "patch", "delete")
SUCCESS_CODES = ("200", "201", "202")
PRIMITIVES = {"string": "str", "integer": "int", "number": "float", "boolean": "bool"}

NO_RESULT = "None"
ANY_RESULT = "Any"
TEXT_RESULT = "str"
OBJECT_RESULT = "Dict[str, Any]"
ARRAY_RESULT = "List[Dict[str, Any]]"

ROUTES_HEADER = '''# ruff: noqa
"""
GitHub REST API route registry
Auto-generated from the OpenAPI description by code-generator/github.py.
"""

from ghrest.sources.client.github.endpoint import HttpMethod, RouteEnum


class Route(RouteEnum):
    """Every GitHub REST route exposed by this client, as (method, path template)"""

'''

DATA_SOURCE_HEADER = '''# ruff: noqa
"""
GitHub REST API DataSource
Auto-generated from the OpenAPI description by code-generator/github.py.
"""

from typing import Any, Dict, List, Optional

from ghrest.sources.client.github.endpoint import PathParam
from ghrest.sources.client.github.github import Body, GitHubClient, Query
from ghrest.sources.external.github import models
from ghrest.sources.external.github.routes import Route


class {class_name}:
    """
    GitHub REST API Data Source.

    Each method calls exactly one route. TransportError and
    DeserializationError raised by the client propagate to the caller.
    """
    def __init__(self, client: GitHubClient) -> None:
        self.client = client
'''


@dataclass
class Operation:
    http_method: str
    path: str
    summary: str
    result_type: str
    docs_url: str = ""

    @property
    def wrapper_name(self) -> str:
        return route_name(self.http_method, self.path)

    @property
    def member_name(self) -> str:
        return self.wrapper_name.upper()

    @property
    def params(self) -> list[str]:
        """Placeholder names as Python identifiers, e.g. {enterprise-team} -> enterprise_team"""
        return [re.sub(r"\W", "_", p) for p in re.findall(r"{([^}]+)}", self.path)]


def read_bytes_from_url(url: str) -> bytes:
    with urllib.request.urlopen(url) as resp:
        return resp.read()


def load_spec(source: str = DEFAULT_SPEC_URL) -> Mapping[str, Any]:
    if source.startswith(("http://", "https://")):
        data = read_bytes_from_url(source)
    else:
        data = Path(source).read_bytes()
    return json.loads(data.decode("utf-8"))


def route_name(http_method: str, path: str) -> str:
    """get + /repos/{owner}/{repo}/git/refs -> get_repos_owner_repo_git_refs"""
    parts = [p.lower() for p in re.split(r"[/{}_\-]+", path) if p]
    return "_".join([http_method.lower(), *(parts or ["root"])])


def to_pascal(name: str) -> str:
    """full-repository -> FullRepository"""
    return "".join(p[:1].upper() + p[1:] for p in re.split(r"[-_.\s]+", name) if p)


def resolve_ref(spec: Mapping[str, Any], node: Mapping[str, Any]) -> Mapping[str, Any]:
    """Follow local #/components/... references"""
    while "$ref" in node and node["$ref"].startswith("#/"):
        target: Any = spec
        for key in node["$ref"][2:].split("/"):
            target = target[key]
        if "$ref" in target and target["$ref"] == node["$ref"]:
            break
        node = target
    return node


def success_response(spec: Mapping[str, Any], op: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    responses = op.get("responses", {})
    for code in SUCCESS_CODES:
        if code in responses:
            return resolve_ref(spec, responses[code])
    return None


def is_text_content(content: Mapping[str, Any]) -> bool:
    """True when some non-JSON media type carries a plain string body"""
    for media_type, media in content.items():
        schema = (media or {}).get("schema") or {}
        if media_type.startswith("text/") or schema.get("type") == "string":
            return True
    return False


def model_for(schema: Mapping[str, Any], known_models: set[str]) -> Optional[str]:
    ref = schema.get("$ref")
    if not ref:
        return None
    model = to_pascal(ref.rsplit("/", 1)[-1])
    return f"models.{model}" if model in known_models else None


def result_type(spec: Mapping[str, Any], op: Mapping[str, Any], known_models: set[str]) -> str:
    """Python expression for the default result type of an operation"""
    response = success_response(spec, op)
    if response is None:
        return NO_RESULT
    content = response.get("content", {})
    schema = (content.get("application/json") or {}).get("schema")
    if schema is None:
        return TEXT_RESULT if is_text_content(content) else NO_RESULT

    model = model_for(schema, known_models)
    if model:
        return model
    schema = resolve_ref(spec, schema)

    if "oneOf" in schema or "anyOf" in schema:
        return ANY_RESULT
    if schema.get("type") == "array":
        raw_items = schema.get("items", {})
        item_model = model_for(raw_items, known_models)
        if item_model:
            return f"List[{item_model}]"
        items = resolve_ref(spec, raw_items)
        item_type = PRIMITIVES.get(items.get("type", ""))
        return f"List[{item_type}]" if item_type else ARRAY_RESULT
    return OBJECT_RESULT


def load_route_allowlist(source: str = DEFAULT_ROUTES_FILE) -> set[tuple[str, str]]:
    """Read "METHOD path" lines; blank lines and # comments are skipped"""
    routes: set[tuple[str, str]] = set()
    for lineno, line in enumerate(Path(source).read_text(encoding="utf-8").splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) != 2 or parts[0].lower() not in HTTP_METHODS:
            raise ValueError(f"{source}:{lineno}: expected 'METHOD path', got {line!r}")
        routes.add((parts[0].upper(), parts[1]))
    return routes


def extract_operations(
    spec: Mapping[str, Any],
    known_models: set[str],
    allowlist: Optional[Collection[tuple[str, str]]] = None,
) -> list[Operation]:
    """Collect operations from the description, restricted to ``allowlist`` when given.

    Raises:
        ValueError: An allowlisted route is not in the description
    """
    paths = spec.get("paths", {})
    ops: list[Operation] = []
    for path, item in paths.items():
        for method, op in item.items():
            if method.lower() not in HTTP_METHODS:
                continue
            if allowlist is not None and (method.upper(), path) not in allowlist:
                continue
            summary = " ".join((op.get("summary") or "").split()).replace('"', "'")
            ops.append(
                Operation(
                    http_method=method.upper(),
                    path=path,
                    summary=summary or f"{method.upper()} {path}",
                    result_type=result_type(spec, op, known_models),
                    docs_url=(op.get("externalDocs") or {}).get("url", ""),
                ),
            )

    if allowlist is not None:
        missing = set(allowlist) - {(o.http_method, o.path) for o in ops}
        if missing:
            listed = ", ".join(f"{m} {p}" for m, p in sorted(missing))
            raise ValueError(f"Routes not found in the API description: {listed}")
    return sorted(ops, key=lambda o: (o.path, HTTP_METHODS.index(o.http_method.lower())))


def check_unique(ops: Sequence[Operation]) -> None:
    seen: dict[str, Operation] = {}
    for op in ops:
        other = seen.get(op.wrapper_name)
        if other is not None:
            raise ValueError(
                f"{op.http_method} {op.path} and {other.http_method} {other.path} "
                f"both map to {op.wrapper_name}"
            )
        seen[op.wrapper_name] = op


def build_route_line(op: Operation) -> str:
    return f'    {op.member_name} = (HttpMethod.{op.http_method}, "{op.path}")\n'


def build_routes_code(ops: Sequence[Operation]) -> str:
    return ROUTES_HEADER + "".join(build_route_line(o) for o in ops)


def build_docstring(op: Operation) -> list[str]:
    first = f"{op.summary} (HTTP {op.http_method} {op.path})"
    if not op.docs_url:
        return [f'        """{first}"""']
    return [f'        """{first}', "", f"        Docs: {op.docs_url}", '        """']


def build_method_code(op: Operation) -> str:
    lines = [
        f"    async def {op.wrapper_name}(",
        "        self,",
        *(f"        {p}: PathParam," for p in op.params),
        "        query: Optional[Query] = None,",
        "        body: Optional[Body] = None,",
        f"        response_model: Any = {op.result_type},",
        f"    ) -> {op.result_type}:",
        *build_docstring(op),
        f"        return await self.client.req(Route.{op.member_name}.bind({', '.join(op.params)}), query, body, response_model)",
    ]
    return "\n".join(lines) + "\n"


def build_class_code(class_name: str, ops: Sequence[Operation]) -> str:
    methods = "".join("\n" + build_method_code(o) for o in ops)
    return (
        DATA_SOURCE_HEADER.format(class_name=class_name)
        + methods
        + f'\n\n__all__ = ["{class_name}"]\n'
    )


def known_model_names() -> set[str]:
    from pydantic import BaseModel  # type: ignore

    from ghrest.sources.external.github import models

    return {
        name for name, obj in vars(models).items()
        if isinstance(obj, type) and issubclass(obj, BaseModel) and obj.__module__ == models.__name__
    }


def generate_github_client(
    spec_source: str = DEFAULT_SPEC_URL,
    out_dir: str = DEFAULT_OUT_DIR,
    class_name: str = DEFAULT_CLASS,
    routes_file: Optional[str] = DEFAULT_ROUTES_FILE,
) -> list[str]:
    """Render routes.py and github_.py. ``routes_file=None`` renders every operation."""
    spec = load_spec(spec_source)
    allowlist = load_route_allowlist(routes_file) if routes_file else None
    ops = extract_operations(spec, known_model_names(), allowlist)
    check_unique(ops)

    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)

    routes_path = target / "routes.py"
    routes_path.write_text(build_routes_code(ops), encoding="utf-8")
    data_source_path = target / "github_.py"
    data_source_path.write_text(build_class_code(class_name, ops), encoding="utf-8")
    logger.info("Generated %d routes", len(ops))
    return [str(routes_path), str(data_source_path)]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Generate the GitHub REST client")
    parser.add_argument("--spec", default=DEFAULT_SPEC_URL, help="OpenAPI description, file path or URL")
    parser.add_argument("--out-dir", default=DEFAULT_OUT_DIR)
    parser.add_argument("--class-name", default=DEFAULT_CLASS)
    parser.add_argument("--routes", default=DEFAULT_ROUTES_FILE, help="Route allowlist, one 'METHOD path' per line")
    parser.add_argument("--all-routes", action="store_true", help="Ignore the allowlist and render every operation")
    ns = parser.parse_args()
    routes = None if ns.all_routes else ns.routes
    for out in generate_github_client(ns.spec, ns.out_dir, ns.class_name, routes):
        print(f"Generated {out}")
