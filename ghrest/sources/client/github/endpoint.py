"""
Endpoint identifiers for the GitHub REST API.

A route is one (HTTP method, path template) pair taken from the API
description. An EndPoint is a route with its path parameters bound, which is
everything needed to address one request.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union
from urllib.parse import quote

PathParam = Union[str, int]

_PLACEHOLDER = re.compile(r"{([^}]+)}")

# Parameters whose values are themselves slash-separated paths on GitHub
# (file paths, git refs such as heads/main, branch names such as feature/x)
SLASH_SAFE_PARAMS = frozenset({"path", "ref", "branch", "dir"})


class HttpMethod(str, Enum):
    """HTTP verbs used by the GitHub REST API"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


def encode_path_param(name: str, value: str) -> str:
    """Percent-encode one path parameter value.

    Reserved characters are escaped so a value cannot change the shape of the
    path, except that '/' is kept for parameters listed in SLASH_SAFE_PARAMS.
    """
    safe = "/" if name in SLASH_SAFE_PARAMS else ""
    return quote(value, safe=safe)


class RouteEnum(Enum):
    """Base for route registries. Member values are (HttpMethod, path template)."""

    def __init__(self, method: HttpMethod, template: str) -> None:
        self.method = method
        self.template = template

    @property
    def param_names(self) -> Tuple[str, ...]:
        """Placeholder names in the order they appear in the template"""
        return tuple(_PLACEHOLDER.findall(self.template))

    def bind(self, *params: PathParam) -> "EndPoint":
        """Bind path parameters, in template order, to this route"""
        return EndPoint(self, tuple(str(p) for p in params))


@dataclass(frozen=True)
class EndPoint:
    """A route with its path parameters bound.

    Args:
        route: The route being addressed
        params: Path parameter values in template order
    """
    route: RouteEnum
    params: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        expected = self.route.param_names
        if len(self.params) != len(expected):
            raise ValueError(
                f"{self.route.name} takes {len(expected)} path parameter(s) "
                f"{list(expected)}, got {len(self.params)}"
            )

    @property
    def method(self) -> HttpMethod:
        return self.route.method

    def path(self) -> str:
        """Return the URL path with every placeholder substituted"""
        values = iter(zip(self.route.param_names, self.params))

        def substitute(match: re.Match) -> str:
            name, value = next(values)
            return encode_path_param(name, value)

        return _PLACEHOLDER.sub(substitute, self.route.template)

    def __str__(self) -> str:
        return f"{self.method.value} {self.path()}"
