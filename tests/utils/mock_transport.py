"""
In-process HTTP transport for tests.

RecordingTransport answers requests through a handler function and keeps
every request it has served, so tests can assert on the exact URL, headers
and body that went over the wire.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx  # type: ignore

TEST_BASE_URL = "https://api.github.test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it has served"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_response(payload: Any, status_code: int = 200, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json", **(headers or {})},
    )


def request_path(request: httpx.Request) -> str:
    """Raw (still percent-encoded) path of a request, without the query string"""
    return request.url.raw_path.split(b"?")[0].decode("ascii")
