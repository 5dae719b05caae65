from typing import Any, Mapping

import httpx  # type: ignore

from ghrest.config.constants.http_status_code import HTTP_ERROR_THRESHOLD


class HTTPResponse:
    """Read-only view over an httpx response
    Args:
        response: The httpx response to wrap
    """
    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.response.headers

    @property
    def is_error(self) -> bool:
        return self.status >= HTTP_ERROR_THRESHOLD

    def text(self) -> str:
        return self.response.text

    def bytes(self) -> bytes:
        return self.response.content

    def json(self) -> Any:
        return self.response.json()
