"""
Tests for the generic HTTP layer under the GitHub client.
"""

import json

import httpx  # type: ignore
import pytest  # type: ignore

from ghrest.config.constants.http_status_code import HTTP_ERROR_THRESHOLD, HttpStatusCode
from ghrest.sources.client.http.http_client import HTTPClient
from ghrest.sources.client.http.http_request import HTTPRequest
from ghrest.sources.client.http.http_response import HTTPResponse
from tests.utils.mock_transport import RecordingTransport, json_response


def echo(request: httpx.Request) -> httpx.Response:
    return json_response({"path": request.url.path}, headers={"X-Echo": "1"})


class TestHTTPRequest:

    def test_aliases(self):
        request = HTTPRequest(uri="https://example.test/x", query={"a": 1})
        assert request.url == "https://example.test/x"
        assert request.query_params == {"a": 1}
        assert request.method == "GET"

    def test_to_json_decodes_bytes(self):
        request = HTTPRequest(url="https://example.test/x", method="POST", body=b"raw")
        assert json.loads(request.to_json())["body"] == "raw"


class TestHTTPResponse:

    def test_accessors(self):
        response = HTTPResponse(json_response({"ok": True}, status_code=201))
        assert response.status == 201
        assert response.json() == {"ok": True}
        assert json.loads(response.text()) == {"ok": True}
        assert response.bytes() == response.text().encode("utf-8")
        assert response.is_error is False

    @pytest.mark.parametrize("status", list(HttpStatusCode), ids=lambda s: s.name)
    def test_is_error(self, status):
        is_error = 400 <= status.value
        assert HTTPResponse(httpx.Response(status.value)).is_error is is_error

    def test_error_threshold(self):
        assert HTTP_ERROR_THRESHOLD == HttpStatusCode.BAD_REQUEST.value == 400


class TestHTTPClient:

    @pytest.mark.asyncio
    async def test_execute_sends_client_and_request_headers(self):
        transport = RecordingTransport(echo)
        async with HTTPClient(headers={"User-Agent": "ua/1"}, transport=transport) as client:
            response = await client.execute(
                HTTPRequest(url="https://example.test/a/b", headers={"X-Trace": "t"})
            )

        assert response.status == 200
        assert response.headers["X-Echo"] == "1"
        assert transport.last.headers["User-Agent"] == "ua/1"
        assert transport.last.headers["X-Trace"] == "t"

    @pytest.mark.asyncio
    async def test_json_body(self):
        transport = RecordingTransport(echo)
        client = HTTPClient(transport=transport)

        await client.execute(HTTPRequest(url="https://example.test/", method="POST", body=[1, 2]))
        await client.close()

        assert json.loads(transport.last.content) == [1, 2]

    @pytest.mark.asyncio
    async def test_client_is_created_lazily(self):
        client = HTTPClient(transport=RecordingTransport(echo))
        assert client.client is None

        await client.execute(HTTPRequest(url="https://example.test/"))

        assert isinstance(client.client, httpx.AsyncClient)
        await client.close()
        assert client.client is None
