"""
Tests for logger creation and the errors the client raises.
"""

import logging

from ghrest.exceptions.github_exceptions import (
    DeserializationError,
    GitHubError,
    TransportError,
)
from ghrest.utils.logger import create_logger


class TestCreateLogger:

    def test_single_handler(self, faker_instance):
        name = f"ghrest.test.{faker_instance.pystr()}"
        first = create_logger(name)
        second = create_logger(name)
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_level_from_env(self, monkeypatch, faker_instance):
        monkeypatch.setenv("GITHUB_LOG_LEVEL", "debug")
        logger = create_logger(f"ghrest.test.{faker_instance.pystr()}")
        assert logger.level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch, faker_instance):
        monkeypatch.setenv("GITHUB_LOG_LEVEL", "DEBUG")
        logger = create_logger(f"ghrest.test.{faker_instance.pystr()}", level="WARNING")
        assert logger.level == logging.WARNING

    def test_http_libraries_are_quieted(self, faker_instance):
        create_logger(f"ghrest.test.{faker_instance.pystr()}")
        assert logging.getLogger("httpx").level == logging.WARNING


class TestErrors:

    def test_hierarchy(self):
        assert issubclass(TransportError, GitHubError)
        assert issubclass(DeserializationError, GitHubError)

    def test_str_includes_endpoint(self):
        assert str(TransportError("Not Found", endpoint="GET /x", status_code=404)) == "GET /x: Not Found"
        assert str(GitHubError("boom")) == "boom"

    def test_defaults(self):
        error = DeserializationError()
        assert error.body is None
        assert error.details == {}
        assert TransportError().status_code is None
