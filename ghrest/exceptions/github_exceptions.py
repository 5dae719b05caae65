from typing import Optional


class GitHubError(Exception):
    """Base exception for GitHub REST API calls"""

    def __init__(self, message: str, endpoint: str = None, details: dict = None) -> None:
        self.message = message
        self.endpoint = endpoint
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.endpoint}: {self.message}"
        return self.message


class TransportError(GitHubError):
    """Raised when the request could not be completed at the network or HTTP layer.

    Covers connection, TLS, timeout and protocol errors raised by httpx, and
    responses whose status code signals failure. ``status_code`` is None when
    no response was received.
    """

    def __init__(
        self,
        message: str = "Request failed",
        endpoint: str = None,
        status_code: Optional[int] = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, endpoint, details)
        self.status_code = status_code


class DeserializationError(GitHubError):
    """Raised when a response body is not JSON or does not match the expected shape"""

    def __init__(
        self,
        message: str = "Failed to deserialize response",
        endpoint: str = None,
        body: str = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, endpoint, details)
        self.body = body
