"""Exceptions raised by the Text Analytics client."""

from typing import Optional

from httpx import TransportError


class TextAnalyticsError(Exception):
    """Base exception for every error raised by this package."""


class ConfigurationError(TextAnalyticsError):
    """The client was constructed without a usable key or endpoint."""


class InvalidArgumentError(TextAnalyticsError, ValueError):
    """A required argument was empty. Raised before any request is sent."""

    def __init__(self, argument: str):
        super().__init__(f"'{argument}' must be a non-empty string")
        self.argument = argument


class MalformedResponseError(TextAnalyticsError):
    """The service answered with a body that could not be interpreted."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class RemoteServiceError(TextAnalyticsError):
    """The service reported an error. ``str(err)`` is its message verbatim."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        document_id: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.document_id = document_id


__all__ = [
    "TextAnalyticsError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "RemoteServiceError",
    "TransportError",
]
