"""Client for cloud text analytics: key phrases and sentiment."""

from .base import TextAnalysisService
from .client import TextAnalysisClient
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    MalformedResponseError,
    RemoteServiceError,
    TextAnalyticsError,
    TransportError,
)

__all__ = [
    "TextAnalysisService",
    "TextAnalysisClient",
    "TextAnalyticsError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "RemoteServiceError",
    "TransportError",
]
