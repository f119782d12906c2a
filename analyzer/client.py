"""Async client for the Text Analytics key phrase and sentiment operations."""

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ValidationError

from config import DEFAULT_ENDPOINT, Settings, settings
from models import AnalysisRequest, AnalysisResponse, KeyPhraseResult, SentimentResult

from .base import TextAnalysisService
from .errors import (
    ConfigurationError,
    InvalidArgumentError,
    MalformedResponseError,
    RemoteServiceError,
)

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
UNDESCRIBED_ERROR = "The service reported an error without a message"


def _require(name: str, value: Optional[str]) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(name)


class TextAnalysisClient(TextAnalysisService):
    """
    Client for the Text Analytics REST API.

    One document is sent per call. The underlying ``httpx.AsyncClient`` is
    created once, carries the subscription key as a default header and is
    shared by every call, including overlapping ones.

    Failures are never retried:
    - empty or non-string arguments raise InvalidArgumentError before any request
    - connection, DNS, TLS and timeout failures propagate as httpx.TransportError
    - errors reported by the service raise RemoteServiceError
    - bodies that cannot be interpreted raise MalformedResponseError
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not api_key:
            raise ConfigurationError("API key must be a non-empty string")
        if not endpoint:
            raise ConfigurationError("Service endpoint must be a non-empty string")

        self._api_key = api_key
        self._endpoint = endpoint.rstrip("/") + "/"
        self._http = httpx.AsyncClient(
            headers={SUBSCRIPTION_KEY_HEADER: api_key},
            transport=transport
        )

    @classmethod
    def from_settings(
        cls,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "TextAnalysisClient":
        """Build a client from environment configuration."""
        config = config or settings
        if not config.has_api_key():
            raise ConfigurationError("TEXT_ANALYTICS_KEY is not configured")
        return cls(
            config.text_analytics_key,
            endpoint=config.text_analytics_endpoint,
            transport=transport
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        """Release the pooled connections."""
        await self._http.aclose()

    async def __aenter__(self) -> "TextAnalysisClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def extract_key_phrases(self, language: str, text: str) -> list[str]:
        """
        Key phrase analysis.

        Args:
            language: Language code of the text (e.g. "en")
            text: Text to analyze

        Returns:
            Key phrases in the order the service returned them
        """
        document = await self._analyze("keyPhrases", language, text)
        return self._read_result(KeyPhraseResult, document, "keyPhrases").key_phrases

    async def get_sentiment(self, language: str, text: str) -> float:
        """
        Sentiment analysis.

        Returns:
            From 0 to 1 (1 being totally positive sentiment), unclamped
        """
        document = await self._analyze("sentiment", language, text)
        return self._read_result(SentimentResult, document, "score").score

    async def _analyze(self, operation: str, language: str, text: str) -> dict[str, Any]:
        """POST one document to ``operation`` and return the first result document."""
        _require("language", language)
        _require("text", text)

        request = AnalysisRequest.single(language, text)
        document_id = request.documents[0].id
        logger.debug("POST %s document=%s language=%s", operation, document_id, language)

        response = await self._http.post(
            f"{self._endpoint}{operation}",
            content=request.to_json().encode("utf-8"),
            headers={"Content-Type": JSON_CONTENT_TYPE}
        )

        if not response.is_success:
            self._raise_for_status(operation, response)

        analysis = self._parse_response(operation, response)

        error = analysis.first_error()
        if error is not None:
            logger.warning("%s reported an error: %s", operation, error.message)
            raise RemoteServiceError(
                error.message or UNDESCRIBED_ERROR,
                status_code=response.status_code,
                document_id=error.id or None
            )

        document = analysis.first_document()
        if document is None:
            logger.warning("%s response contains no documents", operation)
            raise MalformedResponseError("Response contains no documents", response.text)

        if document.get("id") not in (None, document_id):
            logger.warning(
                "%s returned document %s for request %s",
                operation, document.get("id"), document_id
            )
        return document

    def _parse_response(self, operation: str, response: httpx.Response) -> AnalysisResponse:
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("%s response is not valid JSON", operation)
            raise MalformedResponseError(f"Response body is not valid JSON: {e}", response.text) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError("Response body is not a JSON object", response.text)

        try:
            return AnalysisResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("%s response has an unexpected shape", operation)
            raise MalformedResponseError(f"Unexpected response shape: {e}", response.text) from e

    def _raise_for_status(self, operation: str, response: httpx.Response) -> None:
        """Turn a non-2xx response into RemoteServiceError, keeping the service message."""
        message = None
        document_id = None

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict):
            errors = payload.get("errors")
            error = payload.get("error")
            if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                message = errors[0].get("message")
                document_id = errors[0].get("id") or None
            elif isinstance(payload.get("message"), str):
                message = payload["message"]
            elif isinstance(error, dict):
                message = error.get("message")

        if not message:
            message = f"HTTP {response.status_code} {response.reason_phrase}".strip()

        logger.warning("%s failed with HTTP %s: %s", operation, response.status_code, message)
        raise RemoteServiceError(message, status_code=response.status_code, document_id=document_id)

    @staticmethod
    def _read_result(model: type[BaseModel], document: dict[str, Any], field: str):
        try:
            return model.model_validate(document)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response document is missing a valid '{field}' field",
                json.dumps(document)
            ) from e
