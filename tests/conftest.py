"""Shared fixtures: clients wired to an in-memory httpx transport."""

import json

import httpx
import pytest

from analyzer import TextAnalysisClient

ENDPOINT = "https://westus.api.cognitive.microsoft.com/text/analytics/v2.0/"


@pytest.fixture
def sent():
    """Requests captured by the fake transport, in order."""
    return []


@pytest.fixture
def make_client(sent):
    """
    Build a client whose transport answers with ``response`` (or calls
    ``handler``) and records every request in ``sent``.
    """
    def _make(response=None, handler=None, api_key="test-key", endpoint=ENDPOINT):
        def _respond(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if handler is not None:
                return handler(request)
            return response

        return TextAnalysisClient(
            api_key,
            endpoint=endpoint,
            transport=httpx.MockTransport(_respond)
        )

    return _make


def request_body(request: httpx.Request) -> dict:
    return json.loads(request.content.decode("utf-8"))


def echo_key_phrases(phrases):
    """Handler answering with the request's own document id."""
    def _handler(request):
        document_id = request_body(request)["documents"][0]["id"]
        return httpx.Response(
            200,
            json={"documents": [{"id": document_id, "keyPhrases": phrases}], "errors": []}
        )
    return _handler
