"""Tests for the wire models."""

import json

import pytest
from pydantic import ValidationError

from models import (
    AnalysisRequest,
    AnalysisResponse,
    Document,
    KeyPhraseResult,
    SentimentResult,
)


def test_single_request_serializes_to_wire_shape():
    request = AnalysisRequest.single("en", "Hello")
    payload = json.loads(request.to_json())

    assert list(payload) == ["documents"]
    assert len(payload["documents"]) == 1
    document = payload["documents"][0]
    assert set(document) == {"language", "id", "text"}
    assert document["language"] == "en"
    assert document["text"] == "Hello"


def test_documents_get_distinct_ids():
    ids = {Document(language="en", text="t").id for _ in range(50)}
    assert len(ids) == 50


def test_response_without_errors():
    response = AnalysisResponse.model_validate({"documents": [{"id": "1", "score": 0.2}], "errors": []})
    assert response.first_error() is None
    assert response.first_document() == {"id": "1", "score": 0.2}


def test_response_with_null_collections():
    response = AnalysisResponse.model_validate({"documents": None, "errors": None})
    assert response.first_error() is None
    assert response.first_document() is None


def test_error_entries_keep_message():
    response = AnalysisResponse.model_validate(
        {"errors": [{"id": "", "message": "Invalid language code."}, {"message": "second"}]}
    )
    assert response.first_error().message == "Invalid language code."


def test_key_phrase_result_reads_camel_case_field():
    result = KeyPhraseResult.model_validate({"id": "1", "keyPhrases": ["b", "a"]})
    assert result.key_phrases == ["b", "a"]


def test_sentiment_result_requires_score():
    with pytest.raises(ValidationError):
        SentimentResult.model_validate({"id": "1"})


def test_error_entry_with_null_message():
    response = AnalysisResponse.model_validate({"errors": [{"id": "1", "message": None}]})
    assert response.first_error().message is None


@pytest.mark.parametrize("score", [True, "0.7"])
def test_sentiment_result_rejects_coercible_scores(score):
    with pytest.raises(ValidationError):
        SentimentResult.model_validate({"id": "1", "score": score})
