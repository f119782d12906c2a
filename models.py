"""Wire models for the Text Analytics v2.0 REST API."""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field


def new_document_id() -> str:
    """Generate a fresh identifier for an outgoing document."""
    return str(uuid.uuid4())


class Document(BaseModel):
    """One unit of text submitted for analysis."""
    language: str
    id: str = Field(default_factory=new_document_id)
    text: str


class AnalysisRequest(BaseModel):
    """Request envelope. The API accepts many documents; this client sends one."""
    documents: list[Document] = Field(default_factory=list)

    @classmethod
    def single(cls, language: str, text: str) -> "AnalysisRequest":
        """Build a request holding exactly one freshly identified document."""
        return cls(documents=[Document(language=language, text=text)])

    def to_json(self) -> str:
        """Serialize to the compact JSON body sent on the wire."""
        return self.model_dump_json()


class DocumentError(BaseModel):
    """An entry of the ``errors`` collection of a response."""
    id: Optional[str] = None
    message: Optional[str] = None


class AnalysisResponse(BaseModel):
    """
    Parsed response body.

    Result documents are kept as raw dicts; each operation validates the
    entry it needs against its own result model.
    """
    documents: Optional[list[dict[str, Any]]] = None
    errors: Optional[list[DocumentError]] = None

    def first_error(self) -> Optional[DocumentError]:
        """Return the first reported error, or None when the list is empty."""
        return self.errors[0] if self.errors else None

    def first_document(self) -> Optional[dict[str, Any]]:
        """Return the first result document, or None when there is none."""
        return self.documents[0] if self.documents else None


class KeyPhraseResult(BaseModel):
    """Result document of the ``keyPhrases`` operation."""
    id: Optional[str] = None
    key_phrases: list[str] = Field(alias="keyPhrases")


class SentimentResult(BaseModel):
    """Result document of the ``sentiment`` operation (0 negative .. 1 positive)."""
    id: Optional[str] = None
    score: float = Field(strict=True)
