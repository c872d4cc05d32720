"""Domain models for the meeting recording pipeline."""

import posixpath
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    """Base for analytics results serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RecordingTrigger(BaseModel):
    """Incoming trigger request naming the recording in storage."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    container_name: str = Field(alias="containerName", min_length=1)
    blob_name: str = Field(alias="blobName", min_length=1)


class RecordingReference(BaseModel, frozen=True):
    """Resolved handle to a recording stored in a container."""

    container_name: str
    object_name: str
    uri: str
    size: int | None = None
    content_type: str | None = None

    @property
    def base_name(self) -> str:
        """Final path segment of the object name, without its extension."""
        return posixpath.splitext(posixpath.basename(self.object_name))[0]


class DocumentError(_CamelModel):
    """A per-document error reported by a text analytics batch call."""

    id: str
    message: str


class KeyPhraseDocument(_CamelModel):
    """Key phrases extracted from one document."""

    id: str
    key_phrases: list[str] = Field(alias="keyPhrases")


class KeyPhraseResult(_CamelModel):
    """Batch result of a key phrase extraction call."""

    documents: list[KeyPhraseDocument] = []
    errors: list[DocumentError] = []


class ConfidenceScores(_CamelModel):
    """Per-class sentiment confidence."""

    positive: float
    neutral: float
    negative: float


class SentimentDocument(_CamelModel):
    """Sentiment of one document. `score` is the positive confidence in [0, 1]."""

    id: str
    score: float = Field(ge=0.0, le=1.0)
    sentiment: str | None = None
    confidence_scores: ConfidenceScores | None = Field(
        default=None, alias="confidenceScores"
    )


class SentimentResult(_CamelModel):
    """Batch result of a sentiment analysis call."""

    documents: list[SentimentDocument] = []
    errors: list[DocumentError] = []


class PipelineStage(str, Enum):
    """States of a single pipeline invocation."""

    TRIGGERED = "triggered"
    TRANSCRIBED = "transcribed"
    ANALYZED = "analyzed"
    SYNTHESIZED = "synthesized"
    WRITTEN = "written"
    FAILED = "failed"


class ProcessingResult(BaseModel, frozen=True):
    """Result of a completed pipeline invocation."""

    container_name: str
    recording_name: str
    recording_base_name: str
    summary_object_name: str
    transcript_length: int
