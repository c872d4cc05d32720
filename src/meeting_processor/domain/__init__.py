"""Domain layer exports."""

from meeting_processor.domain.batch_input import (
    DOCUMENT_ID,
    DOCUMENT_LANGUAGE,
    build_batch_input,
)
from meeting_processor.domain.models import (
    ConfidenceScores,
    DocumentError,
    KeyPhraseDocument,
    KeyPhraseResult,
    PipelineStage,
    ProcessingResult,
    RecordingReference,
    RecordingTrigger,
    SentimentDocument,
    SentimentResult,
)
from meeting_processor.domain.summary_naming import SUMMARY_SUFFIX, derive_summary_name

__all__ = [
    "DOCUMENT_ID",
    "DOCUMENT_LANGUAGE",
    "build_batch_input",
    "ConfidenceScores",
    "DocumentError",
    "KeyPhraseDocument",
    "KeyPhraseResult",
    "PipelineStage",
    "ProcessingResult",
    "RecordingReference",
    "RecordingTrigger",
    "SentimentDocument",
    "SentimentResult",
    "SUMMARY_SUFFIX",
    "derive_summary_name",
]
