"""Azure Text Analytics implementation of the TextAnalyticsService interface."""

from azure.ai.textanalytics import TextAnalyticsClient
from azure.core.exceptions import AzureError

from meeting_processor.domain.batch_input import build_batch_input
from meeting_processor.domain.models import (
    ConfidenceScores,
    DocumentError,
    KeyPhraseDocument,
    KeyPhraseResult,
    SentimentDocument,
    SentimentResult,
)
from meeting_processor.exceptions import TextAnalyticsError
from meeting_processor.logging import setup_logging

from .interfaces import TextAnalyticsService

logger = setup_logging()


def _document_error(doc) -> DocumentError:
    return DocumentError(id=doc.id, message=f"{doc.error.code}: {doc.error.message}")


class AzureTextAnalyticsService(TextAnalyticsService):
    """Key phrase and sentiment extraction using Azure AI Language."""

    def __init__(self, client: TextAnalyticsClient):
        self._client = client

    def extract_key_phrases(self, text: str) -> KeyPhraseResult:
        try:
            response = self._client.extract_key_phrases(build_batch_input(text))
        except AzureError as e:
            logger.exception("Key phrase extraction failed")
            raise TextAnalyticsError("extract_key_phrases", e) from e

        documents: list[KeyPhraseDocument] = []
        errors: list[DocumentError] = []
        for doc in response:
            if doc.is_error:
                errors.append(_document_error(doc))
            else:
                documents.append(
                    KeyPhraseDocument(id=doc.id, key_phrases=list(doc.key_phrases))
                )

        logger.info(
            "Key phrases extracted",
            extra={
                "phrase_count": sum(len(d.key_phrases) for d in documents),
                "error_count": len(errors),
            },
        )
        return KeyPhraseResult(documents=documents, errors=errors)

    def analyze_sentiment(self, text: str) -> SentimentResult:
        try:
            response = self._client.analyze_sentiment(build_batch_input(text))
        except AzureError as e:
            logger.exception("Sentiment analysis failed")
            raise TextAnalyticsError("analyze_sentiment", e) from e

        documents: list[SentimentDocument] = []
        errors: list[DocumentError] = []
        for doc in response:
            if doc.is_error:
                errors.append(_document_error(doc))
                continue
            scores = doc.confidence_scores
            documents.append(
                SentimentDocument(
                    id=doc.id,
                    score=scores.positive,
                    sentiment=doc.sentiment,
                    confidence_scores=ConfidenceScores(
                        positive=scores.positive,
                        neutral=scores.neutral,
                        negative=scores.negative,
                    ),
                )
            )

        logger.info(
            "Sentiment analyzed",
            extra={
                "scores": [d.score for d in documents],
                "error_count": len(errors),
            },
        )
        return SentimentResult(documents=documents, errors=errors)
