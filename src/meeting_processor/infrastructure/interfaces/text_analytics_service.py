"""Abstract interface for text analytics operations."""

from abc import ABC, abstractmethod

from meeting_processor.domain.models import KeyPhraseResult, SentimentResult


class TextAnalyticsService(ABC):
    """Abstract base class for key phrase and sentiment backends."""

    @abstractmethod
    def extract_key_phrases(self, text: str) -> KeyPhraseResult:
        """
        Extracts key phrases from a transcript.

        Raises:
            TextAnalyticsError: If the call fails.
        """

    @abstractmethod
    def analyze_sentiment(self, text: str) -> SentimentResult:
        """
        Scores the sentiment of a transcript.

        Raises:
            TextAnalyticsError: If the call fails.
        """
