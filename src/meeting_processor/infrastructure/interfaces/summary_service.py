"""Abstract interface for summary generation."""

from abc import ABC, abstractmethod

from meeting_processor.domain.models import KeyPhraseResult, SentimentResult


class SummaryService(ABC):
    """Abstract base class for summary generation backends."""

    @abstractmethod
    def synthesize(
        self, key_phrases: KeyPhraseResult, sentiment: SentimentResult
    ) -> str:
        """
        Produces summary text from analysis results.

        Args:
            key_phrases: Key phrase extraction result.
            sentiment: Sentiment analysis result.

        Returns:
            The summary text, unmodified.

        Raises:
            SummaryGenerationError: If the backend fails.
        """
        pass
