"""Infrastructure interface exports."""

from .storage import StorageClient
from .summary_service import SummaryService
from .text_analytics_service import TextAnalyticsService
from .transcription_service import TranscriptionService

__all__ = [
    "StorageClient",
    "SummaryService",
    "TextAnalyticsService",
    "TranscriptionService",
]
