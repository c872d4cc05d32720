"""Infrastructure layer exports."""

from .azure_speech_transcriber import AzureSpeechTranscriber
from .azure_text_analytics import AzureTextAnalyticsService
from .http_summary_service import HttpSummaryService, build_summary_payload
from .minio_storage import MinioStorageClient

__all__ = [
    "AzureSpeechTranscriber",
    "AzureTextAnalyticsService",
    "HttpSummaryService",
    "MinioStorageClient",
    "build_summary_payload",
]
