from meeting_processor.config import AppConfig, load_config
from meeting_processor.exceptions import (
    ConfigurationError,
    RecordingNotFoundError,
    StorageDownloadError,
    StorageUploadError,
    SummaryGenerationError,
    TextAnalyticsError,
    TranscriptionError,
)
from meeting_processor.logging import setup_logging

__all__ = [
    "AppConfig",
    "load_config",
    "setup_logging",
    "ConfigurationError",
    "RecordingNotFoundError",
    "StorageDownloadError",
    "StorageUploadError",
    "SummaryGenerationError",
    "TextAnalyticsError",
    "TranscriptionError",
]
