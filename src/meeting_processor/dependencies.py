"""FastAPI dependency injection configuration.

Configuration is read from the environment on every request and each
request gets its own service clients, so invocations share no state.
"""

from collections.abc import Generator
from typing import Annotated

import azure.cognitiveservices.speech as speechsdk
import requests
from azure.ai.textanalytics import TextAnalyticsClient
from azure.core.credentials import AzureKeyCredential
from fastapi import Depends, HTTPException
from minio import Minio

from meeting_processor.config import AppConfig, load_config
from meeting_processor.exceptions import ConfigurationError
from meeting_processor.handlers import RecordingHandler, ResultWriter
from meeting_processor.infrastructure import (
    AzureSpeechTranscriber,
    AzureTextAnalyticsService,
    HttpSummaryService,
    MinioStorageClient,
)
from meeting_processor.logging import setup_logging

logger = setup_logging()


def get_config() -> AppConfig:
    """Loads a fresh configuration snapshot for the current request."""
    try:
        return load_config()
    except ConfigurationError as e:
        logger.exception(
            "Configuration invalid",
            extra={"missing": e.missing, "invalid": e.invalid},
        )
        raise HTTPException(status_code=500, detail="Internal server error")


ConfigDep = Annotated[AppConfig, Depends(get_config)]


def get_handler(config: ConfigDep) -> Generator[RecordingHandler, None, None]:
    """Builds a recording handler wired to request-scoped clients."""
    minio_client = Minio(
        endpoint=config.minio.endpoint,
        access_key=config.minio.user,
        secret_key=config.minio.password,
        secure=config.minio.secure,
    )
    storage = MinioStorageClient(minio_client)

    speech_config = speechsdk.SpeechConfig(
        subscription=config.speech.api_key,
        region=config.speech.region,
    )

    analytics_client = TextAnalyticsClient(
        endpoint=config.text_analytics.endpoint,
        credential=AzureKeyCredential(config.text_analytics.api_key),
    )

    session = requests.Session()

    try:
        yield RecordingHandler(
            storage=storage,
            transcription_service=AzureSpeechTranscriber(speech_config),
            text_analytics=AzureTextAnalyticsService(analytics_client),
            summary_service=HttpSummaryService(
                session,
                config.summary.function_url,
                config.summary.timeout_seconds,
            ),
            result_writer=ResultWriter(storage),
        )
    finally:
        session.close()
        analytics_client.close()
