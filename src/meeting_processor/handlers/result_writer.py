"""Writes generated summaries back to storage."""

import io

from meeting_processor.domain import derive_summary_name
from meeting_processor.infrastructure.interfaces import StorageClient
from meeting_processor.logging import setup_logging

logger = setup_logging()

SUMMARY_CONTENT_TYPE = "text/plain; charset=utf-8"


class ResultWriter:
    """Persists summary text alongside the source recording."""

    def __init__(self, storage: StorageClient):
        self._storage = storage

    def write_summary(
        self, container_name: str, recording_name: str, summary_text: str
    ) -> str:
        """
        Uploads the summary as the full content of the derived object.

        Existing objects are overwritten.

        Returns:
            The object name written.

        Raises:
            StorageUploadError: If the upload fails.
        """
        object_name = derive_summary_name(recording_name)
        summary_bytes = summary_text.encode("utf-8")

        self._storage.upload(
            bucket_name=container_name,
            object_name=object_name,
            data=io.BytesIO(summary_bytes),
            size=len(summary_bytes),
            content_type=SUMMARY_CONTENT_TYPE,
        )

        logger.info(
            "Summary written",
            extra={"bucket_name": container_name, "object_name": object_name},
        )
        return object_name
