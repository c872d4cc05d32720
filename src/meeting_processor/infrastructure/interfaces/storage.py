"""Abstract interface for recording storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from meeting_processor.domain.models import RecordingReference


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def resolve(self, bucket_name: str, object_name: str) -> RecordingReference:
        """
        Resolves a stored object into a readable recording handle.

        Args:
            bucket_name: The storage bucket (container) name.
            object_name: The object path/name in storage.

        Returns:
            RecordingReference describing the object.

        Raises:
            RecordingNotFoundError: If the object does not exist.
            StorageDownloadError: If the lookup fails for any other reason.
        """

    @abstractmethod
    def download(self, bucket_name: str, object_name: str) -> bytes:
        """
        Downloads an object from storage.

        Raises:
            StorageDownloadError: If the download fails.
        """

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads an object to storage, replacing any existing content.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the data in bytes.
            content_type: MIME type of the object.

        Raises:
            StorageUploadError: If the upload fails.
        """
