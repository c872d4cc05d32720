"""MinIO implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio
from minio.error import S3Error

from meeting_processor.domain.models import RecordingReference
from meeting_processor.exceptions import (
    RecordingNotFoundError,
    StorageDownloadError,
    StorageUploadError,
)
from meeting_processor.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()

_NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "NoSuchObject"}


class MinioStorageClient(StorageClient):
    """Handles recording and summary storage using MinIO."""

    def __init__(self, client: Minio):
        self._client = client

    def resolve(self, bucket_name: str, object_name: str) -> RecordingReference:
        try:
            stat = self._client.stat_object(bucket_name, object_name)
        except S3Error as e:
            if e.code in _NOT_FOUND_CODES:
                logger.error(
                    "Recording not found in MinIO",
                    extra={"bucket_name": bucket_name, "object_name": object_name},
                )
                raise RecordingNotFoundError(bucket_name, object_name) from e
            logger.exception(
                "MinIO stat failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e
        except Exception as e:
            logger.exception(
                "MinIO stat failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e

        reference = RecordingReference(
            container_name=bucket_name,
            object_name=object_name,
            uri=f"s3://{bucket_name}/{object_name}",
            size=stat.size,
            content_type=stat.content_type,
        )
        logger.info(
            "Recording resolved",
            extra={"uri": reference.uri, "size": reference.size},
        )
        return reference

    def download(self, bucket_name: str, object_name: str) -> bytes:
        try:
            response = self._client.get_object(bucket_name, object_name)
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded from MinIO",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            return data
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e
