"""Custom exceptions for the meeting processor."""


class ConfigurationError(Exception):
    """Raised when required environment configuration is missing or invalid."""

    def __init__(self, missing: list[str], invalid: list[str] | None = None):
        self.missing = missing
        self.invalid = invalid or []
        problems = []
        if self.missing:
            problems.append(f"missing: {', '.join(sorted(self.missing))}")
        if self.invalid:
            problems.append(f"invalid: {', '.join(sorted(self.invalid))}")
        super().__init__(f"Bad configuration ({'; '.join(problems)})")


class RecordingNotFoundError(Exception):
    """Raised when the triggering recording does not exist in storage."""

    def __init__(self, container_name: str, object_name: str):
        self.container_name = container_name
        self.object_name = object_name
        super().__init__(
            f"Recording '{object_name}' not found in container '{container_name}'"
        )


class StorageDownloadError(Exception):
    """Raised when reading a recording from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class StorageUploadError(Exception):
    """Raised when writing a summary to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class TranscriptionError(Exception):
    """Raised when speech recognition fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class TextAnalyticsError(Exception):
    """Raised when a text analytics call fails."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Text analytics operation '{operation}' failed")


class SummaryGenerationError(Exception):
    """Raised when the summary generation endpoint call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)
