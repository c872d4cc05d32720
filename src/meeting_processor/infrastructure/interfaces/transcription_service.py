"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_data: bytes, file_name: str) -> str:
        """
        Recognizes a single utterance from WAV audio.

        Args:
            audio_data: Raw WAV file bytes.
            file_name: Object name of the recording, used in errors and logs.

        Returns:
            The recognized text, or an empty string if nothing was recognized.

        Raises:
            TranscriptionError: If recognition fails.
        """
        pass
