"""Azure Speech implementation of the TranscriptionService interface."""

import tempfile

import azure.cognitiveservices.speech as speechsdk

from meeting_processor.exceptions import TranscriptionError
from meeting_processor.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AzureSpeechTranscriber(TranscriptionService):
    """Recognizes a single utterance using the Azure Speech SDK."""

    def __init__(self, speech_config: speechsdk.SpeechConfig):
        self._speech_config = speech_config

    def transcribe(self, audio_data: bytes, file_name: str) -> str:
        """
        Transcribes the first utterance in the audio.

        Writes audio to a temp file (the SDK reads WAV input from disk) and
        issues one recognize-once call. Speech after the first detected
        utterance is not transcribed.
        """
        try:
            with tempfile.NamedTemporaryFile(suffix=".wav", delete=True) as temp_file:
                temp_file.write(audio_data)
                temp_file.flush()

                audio_config = speechsdk.audio.AudioConfig(filename=temp_file.name)
                recognizer = speechsdk.SpeechRecognizer(
                    speech_config=self._speech_config, audio_config=audio_config
                )
                result = recognizer.recognize_once()

                if result.reason == speechsdk.ResultReason.Canceled:
                    details = result.cancellation_details
                    if details.reason == speechsdk.CancellationReason.Error:
                        raise TranscriptionError(
                            file_name,
                            Exception(details.error_details),
                        )

            if result.reason == speechsdk.ResultReason.RecognizedSpeech:
                text = result.text
            else:
                text = ""

            logger.info(
                "Speech recognition completed",
                extra={
                    "file_name": file_name,
                    "reason": str(result.reason),
                    "text_length": len(text),
                },
            )
            return text

        except TranscriptionError:
            logger.exception(
                "Speech recognition was canceled", extra={"file_name": file_name}
            )
            raise
        except Exception as e:
            logger.exception(
                "Azure Speech recognition failed", extra={"file_name": file_name}
            )
            raise TranscriptionError(file_name, e) from e
