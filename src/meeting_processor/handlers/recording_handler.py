"""Handler for processing meeting recordings."""

from meeting_processor.domain import PipelineStage, ProcessingResult, RecordingTrigger
from meeting_processor.infrastructure.interfaces import (
    StorageClient,
    SummaryService,
    TextAnalyticsService,
    TranscriptionService,
)
from meeting_processor.logging import setup_logging

from .result_writer import ResultWriter

logger = setup_logging()


class RecordingHandler:
    """Orchestrates recording-to-summary operations."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        text_analytics: TextAnalyticsService,
        summary_service: SummaryService,
        result_writer: ResultWriter,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._text_analytics = text_analytics
        self._summary_service = summary_service
        self._result_writer = result_writer

    def process(self, trigger: RecordingTrigger) -> ProcessingResult:
        """
        Processes a recording by transcribing, analyzing, summarizing and
        storing the summary next to it.

        Stages run strictly in order; the summary is written only after every
        outbound call has succeeded, so a failure leaves storage untouched.

        Args:
            trigger: The trigger naming the recording in storage.

        Returns:
            ProcessingResult with the written summary details.

        Raises:
            RecordingNotFoundError: If the recording does not exist.
            StorageDownloadError: If the recording cannot be read.
            TranscriptionError: If speech recognition fails.
            TextAnalyticsError: If key phrase or sentiment extraction fails.
            SummaryGenerationError: If the summary endpoint fails.
            StorageUploadError: If the summary upload fails.
        """
        stage = PipelineStage.TRIGGERED
        logger.info(
            "Processing meeting recording",
            extra={
                "bucket_name": trigger.container_name,
                "file_name": trigger.blob_name,
            },
        )

        try:
            recording = self._storage.resolve(
                trigger.container_name, trigger.blob_name
            )
            logger.info(
                "Recording resolved",
                extra={"uri": recording.uri, "base_name": recording.base_name},
            )
            audio_data = self._storage.download(
                recording.container_name, recording.object_name
            )
            transcript = self._transcription_service.transcribe(
                audio_data, recording.object_name
            )
            stage = self._advance(stage, PipelineStage.TRANSCRIBED, recording.uri)

            key_phrases = self._text_analytics.extract_key_phrases(transcript)
            sentiment = self._text_analytics.analyze_sentiment(transcript)
            stage = self._advance(stage, PipelineStage.ANALYZED, recording.uri)

            summary = self._summary_service.synthesize(key_phrases, sentiment)
            stage = self._advance(stage, PipelineStage.SYNTHESIZED, recording.uri)

            summary_object_name = self._result_writer.write_summary(
                recording.container_name, recording.object_name, summary
            )
            stage = self._advance(stage, PipelineStage.WRITTEN, recording.uri)

        except Exception:
            logger.exception(
                "Meeting recording processing failed",
                extra={
                    "file_name": trigger.blob_name,
                    "failed_after": stage.value,
                    "stage": PipelineStage.FAILED.value,
                },
            )
            raise

        return ProcessingResult(
            container_name=recording.container_name,
            recording_name=recording.object_name,
            recording_base_name=recording.base_name,
            summary_object_name=summary_object_name,
            transcript_length=len(transcript),
        )

    @staticmethod
    def _advance(
        current: PipelineStage, target: PipelineStage, uri: str
    ) -> PipelineStage:
        logger.info(
            "Pipeline stage completed",
            extra={"from_stage": current.value, "stage": target.value, "uri": uri},
        )
        return target
