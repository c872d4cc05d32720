"""Shared fixtures for the meeting processor test suite.

External services are replaced with in-memory fakes that record every call,
so pipeline behavior can be asserted without network access.
"""

import pytest
import requests

from meeting_processor.config import (
    AppConfig,
    MinioConfig,
    SpeechConfig,
    SummaryConfig,
    TextAnalyticsConfig,
)
from meeting_processor.domain import (
    ConfidenceScores,
    KeyPhraseDocument,
    KeyPhraseResult,
    RecordingReference,
    SentimentDocument,
    SentimentResult,
)
from meeting_processor.exceptions import RecordingNotFoundError, StorageUploadError
from meeting_processor.handlers import RecordingHandler, ResultWriter
from meeting_processor.infrastructure.interfaces import (
    StorageClient,
    SummaryService,
    TextAnalyticsService,
    TranscriptionService,
)

ENVIRONMENT = {
    "AnalyticApiEndpoint": "https://analytics.example.com/",
    "AnalyticApiKey": "analytics-key",
    "SpeechApiEndpoint": "https://speech.example.com/",
    "SpeechApiKey": "speech-key",
    "SpeechApiRegion": "westeurope",
    "GenerateSummaryFunctionUrl": "https://summary.example.com/api/generate",
    "MINIO_ENDPOINT": "minio:9000",
    "MINIO_USER": "minio-user",
    "MINIO_PASSWORD": "minio-password",
    "FunctionKey": "function-key",
}


def make_response(status_code: int, content: bytes = b"") -> requests.Response:
    """Builds a real requests response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    return response


class FakeStorage(StorageClient):
    """In-memory object storage keyed by (bucket, object name)."""

    def __init__(self):
        self.objects: dict[tuple[str, str], bytes] = {}
        self.content_types: dict[tuple[str, str], str] = {}
        self.uploads: list[tuple[str, str]] = []
        self.fail_uploads = False

    def put(self, bucket_name: str, object_name: str, data: bytes) -> None:
        self.objects[(bucket_name, object_name)] = data

    def resolve(self, bucket_name: str, object_name: str) -> RecordingReference:
        if (bucket_name, object_name) not in self.objects:
            raise RecordingNotFoundError(bucket_name, object_name)
        return RecordingReference(
            container_name=bucket_name,
            object_name=object_name,
            uri=f"s3://{bucket_name}/{object_name}",
            size=len(self.objects[(bucket_name, object_name)]),
            content_type="audio/wav",
        )

    def download(self, bucket_name: str, object_name: str) -> bytes:
        return self.objects[(bucket_name, object_name)]

    def upload(self, bucket_name, object_name, data, size, content_type) -> None:
        if self.fail_uploads:
            raise StorageUploadError(object_name)
        self.objects[(bucket_name, object_name)] = data.read(size)
        self.content_types[(bucket_name, object_name)] = content_type
        self.uploads.append((bucket_name, object_name))


class FakeTranscriber(TranscriptionService):
    def __init__(self, text: str = "hello team", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, str]] = []

    def transcribe(self, audio_data: bytes, file_name: str) -> str:
        self.calls.append((audio_data, file_name))
        if self.error:
            raise self.error
        return self.text


class FakeTextAnalytics(TextAnalyticsService):
    def __init__(
        self,
        phrases: list[str] | None = None,
        score: float = 0.82,
        key_phrase_error: Exception | None = None,
        sentiment_error: Exception | None = None,
    ):
        self.phrases = ["team"] if phrases is None else phrases
        self.score = score
        self.key_phrase_error = key_phrase_error
        self.sentiment_error = sentiment_error
        self.calls: list[tuple[str, str]] = []

    def extract_key_phrases(self, text: str) -> KeyPhraseResult:
        self.calls.append(("key_phrases", text))
        if self.key_phrase_error:
            raise self.key_phrase_error
        return KeyPhraseResult(
            documents=[KeyPhraseDocument(id="1", key_phrases=self.phrases)]
        )

    def analyze_sentiment(self, text: str) -> SentimentResult:
        self.calls.append(("sentiment", text))
        if self.sentiment_error:
            raise self.sentiment_error
        return SentimentResult(
            documents=[
                SentimentDocument(
                    id="1",
                    score=self.score,
                    sentiment="positive",
                    confidence_scores=ConfidenceScores(
                        positive=self.score, neutral=0.1, negative=0.08
                    ),
                )
            ]
        )


class FakeSummaryService(SummaryService):
    def __init__(
        self,
        summary: str = "Positive discussion about the team.",
        error: Exception | None = None,
    ):
        self.summary = summary
        self.error = error
        self.calls: list[tuple[KeyPhraseResult, SentimentResult]] = []

    def synthesize(self, key_phrases, sentiment) -> str:
        self.calls.append((key_phrases, sentiment))
        if self.error:
            raise self.error
        return self.summary


@pytest.fixture
def env(monkeypatch):
    """Sets every configuration variable the service reads."""
    for name, value in ENVIRONMENT.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("MINIO_SECURE", raising=False)
    monkeypatch.delenv("SummaryRequestTimeoutSeconds", raising=False)
    return ENVIRONMENT


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        minio=MinioConfig(endpoint="minio:9000", user="u", password="p"),
        speech=SpeechConfig(api_key="speech-key", region="westeurope"),
        text_analytics=TextAnalyticsConfig(
            endpoint="https://analytics.example.com/", api_key="analytics-key"
        ),
        summary=SummaryConfig(function_url="https://summary.example.com/api/generate"),
        function_key="function-key",
    )


@pytest.fixture
def storage() -> FakeStorage:
    store = FakeStorage()
    store.put("recordings", "town-hall.wav", b"RIFF....WAVEfmt ")
    return store


@pytest.fixture
def transcriber() -> FakeTranscriber:
    return FakeTranscriber()


@pytest.fixture
def text_analytics() -> FakeTextAnalytics:
    return FakeTextAnalytics()


@pytest.fixture
def summary_service() -> FakeSummaryService:
    return FakeSummaryService()


@pytest.fixture
def handler(storage, transcriber, text_analytics, summary_service) -> RecordingHandler:
    return RecordingHandler(
        storage=storage,
        transcription_service=transcriber,
        text_analytics=text_analytics,
        summary_service=summary_service,
        result_writer=ResultWriter(storage),
    )
