"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

from meeting_processor.exceptions import ConfigurationError


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    secure: bool = False


class SpeechConfig(BaseModel, frozen=True):
    """Azure Speech configuration."""

    api_key: str
    region: str


class TextAnalyticsConfig(BaseModel, frozen=True):
    """Azure Text Analytics configuration."""

    endpoint: str
    api_key: str


class SummaryConfig(BaseModel, frozen=True):
    """Summary generation endpoint configuration."""

    function_url: str
    timeout_seconds: float | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    speech: SpeechConfig
    text_analytics: TextAnalyticsConfig
    summary: SummaryConfig
    function_key: str


# SpeechApiEndpoint is required for deployment parity but the recognizer is
# built from key and region; the SDK rejects region and endpoint together.
_REQUIRED_VARIABLES = (
    "AnalyticApiEndpoint",
    "AnalyticApiKey",
    "SpeechApiEndpoint",
    "SpeechApiKey",
    "SpeechApiRegion",
    "GenerateSummaryFunctionUrl",
    "MINIO_ENDPOINT",
    "MINIO_USER",
    "MINIO_PASSWORD",
    "FunctionKey",
)


def _parse_timeout(value: str | None) -> float | None:
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError as e:
        raise ConfigurationError([], invalid=["SummaryRequestTimeoutSeconds"]) from e
    if timeout <= 0:
        raise ConfigurationError([], invalid=["SummaryRequestTimeoutSeconds"])
    return timeout


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        ConfigurationError: If any required variable is unset or empty, or an
            optional value cannot be parsed.
    """
    env = {name: os.getenv(name, "") for name in _REQUIRED_VARIABLES}
    missing = [name for name, value in env.items() if not value]
    if missing:
        raise ConfigurationError(missing)

    timeout = _parse_timeout(os.getenv("SummaryRequestTimeoutSeconds"))

    return AppConfig(
        minio=MinioConfig(
            endpoint=env["MINIO_ENDPOINT"],
            user=env["MINIO_USER"],
            password=env["MINIO_PASSWORD"],
            secure=os.getenv("MINIO_SECURE", "false").lower() == "true",
        ),
        speech=SpeechConfig(
            api_key=env["SpeechApiKey"],
            region=env["SpeechApiRegion"],
        ),
        text_analytics=TextAnalyticsConfig(
            endpoint=env["AnalyticApiEndpoint"],
            api_key=env["AnalyticApiKey"],
        ),
        summary=SummaryConfig(
            function_url=env["GenerateSummaryFunctionUrl"],
            timeout_seconds=timeout,
        ),
        function_key=env["FunctionKey"],
    )
