"""HTTP implementation of the SummaryService interface."""

import json

import requests

from meeting_processor.domain.models import KeyPhraseResult, SentimentResult
from meeting_processor.exceptions import SummaryGenerationError
from meeting_processor.logging import setup_logging

from .interfaces import SummaryService

logger = setup_logging()


def build_summary_payload(
    key_phrases: KeyPhraseResult, sentiment: SentimentResult
) -> str:
    """Serializes both analysis results into the summary request body."""
    return json.dumps(
        {
            "keyPhrases": key_phrases.model_dump(mode="json", by_alias=True),
            "sentiment": sentiment.model_dump(mode="json", by_alias=True),
        }
    )


class HttpSummaryService(SummaryService):
    """Delegates summary generation to an external HTTP endpoint."""

    def __init__(
        self,
        session: requests.Session,
        function_url: str,
        timeout_seconds: float | None = None,
    ):
        self._session = session
        self._function_url = function_url
        self._timeout_seconds = timeout_seconds

    def synthesize(
        self, key_phrases: KeyPhraseResult, sentiment: SentimentResult
    ) -> str:
        """
        Posts the analysis results and returns the response body verbatim.

        The body is decoded as UTF-8 regardless of the declared charset so the
        stored summary matches the bytes the endpoint returned.
        """
        payload = build_summary_payload(key_phrases, sentiment)

        try:
            response = self._session.post(
                self._function_url,
                data=payload.encode("utf-8"),
                headers={"Content-Type": "application/json; charset=utf-8"},
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception("Summary generation request failed")
            raise SummaryGenerationError(
                "Error calling summary generation function.", cause=e
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error(
                "Summary generation returned an error status",
                extra={"status_code": response.status_code},
            )
            raise SummaryGenerationError(
                "Error calling summary generation function.",
                status_code=response.status_code,
            )

        try:
            summary = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.exception("Summary response is not valid UTF-8")
            raise SummaryGenerationError(
                "Summary generation function returned undecodable text.",
                status_code=response.status_code,
                cause=e,
            ) from e

        logger.info("Summary generated", extra={"summary_length": len(summary)})
        return summary
