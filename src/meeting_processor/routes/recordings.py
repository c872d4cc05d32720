"""Meeting recording trigger endpoint."""

import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import PlainTextResponse

from meeting_processor.dependencies import ConfigDep, get_handler
from meeting_processor.domain import RecordingTrigger
from meeting_processor.exceptions import RecordingNotFoundError
from meeting_processor.handlers import RecordingHandler
from meeting_processor.logging import setup_logging
from meeting_processor.response_models import SUCCESS_MESSAGE

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["recordings"])


def verify_function_key(
    config: ConfigDep,
    x_functions_key: Annotated[str | None, Header()] = None,
    code: Annotated[str | None, Query()] = None,
) -> None:
    """Rejects requests that do not carry the pre-issued function key."""
    supplied = x_functions_key or code
    if not supplied or not secrets.compare_digest(
        supplied.encode("utf-8"), config.function_key.encode("utf-8")
    ):
        logger.warning("Rejected trigger call with missing or invalid key")
        raise HTTPException(status_code=401, detail="Unauthorized")


HandlerDep = Annotated[RecordingHandler, Depends(get_handler)]


@router.post(
    "/ProcessMeetingRecording",
    response_class=PlainTextResponse,
    dependencies=[Depends(verify_function_key)],
)
def process_meeting_recording(
    trigger: RecordingTrigger, handler: HandlerDep
) -> PlainTextResponse:
    """
    Processes the recording named by the trigger body.

    Transcribes it, extracts key phrases and sentiment, generates a summary
    and stores it next to the recording.
    """
    logger.info(
        "Received processing request",
        extra={"bucket_name": trigger.container_name, "file_name": trigger.blob_name},
    )

    try:
        result = handler.process(trigger)
    except RecordingNotFoundError:
        raise HTTPException(status_code=404, detail="Recording not found")
    except Exception:
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info(
        "Meeting recording processed",
        extra={
            "file_name": result.recording_name,
            "base_name": result.recording_base_name,
            "summary_file": result.summary_object_name,
        },
    )
    return PlainTextResponse(SUCCESS_MESSAGE)
