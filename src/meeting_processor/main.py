"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from meeting_processor.routes import recordings_router

patch_all()

app = FastAPI(title="Meeting Recording Processor")
app.include_router(recordings_router)
