"""Handler layer exports."""

from .recording_handler import RecordingHandler
from .result_writer import ResultWriter

__all__ = ["RecordingHandler", "ResultWriter"]
