"""Tests for the summary result writer."""

import pytest

from meeting_processor.exceptions import StorageUploadError
from meeting_processor.handlers import ResultWriter
from meeting_processor.handlers.result_writer import SUMMARY_CONTENT_TYPE


class TestResultWriter:
    def test_writes_summary_next_to_recording(self, storage):
        writer = ResultWriter(storage)

        name = writer.write_summary("recordings", "meetings/town-hall.wav", "All good.")

        assert name == "meetings/town-hall-summary.txt"
        assert storage.objects[("recordings", name)] == b"All good."
        assert storage.content_types[("recordings", name)] == SUMMARY_CONTENT_TYPE

    def test_overwrites_existing_summary(self, storage):
        writer = ResultWriter(storage)
        writer.write_summary("recordings", "town-hall.wav", "first")

        writer.write_summary("recordings", "town-hall.wav", "second")

        assert storage.objects[("recordings", "town-hall-summary.txt")] == b"second"

    def test_encodes_text_as_utf8(self, storage):
        writer = ResultWriter(storage)

        writer.write_summary("recordings", "town-hall.wav", "Résumé ✓")

        stored = storage.objects[("recordings", "town-hall-summary.txt")]
        assert stored == "Résumé ✓".encode("utf-8")

    def test_upload_failure_propagates(self, storage):
        storage.fail_uploads = True
        writer = ResultWriter(storage)

        with pytest.raises(StorageUploadError):
            writer.write_summary("recordings", "town-hall.wav", "text")
