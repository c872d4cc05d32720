"""Naming rules for summary objects."""

import posixpath

SUMMARY_SUFFIX = "-summary.txt"


def derive_summary_name(recording_name: str) -> str:
    """
    Converts a recording object name to its summary object name.

    The extension of the final path segment is stripped and the summary
    suffix appended; any directory prefix is kept.

    Example: meetings/town-hall.wav -> meetings/town-hall-summary.txt
    """
    return posixpath.splitext(recording_name)[0] + SUMMARY_SUFFIX
