"""Text analytics batch request construction."""

DOCUMENT_ID = "1"
DOCUMENT_LANGUAGE = "en"


def build_batch_input(text: str) -> list[dict[str, str]]:
    """
    Wraps a transcript in a single-document batch.

    The document id and language are fixed; no language detection is done,
    and an empty transcript is submitted as-is.
    """
    return [{"id": DOCUMENT_ID, "text": text, "language": DOCUMENT_LANGUAGE}]
