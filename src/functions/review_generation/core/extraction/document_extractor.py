"""Plain-text extraction for uploaded business documents (PDF)."""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from ..config import DEFAULT_DOCUMENT_MAX_CHARS
from ..errors import ExtractionFailureError

logger = logging.getLogger(__name__)


def extract_document_text(data: bytes, max_chars: int = DEFAULT_DOCUMENT_MAX_CHARS) -> str:
    """Return the first ``max_chars`` characters of the document's text.

    Raises:
        ExtractionFailureError: the bytes are empty or not a readable PDF.
    """

    if not data:
        raise ExtractionFailureError("Uploaded document is empty")

    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            pages = [page.get_text() for page in doc]
    except Exception as exc:  # PyMuPDF raises several unrelated types for bad input
        logger.warning("Failed to read uploaded document: %s", exc)
        raise ExtractionFailureError("Could not read uploaded document", exc) from exc

    text = "\n".join(pages).strip()
    logger.debug("Extracted %d characters from %d pages", len(text), len(pages))
    return text[:max_chars]
