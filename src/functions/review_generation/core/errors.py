"""Errors raised by the review generation service."""

from __future__ import annotations

from typing import Optional


class ReviewGenerationError(Exception):
    """Base error for a request that cannot produce reviews."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)


class InputMissingError(ReviewGenerationError):
    """Neither a summary nor a document was supplied."""


class GenerationFailureError(ReviewGenerationError):
    """The language model call failed or returned unusable content."""


class ExtractionFailureError(ReviewGenerationError):
    """Text could not be extracted from the uploaded document."""
