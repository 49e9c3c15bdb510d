"""Request and result contracts for review generation."""

from .review import (
    DEFAULT_MODEL,
    MAX_REVIEW_COUNT,
    ReviewBatchResult,
    ReviewOptions,
    ReviewRequest,
    SpreadConstraints,
    parse_options,
)

__all__ = [
    "DEFAULT_MODEL",
    "MAX_REVIEW_COUNT",
    "ReviewBatchResult",
    "ReviewOptions",
    "ReviewRequest",
    "SpreadConstraints",
    "parse_options",
]
