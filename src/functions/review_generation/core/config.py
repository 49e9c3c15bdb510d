"""Service-level configuration for review generation."""

from __future__ import annotations

from dataclasses import dataclass

from src.shared.utils.config_validator import (
    get_env_or_default,
    validate_float_env,
    validate_int_env,
)

from .contracts.review import DEFAULT_MODEL, MAX_REVIEW_COUNT

DEFAULT_DOCUMENT_MAX_CHARS = 3000
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_FILE_REVIEW_COUNT = 10
DEFAULT_SUMMARY_REVIEW_COUNT = 1


@dataclass
class ServiceConfig:
    """Limits and defaults applied to every request."""

    default_model: str = DEFAULT_MODEL
    max_review_count: int = MAX_REVIEW_COUNT
    document_max_chars: int = DEFAULT_DOCUMENT_MAX_CHARS
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Read overrides from ``OPENAI_MODEL``, ``REVIEW_MAX_COUNT`` etc."""

        return cls(
            default_model=get_env_or_default("OPENAI_MODEL", DEFAULT_MODEL, "Default OpenAI model"),
            max_review_count=validate_int_env(
                "REVIEW_MAX_COUNT", default=MAX_REVIEW_COUNT, min_value=1, max_value=MAX_REVIEW_COUNT
            ),
            document_max_chars=validate_int_env(
                "REVIEW_DOCUMENT_MAX_CHARS", default=DEFAULT_DOCUMENT_MAX_CHARS, min_value=100
            ),
            request_timeout_seconds=validate_float_env(
                "OPENAI_TIMEOUT_SECONDS", default=DEFAULT_TIMEOUT_SECONDS, min_value=1.0, max_value=600.0
            ),
        )

    def clamp_count(self, requested: int) -> int:
        return max(1, min(int(requested), self.max_review_count))
