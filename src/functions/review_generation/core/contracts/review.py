"""Contracts for the review generation service."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..utils.emoji import count_decorated

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MIN_FRACTION = 0.10
DEFAULT_MAX_FRACTION = 0.15
MAX_REVIEW_COUNT = 200


def _check_fraction_window(min_fraction: float, max_fraction: float) -> None:
    if max_fraction < min_fraction:
        msg = "max_fraction must be greater than or equal to min_fraction"
        raise ValueError(msg)


class SpreadConstraints(BaseModel):
    """Acceptance window and spacing rules for emoji-decorated lines."""

    model_config = ConfigDict(frozen=True)

    min_fraction: float = Field(default=DEFAULT_MIN_FRACTION, gt=0.0, le=1.0)
    max_fraction: float = Field(default=DEFAULT_MAX_FRACTION, gt=0.0, le=1.0)
    max_run_length: int = Field(default=2, ge=1)
    min_gap_after_max_run: int = Field(default=2, ge=0)
    min_count: Optional[int] = Field(default=None, ge=0, description="Absolute lower bound override")
    max_count: Optional[int] = Field(default=None, ge=0, description="Absolute upper bound override")

    @model_validator(mode="after")
    def _validate_window(self) -> "SpreadConstraints":
        _check_fraction_window(self.min_fraction, self.max_fraction)
        return self


class ReviewOptions(BaseModel):
    """Per-request generation and decoration options."""

    model: str = Field(default=DEFAULT_MODEL, description="OpenAI model identifier")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    emoji: bool = Field(default=True, description="Decorate reviews with trailing emoji")
    min_fraction: float = Field(default=DEFAULT_MIN_FRACTION, gt=0.0, le=1.0)
    max_fraction: float = Field(default=DEFAULT_MAX_FRACTION, gt=0.0, le=1.0)
    fallback_probability: float = Field(default=0.35, ge=0.0, le=1.0)

    @field_validator("model")
    @classmethod
    def _strip_model(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("model must not be empty")
        return stripped

    @model_validator(mode="after")
    def _validate_window(self) -> "ReviewOptions":
        _check_fraction_window(self.min_fraction, self.max_fraction)
        return self

    def spread_constraints(self) -> SpreadConstraints:
        return SpreadConstraints(min_fraction=self.min_fraction, max_fraction=self.max_fraction)

    def to_response(self) -> dict:
        """Options echoed back to the caller, using the public field names."""

        return {
            "temperature": self.temperature,
            "model": self.model,
            "emoji": self.emoji,
            "minFraction": self.min_fraction,
            "maxFraction": self.max_fraction,
        }


class ReviewRequest(BaseModel):
    """Validated input for one generation request."""

    summary: str = Field(..., description="Business description the reviews are based on")
    count: int = Field(default=1, ge=1, le=MAX_REVIEW_COUNT)
    options: ReviewOptions = Field(default_factory=ReviewOptions)

    @field_validator("summary")
    @classmethod
    def _normalize_summary(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("summary must not be empty")
        return stripped


class ReviewBatchResult(BaseModel):
    """Reviews produced for one request."""

    reviews: list[str] = Field(default_factory=list)
    options: ReviewOptions
    summary: Optional[str] = Field(default=None, description="Extracted document text, when one was supplied")

    @property
    def decorated_count(self) -> int:
        return count_decorated(self.reviews)

    def to_payload(self) -> dict:
        payload: dict = {
            "status": "success",
            "reviews": list(self.reviews),
            "options": self.options.to_response(),
        }
        if self.summary is not None:
            payload["summary"] = self.summary
        return payload


def parse_options(raw: dict | ReviewOptions | None) -> ReviewOptions:
    """Create validated options from raw input."""

    if raw is None:
        return ReviewOptions()
    if isinstance(raw, ReviewOptions):
        return raw
    try:
        return ReviewOptions(**raw)
    except ValidationError as exc:
        msg = ", ".join(error["msg"] for error in exc.errors())
        raise ValueError(f"Invalid review options: {msg}") from exc
