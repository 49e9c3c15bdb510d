"""Review generation orchestration service."""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from .config import ServiceConfig
from .contracts.review import ReviewBatchResult, ReviewOptions, ReviewRequest
from .errors import GenerationFailureError, InputMissingError
from .extraction.document_extractor import extract_document_text
from .pipelines.review_pipeline import ReviewPipeline
from .prompts import build_review_prompt


class ReviewGenerator(Protocol):
    """Anything that turns a prompt into raw model text."""

    def generate(self, prompt: str, *, options: ReviewOptions | dict | None = None) -> str:
        ...


class ReviewGenerationService:
    """Coordinates prompt building, generation and post-processing."""

    def __init__(
        self,
        generator: ReviewGenerator,
        *,
        config: Optional[ServiceConfig] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._generator = generator
        self._config = config or ServiceConfig()
        self._rng = rng
        self._logger = logger or logging.getLogger(__name__)

    def generate(self, request: ReviewRequest) -> ReviewBatchResult:
        """Generate up to ``request.count`` cleaned reviews for the summary."""

        count = self._config.clamp_count(request.count)
        options = request.options
        prompt = build_review_prompt(request.summary, count, options)

        self._logger.info(
            "Generating %d reviews with %s (emoji=%s, fraction=%.2f-%.2f)",
            count,
            options.model,
            options.emoji,
            options.min_fraction,
            options.max_fraction,
        )
        try:
            raw_text = self._generator.generate(prompt, options=options)
        except GenerationFailureError:
            raise
        except Exception as exc:
            self._logger.exception("Unexpected generator failure")
            raise GenerationFailureError(f"Generator failed: {exc}", exc) from exc

        pipeline = ReviewPipeline(options, rng=self._rng)
        reviews = pipeline.run(raw_text, count)
        if not reviews:
            raise GenerationFailureError("Model output contained no usable review lines")

        result = ReviewBatchResult(reviews=reviews, options=options)
        self._logger.info("Generated %d reviews (%d with emoji)", len(reviews), result.decorated_count)
        return result

    def generate_from_document(
        self,
        data: bytes,
        count: int,
        options: Optional[ReviewOptions] = None,
    ) -> ReviewBatchResult:
        """Extract the document text and use it as the summary."""

        summary = extract_document_text(data, max_chars=self._config.document_max_chars)
        if not summary:
            raise InputMissingError("Uploaded document contains no extractable text")
        request = ReviewRequest(
            summary=summary,
            count=self._config.clamp_count(count),
            options=options or ReviewOptions(),
        )
        result = self.generate(request)
        result.summary = summary
        return result
