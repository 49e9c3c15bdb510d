"""OpenAI chat-completions client that produces raw candidate review lines."""

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    InternalServerError,
    OpenAI,
    RateLimitError,
)
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.shared.utils.config_validator import ConfigurationError, check_config_override

from ..config import DEFAULT_TIMEOUT_SECONDS
from ..contracts.review import DEFAULT_MODEL, ReviewOptions, parse_options
from ..errors import GenerationFailureError

_TRANSIENT_ERRORS = (APIConnectionError, APITimeoutError, RateLimitError, InternalServerError)


class OpenAIReviewClient:
    """Wraps chat-completions calls with retry on transient API failures."""

    def __init__(
        self,
        *,
        model: str = DEFAULT_MODEL,
        api_key: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Any = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._options = ReviewOptions(model=model)
        self._logger = logger or logging.getLogger(__name__)
        if client is not None:
            self._client = client
            return
        try:
            api_key = check_config_override(api_key, "OPENAI_API_KEY", required=True)
        except ConfigurationError as e:
            raise ConfigurationError(
                f"{e}\nRequired for review generation. "
                "See .env.example for configuration template."
            )
        self._client = OpenAI(api_key=api_key, timeout=timeout_seconds)

    def generate(self, prompt: str, *, options: ReviewOptions | dict | None = None) -> str:
        """Return the raw completion text for ``prompt``.

        Raises:
            GenerationFailureError: the API call failed after retries or the
                completion was empty.
        """

        opts = parse_options(options or self._options.model_dump())
        try:
            text = self._complete(prompt, opts)
        except _TRANSIENT_ERRORS as exc:
            self._logger.error("OpenAI request failed after retries: %s", exc)
            raise GenerationFailureError("OpenAI request failed after retries", exc) from exc
        except APIError as exc:
            self._logger.error("OpenAI API error (not retryable): %s", exc)
            raise GenerationFailureError(f"OpenAI API error: {exc}", exc) from exc

        if not text.strip():
            raise GenerationFailureError("OpenAI returned an empty completion")
        return text

    @retry(
        retry=retry_if_exception_type(_TRANSIENT_ERRORS),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    def _complete(self, prompt: str, options: ReviewOptions) -> str:
        self._logger.debug("Requesting completion from %s (temperature=%s)", options.model, options.temperature)
        response = self._client.chat.completions.create(
            model=options.model,
            temperature=options.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None) if message else None
        return content or ""
