"""Review generation service handler."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional, Tuple

from src.shared.utils.config_validator import ConfigurationError
from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging
from src.functions.review_generation.core.config import DEFAULT_FILE_REVIEW_COUNT, ServiceConfig
from src.functions.review_generation.core.errors import InputMissingError, ReviewGenerationError
from src.functions.review_generation.core.factory import (
    count_from_payload,
    options_from_payload,
    request_from_payload,
    resolve_api_key,
)
from src.functions.review_generation.core.llm.openai_client import OpenAIReviewClient
from src.functions.review_generation.core.service import ReviewGenerationService

load_env()
setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Review generation failed"


def handle_request(
    payload: Mapping[str, Any],
    document: Optional[bytes] = None,
    *,
    service: Optional[ReviewGenerationService] = None,
) -> Tuple[Dict[str, Any], int]:
    """Generate reviews from an inline summary or an uploaded document.

    Returns the response body and the HTTP status code.
    """

    payload = payload or {}
    config = ServiceConfig.from_env()

    try:
        if document is None:
            request_model = request_from_payload(payload, config)
        else:
            options = options_from_payload(payload, config)
            count = count_from_payload(payload, DEFAULT_FILE_REVIEW_COUNT, config)
    except InputMissingError as exc:
        logger.warning("Rejected request without input: %s", exc)
        return {"status": "error", "message": str(exc)}, 400
    except ValueError as exc:
        logger.warning("Rejected invalid request: %s", exc)
        return {"status": "error", "message": str(exc)}, 400

    try:
        if service is None:
            service = _build_service(payload, config)
        if document is None:
            result = service.generate(request_model)
        else:
            result = service.generate_from_document(document, count, options)
    except InputMissingError as exc:
        logger.warning("Rejected request without input: %s", exc)
        return {"status": "error", "message": str(exc)}, 400
    except (ReviewGenerationError, ConfigurationError) as exc:
        logger.error("Review generation failed: %s", exc)
        return {"status": "error", "message": GENERIC_FAILURE_MESSAGE}, 500

    return result.to_payload(), 200


def _build_service(payload: Mapping[str, Any], config: ServiceConfig) -> ReviewGenerationService:
    client = OpenAIReviewClient(
        api_key=resolve_api_key(payload),
        model=config.default_model,
        timeout_seconds=config.request_timeout_seconds,
        logger=logger,
    )
    return ReviewGenerationService(client, config=config, logger=logger)
