"""Command-line helper for the review generation service."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[4]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.functions.review_generation.core.config import ServiceConfig
from src.functions.review_generation.core.contracts.review import ReviewOptions, ReviewRequest
from src.functions.review_generation.core.errors import ReviewGenerationError
from src.functions.review_generation.core.llm.openai_client import OpenAIReviewClient
from src.functions.review_generation.core.pipelines.review_pipeline import ReviewPipeline
from src.functions.review_generation.core.service import ReviewGenerationService
from src.shared.utils.config_validator import ConfigurationError
from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate short receipt-style reviews from a business summary")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--summary", help="Business summary text")
    source.add_argument("--summary-file", type=Path, help="Text file containing the business summary")
    source.add_argument("--pdf", type=Path, help="PDF document to extract the summary from")
    source.add_argument(
        "--raw-input",
        type=Path,
        help="Text file of pre-generated candidate lines; runs the cleanup pipeline only (no API call)",
    )
    parser.add_argument("-n", "--count", type=int, default=10, help="Number of reviews (default: 10)")
    parser.add_argument("--model", help="OpenAI model identifier (default: OPENAI_MODEL or gpt-4o-mini)")
    parser.add_argument("--temperature", type=float, default=0.7, help="Generation temperature (default: 0.7)")
    parser.add_argument("--no-emoji", dest="emoji", action="store_false", default=True, help="Disable emoji")
    parser.add_argument("--min-fraction", type=float, default=0.10, help="Minimum share of lines with emoji")
    parser.add_argument("--max-fraction", type=float, default=0.15, help="Maximum share of lines with emoji")
    parser.add_argument("--seed", type=int, help="Seed for reproducible emoji choices")
    parser.add_argument("--output", type=Path, help="Optional JSON file to write the result to")
    parser.add_argument("--pretty", dest="pretty", action="store_true", default=True, help="Pretty-print JSON output")
    parser.add_argument("--no-pretty", dest="pretty", action="store_false", help="Disable pretty printing")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(level=args.log_level.upper())
    logger = logging.getLogger("generate_reviews_cli")

    load_env()
    config = ServiceConfig.from_env()
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        options = ReviewOptions(
            model=args.model or config.default_model,
            temperature=args.temperature,
            emoji=args.emoji,
            min_fraction=args.min_fraction,
            max_fraction=args.max_fraction,
        )
    except ValueError as exc:
        logger.error("Invalid options: %s", exc)
        raise SystemExit(2) from exc
    count = config.clamp_count(args.count)

    if args.raw_input:
        reviews = ReviewPipeline(options, rng=rng).run(args.raw_input.read_text(encoding="utf-8"), count)
        payload = {"status": "success", "reviews": reviews, "options": options.to_response()}
    else:
        try:
            client = OpenAIReviewClient(
                model=options.model,
                timeout_seconds=config.request_timeout_seconds,
                logger=logger,
            )
            service = ReviewGenerationService(client, config=config, rng=rng, logger=logger)
            if args.pdf:
                result = service.generate_from_document(args.pdf.read_bytes(), count, options)
            else:
                summary = args.summary if args.summary is not None else args.summary_file.read_text(encoding="utf-8")
                result = service.generate(ReviewRequest(summary=summary, count=count, options=options))
        except (ReviewGenerationError, ConfigurationError, ValueError) as exc:
            logger.error("Review generation failed: %s", exc)
            raise SystemExit(1) from exc
        payload = result.to_payload()

    output = json.dumps(payload, indent=2 if args.pretty else None, ensure_ascii=False)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
    else:
        print(output)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    try:
        main()
    except KeyboardInterrupt:  # pragma: no cover - CLI convenience
        sys.exit(130)
