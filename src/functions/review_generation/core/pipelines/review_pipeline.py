"""
Review Pipeline

Turns raw model output into the final list of reviews:
split lines -> strip markers -> normalize endings -> append emoji ->
clean emoji placement -> drop empties -> truncate -> quota & spread.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..contracts.review import ReviewOptions
from ..processors.emoji_appender import append_context_emoji
from ..processors.ending_normalizer import normalize_ending
from ..processors.marker_stripper import strip_lead_marker
from ..processors.placement_cleaner import clean_emoji_placement
from ..processors.quota_enforcer import enforce_emoji_quota
from ..utils.emoji import count_decorated, strip_emojis

logger = logging.getLogger(__name__)


def split_candidate_lines(raw_text: str) -> list[str]:
    """Split raw model output into trimmed, non-empty candidate lines."""

    text = (raw_text or "").replace("\r", "")
    return [line.strip() for line in text.split("\n") if line.strip()]


class ReviewPipeline:
    """Apply the per-line cleaners and the batch-level emoji quota."""

    def __init__(
        self,
        options: Optional[ReviewOptions] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.options = options or ReviewOptions()
        self._rng = rng or random.Random()

    def clean_line(self, line: str) -> str:
        out = strip_lead_marker(line)
        out = normalize_ending(out)
        out = append_context_emoji(
            out,
            enable=self.options.emoji,
            fallback_probability=self.options.fallback_probability,
            rng=self._rng,
        )
        out = clean_emoji_placement(out)
        return out.strip()

    def clean_lines(self, lines: list[str]) -> list[str]:
        """Clean every line, dropping lines left empty or holding only emoji."""

        cleaned = (self.clean_line(line) for line in lines)
        return [line for line in cleaned if strip_emojis(line)]

    def run(self, raw_text: str, count: int) -> list[str]:
        """Process ``raw_text`` and return at most ``count`` reviews."""

        candidates = split_candidate_lines(raw_text)
        lines = self.clean_lines(candidates)[: max(count, 0)]

        if not self.options.emoji:
            reviews = [strip_emojis(line) for line in lines]
            logger.debug("Emoji disabled: returning %d plain reviews", len(reviews))
            return reviews

        reviews = enforce_emoji_quota(lines, self.options.spread_constraints(), rng=self._rng)
        logger.debug(
            "Processed %d candidate lines into %d reviews (%d decorated)",
            len(candidates),
            len(reviews),
            count_decorated(reviews),
        )
        return reviews
