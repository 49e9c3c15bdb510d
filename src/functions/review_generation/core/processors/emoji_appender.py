"""Attach a trailing emoji to a normalized review line."""

from __future__ import annotations

import random
import re
from typing import Optional

from ..utils.emoji import ends_with_emoji
from .emoji_selector import MAX_CONTEXT_EMOJIS, pick_context_emojis

DEFAULT_FALLBACK_PROBABILITY = 0.35
FALLBACK_EMOJIS: tuple[str, ...] = ("🙂", "😊", "👍", "🙌", "✨", "😋", "🫶", "👌")

_TRAILING_PERIOD_RE = re.compile(r"\.\s*$")


def select_emojis(
    text: str,
    *,
    fallback_probability: float = DEFAULT_FALLBACK_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Content-based glyphs, or a generic one with ``fallback_probability``."""

    rng = rng or random.Random()
    emojis = pick_context_emojis(text, rng=rng)
    if emojis:
        return emojis
    if rng.random() < fallback_probability:
        return [rng.choice(FALLBACK_EMOJIS)]
    return []


def append_context_emoji(
    text: str,
    *,
    enable: bool = True,
    fallback_probability: float = DEFAULT_FALLBACK_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> str:
    """Append up to two emoji to the end of ``text``.

    Lines that already end in an emoji, or calls with ``enable=False``, are
    returned unchanged. A trailing period is removed before appending since
    emoji never follow a period.
    """

    if not enable:
        return text
    out = (text or "").strip()
    if not out or ends_with_emoji(out):
        return out

    emojis = select_emojis(out, fallback_probability=fallback_probability, rng=rng)
    if not emojis:
        return out

    out = _TRAILING_PERIOD_RE.sub("", out)
    return out + "".join(emojis[:MAX_CONTEXT_EMOJIS])
