"""Punctuation and repetition cleanup around emoji."""

from __future__ import annotations

import re

from ..utils.emoji import EMOJI_GLYPH, GLYPH_BOUNDARY

_PERIOD_BEFORE_EMOJI_RE = re.compile(f"\\.+(?={EMOJI_GLYPH})")
_PERIOD_AFTER_EMOJI_RE = re.compile(f"({EMOJI_GLYPH}){GLYPH_BOUNDARY}\\.+")
_REPEATED_EMOJI_RE = re.compile(f"({EMOJI_GLYPH}){GLYPH_BOUNDARY}(?:\\1{GLYPH_BOUNDARY})+")


def clean_emoji_placement(text: str) -> str:
    """Drop periods touching an emoji and collapse repeated identical emoji.

    ``"좋아요.😊"`` -> ``"좋아요😊"``, ``"😊."`` -> ``"😊"``,
    ``"😊😊😊"`` -> ``"😊"``. Periods elsewhere in the sentence are kept.
    """

    if not text:
        return text
    out = text.strip()
    out = _PERIOD_BEFORE_EMOJI_RE.sub("", out)
    out = _PERIOD_AFTER_EMOJI_RE.sub(r"\1", out)
    out = _REPEATED_EMOJI_RE.sub(r"\1", out)
    return out.strip()
