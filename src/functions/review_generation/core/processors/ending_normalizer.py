"""Sentence-ending cleanup for generated Korean review lines.

Models frequently stutter on the final particle ("좋았어요 요", "맛있다요"),
keep writing after an emoji, or pile up exclamation marks. The normalizer
repairs those endings without touching the body of the sentence.
"""

from __future__ import annotations

import re

from ..utils.emoji import EMOJI_GLYPH, GLYPH_BOUNDARY

# Terminal particle followed by one or more stray "요".
_DUPLICATED_CLOSER_PATTERNS = (
    (re.compile(r"(요)(\s*요)+$"), r"\1"),
    (re.compile(r"(다)(\s*요)+$"), r"\1"),
    (re.compile(r"(음)(\s*요)+$"), r"\1"),
    (re.compile(r"(습니다)(\s*요)+$"), r"\1"),
    (re.compile(r"(어요)(\s*요)+$"), r"\1"),
)
_REPEATED_TERMINAL_RE = re.compile(r"(요|다|음|습니다|어요)(\s*\1)+$")
_TEXT_AFTER_EMOJI_RE = re.compile(f"({EMOJI_GLYPH}){GLYPH_BOUNDARY}\\s*.+$")
_EXCLAMATION_RUN_RE = re.compile(r"!{4,}$")
_PERIOD_AFTER_TERMINAL_RE = re.compile(r"(습니다|어요|다|음)\.\s*$")

_MAX_PASSES = 8


def _normalize_once(text: str) -> str:
    out = text.strip()
    for pattern, replacement in _DUPLICATED_CLOSER_PATTERNS:
        out = pattern.sub(replacement, out)
    out = _REPEATED_TERMINAL_RE.sub(r"\1", out)

    out = _TEXT_AFTER_EMOJI_RE.sub(r"\1", out, count=1)
    out = _EXCLAMATION_RUN_RE.sub("!!!", out)
    out = _PERIOD_AFTER_TERMINAL_RE.sub(r"\1", out)
    return out.strip()


def normalize_ending(text: str) -> str:
    """Collapse stuttered endings, drop text after an emoji, cap ``!`` runs.

    Rules are re-applied until the line is stable: dropping a trailing period
    can expose a repeated particle ("좋았음 음." -> "좋았음 음" -> "좋았음").
    """

    if not text:
        return text
    out = text
    for _ in range(_MAX_PASSES):
        updated = _normalize_once(out)
        if updated == out:
            break
        out = updated
    return out
