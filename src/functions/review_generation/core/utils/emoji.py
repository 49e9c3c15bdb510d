"""Emoji detection and removal helpers shared by the review processors."""

from __future__ import annotations

import re

ZWJ = "\u200d"
VS16 = "\ufe0f"

# Pictographic code points (Extended_Pictographic / Emoji_Presentation subset).
# Dingbat circled digits (U+2776-U+2793) are excluded so list markers never
# count as emoji.
_PICTOGRAPH = (
    "["
    "\u00a9\u00ae\u203c\u2049\u2122\u2139"
    "\u2194-\u2199\u21a9\u21aa"
    "\u231a\u231b\u2328\u23cf\u23e9-\u23f3\u23f8-\u23fa"
    "\u24c2\u25aa\u25ab\u25b6\u25c0\u25fb-\u25fe"
    "\u2600-\u2775\u2794-\u27bf"
    "\u2934\u2935\u2b05-\u2b07\u2b1b\u2b1c\u2b50\u2b55"
    "\u3030\u303d\u3297\u3299"
    "\U0001f000-\U0001faff"
    "]"
)
_MODIFIERS = f"[\U0001f3fb-\U0001f3ff]?{VS16}?"

# One visible glyph: pictograph + optional skin tone / VS16, optionally
# joined with further pictographs through ZWJ.
EMOJI_GLYPH = f"(?:{_PICTOGRAPH}{_MODIFIERS}(?:{ZWJ}{_PICTOGRAPH}{_MODIFIERS})*)"
# Stops a match from ending in the middle of a ZWJ / modifier sequence.
GLYPH_BOUNDARY = f"(?![{ZWJ}{VS16}\U0001f3fb-\U0001f3ff])"

EMOJI_RE = re.compile(EMOJI_GLYPH)
TRAILING_EMOJI_RE = re.compile(f"{EMOJI_GLYPH}$")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")


def has_emoji(text: str) -> bool:
    return bool(text) and EMOJI_RE.search(text) is not None


def ends_with_emoji(text: str) -> bool:
    return bool(text) and TRAILING_EMOJI_RE.search(text) is not None


def strip_emojis(text: str) -> str:
    """Remove every emoji glyph, collapse doubled whitespace and trim."""

    if not text:
        return ""
    stripped = EMOJI_RE.sub("", text)
    # Orphaned joiners / selectors left behind by malformed sequences.
    stripped = stripped.replace(ZWJ, "").replace(VS16, "")
    return _MULTI_SPACE_RE.sub(" ", stripped).strip()


def count_decorated(lines: list[str]) -> int:
    return sum(1 for line in lines if has_emoji(line))
