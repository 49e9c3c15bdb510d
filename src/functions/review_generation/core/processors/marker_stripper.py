"""Removal of enumeration and bullet markers from generated lines."""

from __future__ import annotations

import re

_LEAD_MARKER_RE = re.compile(
    "^\\s*(?:\\d+\\s*[.\\-)]|[\\-*\u2022\u00b7\u2219]|[\u2460-\u2468]|[\u2776-\u277e])\\s*"
)
_LEAD_BRACKET_RE = re.compile(r"^\s*[)\]]\s+")


def strip_lead_marker(text: str) -> str:
    """Strip a single leading list marker (``1.``, ``-``, bullets, circled digits)."""

    out = (text or "").strip()
    out = _LEAD_MARKER_RE.sub("", out, count=1)
    out = _LEAD_BRACKET_RE.sub("", out, count=1)
    return out.strip()
