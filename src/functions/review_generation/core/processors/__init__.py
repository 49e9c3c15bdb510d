"""Line-level cleaners and the batch-level emoji quota enforcer."""

from .emoji_appender import append_context_emoji
from .emoji_selector import EMOJI_POOLS, EmojiPoolEntry, pick_context_emojis
from .ending_normalizer import normalize_ending
from .marker_stripper import strip_lead_marker
from .placement_cleaner import clean_emoji_placement
from .quota_enforcer import enforce_emoji_quota

__all__ = [
    "EMOJI_POOLS",
    "EmojiPoolEntry",
    "append_context_emoji",
    "clean_emoji_placement",
    "enforce_emoji_quota",
    "normalize_ending",
    "pick_context_emojis",
    "strip_lead_marker",
]
