import random

import pytest

from src.functions.review_generation.core.processors.emoji_appender import (
    FALLBACK_EMOJIS,
    append_context_emoji,
    select_emojis,
)
from src.functions.review_generation.core.processors.emoji_selector import (
    EMOJI_POOLS,
    matching_pools,
    pick_context_emojis,
)
from src.functions.review_generation.core.utils.emoji import (
    EMOJI_RE,
    count_decorated,
    ends_with_emoji,
    has_emoji,
    strip_emojis,
)


class FirstChoiceRandom(random.Random):
    """Always picks the first pool member."""

    def choice(self, seq):
        return seq[0]


def _pool(category):
    return next(entry.pool for entry in EMOJI_POOLS if entry.category == category)


def test_emoji_helpers_detect_and_strip_glyphs():
    assert has_emoji("좋아요🍷")
    assert not has_emoji("좋아요!")
    assert ends_with_emoji("주차 편해요🅿️")
    assert ends_with_emoji("가족 모임👨‍👩‍👧‍👦")
    assert not ends_with_emoji("😊 좋아요")
    assert strip_emojis("와인이 좋아요🍷🥂") == "와인이 좋아요"
    assert strip_emojis("가족  모임👨‍👩‍👧‍👦 최고") == "가족 모임 최고"
    assert count_decorated(["좋아요😊", "좋아요", "🍷"]) == 2


def test_emoji_regex_ignores_korean_and_punctuation():
    assert EMOJI_RE.findall("와인이 정말 맛있었어요! (또 올게요) ~ 3-4명") == []


def test_pick_context_emojis_uses_matching_pool():
    emojis = pick_context_emojis("와인이 훌륭했어요", rng=random.Random(0))

    assert len(emojis) == 1
    assert emojis[0] in _pool("wine")


def test_pick_context_emojis_caps_at_two_in_pool_order():
    text = "와인과 스테이크, 친절한 직원"
    assert [entry.category for entry in matching_pools(text)] == ["wine", "meat", "service"]

    for seed in range(20):
        emojis = pick_context_emojis(text, rng=random.Random(seed))
        assert len(emojis) == 2
        assert emojis[0] in _pool("wine")
        assert emojis[1] in _pool("meat")


def test_pick_context_emojis_collapses_duplicates_across_pools():
    # the view and mood pools both lead with the same sparkle glyph
    assert pick_context_emojis("분위기 좋은 테라스", rng=FirstChoiceRandom()) == ["✨"]


def test_pick_context_emojis_is_case_insensitive():
    assert pick_context_emojis("Great WINE list", rng=FirstChoiceRandom()) == ["🍷"]


def test_pick_context_emojis_without_match_is_empty():
    assert pick_context_emojis("그냥 그랬어요", rng=random.Random(0)) == []
    assert pick_context_emojis("", rng=random.Random(0)) == []


def test_select_emojis_fallback_probability():
    always = select_emojis("그냥 좋았어요", fallback_probability=1.0, rng=random.Random(3))
    never = select_emojis("그냥 좋았어요", fallback_probability=0.0, rng=random.Random(3))

    assert len(always) == 1 and always[0] in FALLBACK_EMOJIS
    assert never == []


def test_append_context_emoji_disabled_returns_input():
    assert append_context_emoji(" 와인이 좋았어요. ", enable=False) == " 와인이 좋았어요. "


def test_append_context_emoji_drops_trailing_period():
    out = append_context_emoji("와인이 좋았어요.", rng=FirstChoiceRandom())

    assert out == "와인이 좋았어요🍷"


def test_append_context_emoji_keeps_existing_emoji():
    assert append_context_emoji("와인이 좋았어요😊", rng=random.Random(0)) == "와인이 좋았어요😊"


def test_append_context_emoji_handles_empty_text():
    assert append_context_emoji("   ", rng=random.Random(0)) == ""


@pytest.mark.parametrize("probability, decorated", [(1.0, True), (0.0, False)])
def test_append_context_emoji_fallback(probability, decorated):
    out = append_context_emoji("그냥 좋았어요", fallback_probability=probability, rng=random.Random(7))

    assert ends_with_emoji(out) is decorated
    assert strip_emojis(out) == "그냥 좋았어요"


def test_append_context_emoji_is_reproducible_with_seed():
    text = "스테이크가 부드럽고 와인도 좋았어요"

    first = append_context_emoji(text, rng=random.Random(42))
    second = append_context_emoji(text, rng=random.Random(42))

    assert first == second
    assert 1 <= len(EMOJI_RE.findall(first)) <= 2
