"""Content-aware emoji lookup for review lines."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Optional

MAX_CONTEXT_EMOJIS = 2


@dataclass(frozen=True)
class EmojiPoolEntry:
    """Keyword pattern and the glyphs that fit lines matching it."""

    category: str
    pattern: re.Pattern[str]
    pool: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _entry(category: str, keywords: str, *pool: str) -> EmojiPoolEntry:
    return EmojiPoolEntry(category, re.compile(f"({keywords})", re.IGNORECASE), pool)


# Evaluated in order; the order decides which glyphs survive the cap of two.
EMOJI_POOLS: tuple[EmojiPoolEntry, ...] = (
    _entry("wine", "와인|wine|소믈리에|레드|화이트|스파클링", "🍷", "🥂", "🍾"),
    _entry("beer", "맥주|beer|생맥|하이볼|칵테일|바틀", "🍺", "🍻", "🥃", "🍸"),
    _entry("coffee", "커피|라떼|에스프레소|카페|아메리카노", "☕", "🧋", "🍰"),
    _entry("dessert", "디저트|케이크|빵|마카롱|달달|디저", "🍰", "🧁", "🍩", "🍪"),
    _entry("meat", "고기|스테이크|한우|삼겹|구이", "🥩", "🍖", "🍗"),
    _entry("seafood", "해산물|회|초밥|스시|물회|오마카세", "🍣", "🦐", "🦑", "🐟"),
    _entry("spicy", "매움|맵|매콤|얼큰", "🌶️", "🔥"),
    _entry("portion", "양 많|푸짐|포션|든든", "🍽️", "🫶"),
    _entry("view", "테라스|야외|뷰|전망|루프탑|풍경", "✨", "🌇", "🌃", "🌿"),
    _entry("mood", "분위기|무드|아늑|감성|조명", "✨", "🕯️", "🎶"),
    _entry("service", "친절|응대|서비스|사장님|직원", "😊", "🤗", "🫶", "👍"),
    _entry("speed", "빨리|빠르|서빙|대기 없|웨이팅 없|금방", "⚡", "👍"),
    _entry("reservation", "예약|자리|좌석|대기", "📅", "✅"),
    _entry("cleanliness", "청결|깨끗|위생|깔끔", "✨", "🧼", "🧽"),
    _entry("price", "가격|가성비|비싸|저렴", "💸", "👍"),
    _entry("party", "파티|생일|기념일|모임|단체", "🎉", "🎂", "🎈"),
    _entry("parking", "주차|발렛|파킹", "🅿️", "🚗"),
    _entry("kids", "아이|키즈|가족|유모차", "👶", "👨‍👩‍👧‍👦"),
    _entry("pets", "반려견|펫|강아지|고양이", "🐶", "🐱", "🐾"),
    _entry("delivery", "배달|포장|테이크아웃", "📦", "🏍️"),
)


def matching_pools(text: str) -> list[EmojiPoolEntry]:
    """Return every dictionary entry whose keywords appear in ``text``."""

    return [entry for entry in EMOJI_POOLS if entry.matches(text or "")]


def pick_context_emojis(text: str, rng: Optional[random.Random] = None) -> list[str]:
    """Pick at most two distinct glyphs that fit the content of ``text``.

    One glyph is drawn from each matching pool; duplicates across pools are
    collapsed keeping first-match order. An empty list means no keyword
    matched.
    """

    hits = matching_pools(text)
    if not hits:
        return []

    rng = rng or random.Random()
    picked: list[str] = []
    for entry in hits:
        glyph = rng.choice(entry.pool)
        if glyph not in picked:
            picked.append(glyph)
    return picked[:MAX_CONTEXT_EMOJIS]
