# hookah_backend/app/mix/taxonomy.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

# Purpose:
# Fixed vocabularies used by the mix attribute deriver:
#   (1) the ordered taste rules (regex -> taste word), first match wins
#   (2) the per-brand strength defaults used when a flavor has no strength10

SOUR = "кислый"
SWEET = "сладкий"
SPICY = "пряный"
ICY = "ледяной"
FRUITY = "фруктовый"
DESSERT = "десертный"

TASTE_WORDS: Tuple[str, ...] = (SOUR, SWEET, SPICY, ICY, FRUITY, DESSERT)


@dataclass(frozen=True)
class TasteRule:
    pattern: re.Pattern
    label: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(expr: str, label: str) -> TasteRule:
    return TasteRule(re.compile(expr, re.IGNORECASE), label)


# Order is priority.
TASTE_RULES: Tuple[TasteRule, ...] = (
    _rule(r"кисл|sour|лимон|lime|грейпфрут", SOUR),
    _rule(r"сладк|sweet|sugar|мед|honey", SWEET),
    _rule(r"прян|spice|ginger|имбир", SPICY),
    _rule(r"лед|ice|cold|frost|мят", ICY),
    _rule(r"фрукт|fruit|яблок|banana|mango|pineapple|grape|orange|pear|melon|berry", FRUITY),
    _rule(r"десерт|dessert|cake|pie|cookie|choco|cream|vanilla|waffle", DESSERT),
)


def taste_word_from_tag(tag, rules: Iterable[TasteRule] = TASTE_RULES) -> Optional[str]:
    """Map one tag/token to a taste word using the first matching rule."""
    if tag is None:
        return None
    t = str(tag).lower().strip()
    if not t:
        return None
    for rule in rules:
        if rule.matches(t):
            return rule.label
    return None


# Brand -> default strength on the 1..10 scale.
BRAND_STRENGTH10_DEFAULTS: Dict[str, float] = {
    "Darkside": 5,
    "Black Burn": 6,
    "BlackBurn": 6,
    "MustHave": 5,
    "Overdos": 6,
    "Bonch": 7,
    "Starline": 3,
}

NEUTRAL_STRENGTH10: float = 5


def normalize_brand(brand) -> str:
    return str(brand or "").strip()
