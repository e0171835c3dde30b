# hookah_backend/app/mix/attributes.py
from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .coercion import as_list, coerce_number, field, safe_percent
from .composition import percent_sum
from .taxonomy import (
    BRAND_STRENGTH10_DEFAULTS,
    NEUTRAL_STRENGTH10,
    TASTE_RULES,
    TasteRule,
    normalize_brand,
    taste_word_from_tag,
)

# Purpose:
# Derive read-only display attributes of a mix from its parts + the catalog:
#   - strength10: percent-weighted mean of per-flavor strength (1 decimal)
#   - taste: one dominant word picked by a bag-of-words vote over tags/name/description
# Pure functions; None means "no data".

# Per-token weight factors relative to the part percent.
NAME_TOKEN_FACTOR = 0.6
DESCRIPTION_TOKEN_FACTOR = 0.3
MIN_TOKEN_WEIGHT = 1.0

_TOKEN_SPLIT = re.compile(r"[^a-zа-яё0-9]+", re.IGNORECASE)


def tokenize(text: Any) -> List[str]:
    return _TOKEN_SPLIT.split(str(text).lower())


def find_flavor(flavors: Iterable[Any], flavor_id: Any) -> Optional[Any]:
    for f in flavors:
        if f is not None and field(f, "id") == flavor_id:
            return f
    return None


def get_strength10(flavor: Any, brand_defaults: Optional[Mapping[str, float]] = None) -> float:
    """
    Strength of a single flavor:
    explicit strength10 (clamped 1..10) -> brand default -> neutral 5.
    """
    if not flavor:
        return NEUTRAL_STRENGTH10
    raw = field(flavor, "strength10")
    # only real numbers count here, numeric strings fall through to the brand
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        res = coerce_number(raw)
        if res.ok:
            return max(1.0, min(10.0, res.value))
    table = BRAND_STRENGTH10_DEFAULTS if brand_defaults is None else brand_defaults
    return table.get(normalize_brand(field(flavor, "brand")), NEUTRAL_STRENGTH10)


def derive_strength(
    parts: Any,
    flavors: Any,
    brand_defaults: Optional[Mapping[str, float]] = None,
) -> Optional[float]:
    items = as_list(parts)
    catalog = as_list(flavors)
    if items is None or catalog is None or not items:
        return None
    total = percent_sum(items)
    if total <= 0:
        return None

    weighted = 0.0
    for p in items:
        percent = safe_percent(field(p, "percent"))
        if percent <= 0:
            continue
        fl = find_flavor(catalog, field(p, "flavorId"))
        if fl is None:
            continue
        weighted += get_strength10(fl, brand_defaults) * (percent / total)

    if not weighted:
        return None
    # half-up, not banker's rounding
    return math.floor(weighted * 10 + 0.5) / 10


def derive_taste(
    parts: Any,
    flavors: Any,
    rules: Iterable[TasteRule] = TASTE_RULES,
) -> Optional[str]:
    items = as_list(parts)
    catalog = as_list(flavors)
    if not items or catalog is None or not catalog:
        return None
    if percent_sum(items) <= 0:
        return None

    rules = tuple(rules)
    # dicts keep insertion order; the first word to reach the max wins ties
    scores: Dict[str, float] = {}

    def add(raw: Any, w: float) -> None:
        word = taste_word_from_tag(raw, rules)
        if word:
            scores[word] = scores.get(word, 0.0) + w

    for p in items:
        w = safe_percent(field(p, "percent"))
        if w <= 0:
            continue
        fl = find_flavor(catalog, field(p, "flavorId"))
        if fl is None:
            continue
        for tag in as_list(field(fl, "tags")) or []:
            add(tag, w)
        name = field(fl, "name")
        if name:
            for tk in tokenize(name):
                add(tk, max(MIN_TOKEN_WEIGHT, w * NAME_TOKEN_FACTOR))
        description = field(fl, "description")
        if description:
            for tk in tokenize(description):
                add(tk, max(MIN_TOKEN_WEIGHT, w * DESCRIPTION_TOKEN_FACTOR))

    if not scores:
        return None
    best_word, best_score = None, float("-inf")
    for word, score in scores.items():
        if score > best_score:
            best_word, best_score = word, score
    return best_word


def strength_band(value: Optional[float]) -> str:
    """UI colour bucket for a strength value."""
    if value is None:
        return "unknown"
    if value < 4:
        return "mild"
    if value < 7:
        return "medium"
    return "strong"
