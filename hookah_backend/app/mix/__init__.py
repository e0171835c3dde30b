# hookah_backend/app/mix/__init__.py
"""
Pure mix core: composition rules + derived attributes.

    from hookah_backend.app.mix import (
        add_part, update_percent, remove_part, percent_sum, is_mix_valid,
        derive_strength, derive_taste,
    )
"""

from __future__ import annotations

from .coercion import safe_num, safe_percent  # noqa: F401
from .composition import (  # noqa: F401
    DEFAULT_PART_PERCENT,
    MIN_TITLE_LENGTH,
    TOTAL_PERCENT,
    add_part,
    clamp_percent_for_part,
    is_mix_valid,
    percent_sum,
    remove_part,
    update_percent,
)
from .attributes import (  # noqa: F401
    derive_strength,
    derive_taste,
    get_strength10,
    strength_band,
    tokenize,
)
from .taxonomy import (  # noqa: F401
    BRAND_STRENGTH10_DEFAULTS,
    TASTE_RULES,
    TASTE_WORDS,
    TasteRule,
    taste_word_from_tag,
)

__all__ = [
    # coercion
    "safe_num", "safe_percent",
    # composition
    "DEFAULT_PART_PERCENT", "MIN_TITLE_LENGTH", "TOTAL_PERCENT",
    "add_part", "clamp_percent_for_part", "is_mix_valid", "percent_sum",
    "remove_part", "update_percent",
    # attributes
    "derive_strength", "derive_taste", "get_strength10", "strength_band", "tokenize",
    # taxonomy
    "BRAND_STRENGTH10_DEFAULTS", "TASTE_RULES", "TASTE_WORDS", "TasteRule",
    "taste_word_from_tag",
]
