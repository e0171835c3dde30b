# hookah_backend/app/services/mix_builder.py
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from hookah_backend.app.mix import (
    TOTAL_PERCENT,
    derive_strength,
    derive_taste,
    is_mix_valid,
    percent_sum,
    strength_band,
)
from hookah_backend.app.mix.coercion import as_list, field, safe_num
from hookah_backend.app.utils.strings import null_to_none_or_strip

# What it does:
# Glue between the pure mix core and the gallery store:
#   - preview_mix(): live numbers for the builder UI
#   - build_guest_mix(): turn a submitted draft into an immutable gallery record

DEFAULT_AUTHOR = "Гость"


class InvalidMixError(ValueError):
    """Draft does not satisfy the submission rules (parts, sum == 100, title)."""


def _plain_parts(parts: Any) -> List[Dict[str, Any]]:
    return [
        {"flavorId": field(p, "flavorId"), "percent": safe_num(field(p, "percent"))}
        for p in (as_list(parts) or [])
        if p is not None
    ]


def _check_parts(parts: List[Dict[str, Any]]) -> None:
    seen = set()
    for p in parts:
        if not 0 <= p["percent"] <= TOTAL_PERCENT:
            raise InvalidMixError(f"percent out of range for {p['flavorId']!r}: {p['percent']}")
        if p["flavorId"] in seen:
            raise InvalidMixError(f"duplicate flavor {p['flavorId']!r}")
        seen.add(p["flavorId"])


def preview_mix(
    parts: Any,
    title: Any,
    flavors: Any,
    brand_defaults: Optional[Mapping[str, float]] = None,
) -> Dict[str, Any]:
    strength = derive_strength(parts, flavors, brand_defaults)
    return {
        "total": percent_sum(parts),
        "valid": is_mix_valid(parts, title),
        "strength10": strength,
        "band": strength_band(strength),
        "taste": derive_taste(parts, flavors),
    }


def build_guest_mix(
    draft: Mapping[str, Any],
    flavors: Any,
    author: Optional[str] = None,
    brand_defaults: Optional[Mapping[str, float]] = None,
) -> Dict[str, Any]:
    """
    Validate a draft {title, parts, notes[, id]} exactly as sent and stamp the
    derived attributes. Raises InvalidMixError if the mix can't be submitted:
    a percent outside 0..100, a flavor listed twice, or a draft that
    is_mix_valid rejects (same verdict as preview_mix).
    """
    parts = _plain_parts(draft.get("parts"))
    _check_parts(parts)
    title = draft.get("title")
    if not is_mix_valid(parts, title):
        raise InvalidMixError(
            f"mix must have parts summing to {TOTAL_PERCENT} and a title of 3+ chars "
            f"(got {len(parts)} part(s), total {percent_sum(parts)})"
        )
    return {
        "id": null_to_none_or_strip(draft.get("id")) or uuid.uuid4().hex,
        "title": str(title).strip(),
        "parts": parts,
        "notes": str(draft.get("notes") or "").strip(),
        "author": null_to_none_or_strip(author) or DEFAULT_AUTHOR,
        "createdAt": datetime.now(timezone.utc).isoformat(),
        "taste": derive_taste(parts, flavors),
        "strength10": derive_strength(parts, flavors, brand_defaults),
        "likers": [],
    }
