# hookah_backend/app/mix/composition.py
from __future__ import annotations

from typing import Any, Dict, List

from .coercion import as_list, field, safe_percent

# Purpose:
# Structural rules for a mix's part list while the user edits it and at submit.
# Every operation returns a fresh list of plain dicts and never raises; bad
# input degrades to 0 / False / the unchanged list.

TOTAL_PERCENT = 100
DEFAULT_PART_PERCENT = 30
MIN_TITLE_LENGTH = 3


def _copy_part(p: Any) -> Dict[str, Any]:
    if isinstance(p, dict):
        return dict(p)
    if hasattr(p, "model_dump"):
        return p.model_dump()
    return {"flavorId": field(p, "flavorId"), "percent": field(p, "percent")}


def _copy_parts(parts: Any) -> List[Dict[str, Any]]:
    return [_copy_part(p) for p in (as_list(parts) or []) if p is not None]


def _has_flavor(parts: List[Dict[str, Any]], flavor_id: Any) -> bool:
    return any(p.get("flavorId") == flavor_id for p in parts)


def percent_sum(parts: Any) -> float:
    items = as_list(parts)
    if items is None:
        return 0
    return sum(safe_percent(field(p, "percent")) for p in items)


def is_mix_valid(parts: Any, title: Any) -> bool:
    items = as_list(parts)
    if not items:
        return False
    if percent_sum(items) != TOTAL_PERCENT:
        return False
    return len(str(title if title is not None else "").strip()) >= MIN_TITLE_LENGTH


def clamp_percent_for_part(parts: Any, flavor_id: Any, value: Any) -> float:
    """
    Largest allowed value for one part: the request, capped by whatever
    headroom the other parts leave under 100, floored at 0.
    """
    others = [p for p in (as_list(parts) or []) if field(p, "flavorId") != flavor_id]
    other_sum = percent_sum(others)
    return max(0.0, min(safe_percent(value), TOTAL_PERCENT - other_sum))


def add_part(parts: Any, flavor_id: Any) -> List[Dict[str, Any]]:
    out = _copy_parts(parts)
    if not flavor_id or _has_flavor(out, flavor_id):
        return out
    headroom = max(0, TOTAL_PERCENT - percent_sum(out))
    out.append({"flavorId": flavor_id, "percent": min(DEFAULT_PART_PERCENT, headroom)})
    return out


def update_percent(parts: Any, flavor_id: Any, value: Any) -> List[Dict[str, Any]]:
    out = _copy_parts(parts)
    applied = clamp_percent_for_part(out, flavor_id, value)
    for p in out:
        if p.get("flavorId") == flavor_id:
            p["percent"] = applied
    return out


def remove_part(parts: Any, flavor_id: Any) -> List[Dict[str, Any]]:
    return [p for p in _copy_parts(parts) if p.get("flavorId") != flavor_id]
