# hookah_backend/app/mix/coercion.py
from __future__ import annotations

import math
from typing import Any, NamedTuple

# Purpose:
# Single coercion boundary for every loosely-typed number the mix core touches.
# Parsing returns a tagged result; callers that follow the degrade-to-default
# policy go through safe_num / safe_percent.

class Coerced(NamedTuple):
    ok: bool
    value: float


_FAILED = Coerced(False, 0.0)


def coerce_number(v: Any) -> Coerced:
    """Parse ints, floats and numeric strings. NaN/inf and bools fail."""
    if v is None or isinstance(v, bool):
        return _FAILED
    if isinstance(v, (int, float)):
        n = float(v)
    elif isinstance(v, str):
        s = v.strip()
        if not s:
            return Coerced(True, 0.0)  # empty string reads as zero
        try:
            n = float(s)
        except ValueError:
            return _FAILED
    else:
        return _FAILED
    if not math.isfinite(n):
        return _FAILED
    return Coerced(True, n)


def safe_num(v: Any, default: float = 0) -> float:
    res = coerce_number(v)
    return res.value if res.ok else default


def safe_percent(v: Any) -> float:
    """Number clamped to [0, 100]; anything unparsable is 0."""
    return max(0.0, min(100.0, safe_num(v, 0)))


def field(obj: Any, name: str, default: Any = None) -> Any:
    # dicts from JSON and pydantic models both pass through here
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def as_list(v: Any) -> list | None:
    """Lists and tuples only; everything else (incl. strings) is None."""
    if isinstance(v, (list, tuple)):
        return list(v)
    return None
