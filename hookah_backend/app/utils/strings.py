# hookah_backend/app/utils/strings.py

import re

_WS = re.compile(r"\s+")

# What it does:
# Strip whitespace or convert falsy/nulls to None
def null_to_none_or_strip(x) -> str | None:
    if not x:
        return None
    return str(x).strip() or None

def make_flavor_id(brand, name) -> str:
    """
    Stable catalog id from brand + name:
    "Black Burn", "Pear Ice" -> "black-burn-pear-ice"
    """
    return _WS.sub("-", (str(brand).strip() + "-" + str(name).strip()).lower())

def normalize_tags(v) -> list[str]:
    """Lower-case, trimmed, de-duplicated tags in first-seen order."""
    if not isinstance(v, (list, tuple)):
        return []
    out, seen = [], set()
    for t in v:
        if t is None:
            continue
        s = str(t).strip().lower()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out
