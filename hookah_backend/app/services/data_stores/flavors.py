# hookah_backend/app/services/data_stores/flavors.py
from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, List, Optional

from hookah_backend.app.config.paths import get_flavors_file
from hookah_backend.app.mix.coercion import coerce_number
from hookah_backend.app.utils.strings import make_flavor_id, normalize_tags, null_to_none_or_strip
from .io_utils import read_json_list, write_json_list

log = logging.getLogger("hookah.flavors")

_IO_LOCK = RLock()


class FlavorExistsError(ValueError):
    """A flavor with the same id is already in the catalog."""


def _strength_or_none(v: Any) -> Optional[float]:
    res = coerce_number(v)
    return res.value if res.ok else None


def _normalize_flavor(d: Dict[str, Any]) -> Dict[str, Any]:
    # legacy payloads used title/producer/strength
    brand = null_to_none_or_strip(d.get("brand") or d.get("producer")) or ""
    name = null_to_none_or_strip(d.get("name") or d.get("title")) or ""
    rec: Dict[str, Any] = {
        "id": null_to_none_or_strip(d.get("id")) or (make_flavor_id(brand, name) if brand and name else ""),
        "brand": brand,
        "name": name,
        "description": str(d.get("description") or ""),
        "tags": normalize_tags(d.get("tags")),
    }
    strength = _strength_or_none(d.get("strength10", d.get("strength")))
    if strength is not None:
        rec["strength10"] = strength
    return rec


def _load() -> List[Dict[str, Any]]:
    return [f for f in read_json_list(get_flavors_file()) if isinstance(f, dict)]


def _save(items: List[Dict[str, Any]]) -> None:
    write_json_list(get_flavors_file(), items)


def list_flavors(q: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Whole catalog, or a case-insensitive substring search over brand/name/tags.
    """
    items = _load()
    qnorm = (q or "").strip().lower()
    if not qnorm:
        return items

    def hay(f: Dict[str, Any]) -> str:
        tags = f.get("tags") if isinstance(f.get("tags"), list) else []
        name = f.get("name") or f.get("title") or ""
        return f"{f.get('brand') or ''} {name} {' '.join(map(str, tags))}".lower()

    return [f for f in items if qnorm in hay(f)]


def get_flavor(flavor_id: str) -> Dict[str, Any]:
    for f in _load():
        if str(f.get("id")) == flavor_id:
            return f
    raise KeyError(f"flavor not found: {flavor_id}")


def create_flavor(record: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(record, dict):
        raise TypeError("flavor must be a dict")
    rec = _normalize_flavor(record)
    if not rec["brand"] or not rec["name"]:
        raise ValueError("brand and name required")

    with _IO_LOCK:
        items = _load()
        if any(str(f.get("id")) == rec["id"] for f in items):
            raise FlavorExistsError(f"flavor id already exists: {rec['id']}")
        items.append(rec)
        _save(items)
    log.info("flavor created: %s", rec["id"])
    return rec


def update_flavor(flavor_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(patch, dict):
        raise TypeError("patch must be a dict")
    with _IO_LOCK:
        items = _load()
        idx = next((i for i, f in enumerate(items) if str(f.get("id")) == flavor_id), None)
        if idx is None:
            raise KeyError(f"flavor not found: {flavor_id}")
        rec = dict(items[idx])
        if "brand" in patch:
            rec["brand"] = str(patch["brand"] or "").strip()
        for key in ("name", "title"):
            if key in patch:
                rec["name"] = str(patch[key] or "").strip()
        if "description" in patch:
            rec["description"] = str(patch["description"] or "")
        if "tags" in patch:
            rec["tags"] = normalize_tags(patch["tags"])
        for key in ("strength10", "strength"):
            if key in patch:
                strength = _strength_or_none(patch[key])
                if strength is None:
                    rec.pop("strength10", None)
                else:
                    rec["strength10"] = strength
        items[idx] = rec
        _save(items)
    log.info("flavor updated: %s", flavor_id)
    return rec


def delete_flavor(flavor_id: str) -> bool:
    with _IO_LOCK:
        items = _load()
        keep = [f for f in items if str(f.get("id")) != flavor_id]
        if len(keep) == len(items):
            return False
        _save(keep)
    log.info("flavor deleted: %s", flavor_id)
    return True
