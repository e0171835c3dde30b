# hookah_backend/app/services/data_stores/guest_mixes.py
from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, List, Tuple

from hookah_backend.app.config.manifest import get_guest_mixes_limit
from hookah_backend.app.config.paths import get_guest_mixes_file
from .io_utils import read_json_list, write_json_list

log = logging.getLogger("hookah.guest_mixes")

_IO_LOCK = RLock()


def _load() -> List[Dict[str, Any]]:
    return [m for m in read_json_list(get_guest_mixes_file()) if isinstance(m, dict)]


def _save(items: List[Dict[str, Any]]) -> None:
    write_json_list(get_guest_mixes_file(), items)


def _created_key(m: Dict[str, Any]) -> str:
    # ISO-8601 UTC strings sort chronologically
    return str(m.get("createdAt") or "")


def _newest_first(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # file order breaks createdAt ties (later append = newer)
    ranked = sorted(enumerate(items), key=lambda t: (_created_key(t[1]), t[0]), reverse=True)
    return [m for _, m in ranked]


def _likers(m: Dict[str, Any]) -> List[str]:
    raw = m.get("likers")
    return [str(x) for x in raw] if isinstance(raw, list) else []


def list_guest_mixes() -> List[Dict[str, Any]]:
    """All gallery mixes, newest first."""
    return _newest_first(_load())


def append_guest_mix(record: Dict[str, Any]) -> Dict[str, Any]:
    """
    Store a finished mix record. The gallery keeps at most GUEST_MIXES_LIMIT
    records; the oldest ones fall off.
    """
    rec = dict(record)
    rec["likers"] = list(dict.fromkeys(_likers(rec)))
    with _IO_LOCK:
        items = _load()
        items.append(rec)
        limit = get_guest_mixes_limit()
        if len(items) > limit:
            dropped = len(items) - limit
            items = _newest_first(items)[:limit]
            log.info("guest mixes capped at %d (dropped %d oldest)", limit, dropped)
        _save(items)
    log.info("guest mix stored: %s", rec.get("id"))
    return rec


def delete_guest_mix(mix_id: str) -> bool:
    with _IO_LOCK:
        items = _load()
        keep = [m for m in items if str(m.get("id")) != mix_id]
        if len(keep) == len(items):
            return False
        _save(keep)
    log.info("guest mix deleted: %s", mix_id)
    return True


def _set_like(mix_id: str, user_id: str, liked: bool) -> Tuple[bool, int]:
    with _IO_LOCK:
        items = _load()
        mix = next((m for m in items if str(m.get("id")) == mix_id), None)
        if mix is None:
            return False, 0
        likers = _likers(mix)
        if liked and user_id not in likers:
            likers.append(user_id)
        elif not liked and user_id in likers:
            likers.remove(user_id)
        mix["likers"] = likers
        _save(items)
        return liked, len(likers)


def like_guest_mix(mix_id: str, user_id: str) -> Tuple[bool, int]:
    """Add user_id to the mix's likers (idempotent). Unknown mix -> (False, 0)."""
    return _set_like(mix_id, user_id, True)


def unlike_guest_mix(mix_id: str, user_id: str) -> Tuple[bool, int]:
    return _set_like(mix_id, user_id, False)
