# hookah_backend/app/services/moderation.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from hookah_backend.app.config.manifest import get_banned_words_env
from hookah_backend.app.config.paths import get_data_dir
from hookah_backend.app.services.data_stores.io_utils import read_json_list

# What it does:
# Plain case-insensitive substring filter for user-submitted text (mix titles
# and notes). Words come from BANNED_WORDS (comma-separated) and, if present,
# <DATA_DIR>/banned_words.json (a JSON array of strings).

log = logging.getLogger("hookah.moderation")

BANNED_WORDS_FILE = "banned_words.json"


def load_banned_words() -> List[str]:
    words = list(get_banned_words_env())
    words.extend(str(w) for w in read_json_list(get_data_dir() / BANNED_WORDS_FILE) if w)
    out, seen = [], set()
    for w in words:
        s = w.strip().lower()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out


def find_banned_words(*texts: Optional[str], words: Optional[Iterable[str]] = None) -> List[str]:
    """Banned words present in any of `texts`, in word-list order."""
    vocab = load_banned_words() if words is None else [str(w).strip().lower() for w in words if w]
    hay = " ".join(str(t) for t in texts if t).lower()
    if not hay:
        return []
    hits = [w for w in vocab if w and w in hay]
    if hits:
        log.warning("moderation: rejected text with %d banned word(s)", len(hits))
    return hits


def contains_banned_words(*texts: Optional[str], words: Optional[Iterable[str]] = None) -> bool:
    return bool(find_banned_words(*texts, words=words))
