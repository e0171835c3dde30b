# hookah_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import List

# ---- Environment mode ----
APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")

_DEFAULT_CORS = "http://localhost:5173,http://127.0.0.1:5173"

def _csv(raw: str | None) -> List[str]:
    return [x.strip() for x in (raw or "").split(",") if x.strip()]

CORS_ORIGINS: List[str] = _csv(os.getenv("CORS_ORIGINS", _DEFAULT_CORS))

# ---- Runtime settings (read per call; tests flip them with monkeypatch) ----
def get_admin_key() -> str:
    return os.getenv("ADMIN_KEY", "").strip()

def get_banned_words_env() -> List[str]:
    return _csv(os.getenv("BANNED_WORDS"))

def get_guest_mixes_limit() -> int:
    try:
        return max(1, int(os.getenv("GUEST_MIXES_LIMIT", "500")))
    except ValueError:
        return 500

__all__ = [
    "APP_ENV", "DEBUG_MODE", "CORS_ORIGINS",
    "get_admin_key", "get_banned_words_env", "get_guest_mixes_limit",
]
