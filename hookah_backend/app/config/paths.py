# hookah_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for the hookah backend.

Env overrides (read on every call so tests can monkeypatch them):
    DATA_DIR
    FLAVORS_FILE
    GUEST_MIXES_FILE
    MIX_RULES_DIR

Defaults:
    <repo_root>/data
    <DATA_DIR>/flavors.json
    <DATA_DIR>/guest_mixes.json
    <repo_root>/hookah_backend/app/mix/rules
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "hookah_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()
APP_ROOT: Path = _THIS_FILE.parents[1]

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

# ── Getters
def get_data_dir() -> Path:
    return (_env_path("DATA_DIR") or REPO_ROOT / "data").resolve()

def get_rules_dir() -> Path:
    return (_env_path("MIX_RULES_DIR") or APP_ROOT / "mix" / "rules").resolve()

def get_flavors_file() -> Path:
    return _env_path("FLAVORS_FILE") or get_data_dir() / "flavors.json"

def get_guest_mixes_file() -> Path:
    return _env_path("GUEST_MIXES_FILE") or get_data_dir() / "guest_mixes.json"

# ── Resolvers
def resolve_rules_file(name: str) -> Path:
    """Return absolute path under the rules dir for a given filename."""
    return get_rules_dir() / name

__all__ = [
    # constants
    "REPO_ROOT", "APP_ROOT",
    # getters
    "get_data_dir", "get_rules_dir", "get_flavors_file", "get_guest_mixes_file",
    # resolvers
    "resolve_rules_file",
]
