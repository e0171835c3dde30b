# hookah_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env mode + runtime settings live in manifest.py
from .manifest import (
    APP_ENV,
    DEBUG_MODE,
    CORS_ORIGINS,
    get_admin_key,
    get_banned_words_env,
    get_guest_mixes_limit,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    APP_ROOT,
    get_data_dir,
    get_rules_dir,
    get_flavors_file,
    get_guest_mixes_file,
    resolve_rules_file,
)

__all__ = [
    # manifest
    "APP_ENV",
    "DEBUG_MODE",
    "CORS_ORIGINS",
    "get_admin_key",
    "get_banned_words_env",
    "get_guest_mixes_limit",
    # paths
    "REPO_ROOT",
    "APP_ROOT",
    "get_data_dir",
    "get_rules_dir",
    "get_flavors_file",
    "get_guest_mixes_file",
    "resolve_rules_file",
]
