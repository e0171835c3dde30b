# hookah_backend/app/rules_loader.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml  # PyYAML

from hookah_backend.app.config.paths import resolve_rules_file
from hookah_backend.app.mix.taxonomy import BRAND_STRENGTH10_DEFAULTS

# -----------------------------------------------------------------------------
# Logger
# -----------------------------------------------------------------------------
log = logging.getLogger("hookah.rules_loader")
if not log.handlers:
    handler = logging.StreamHandler()
    log.addHandler(handler)
    log.setLevel(logging.INFO)

BRAND_STRENGTH_FILE = "brand_strength.yaml"

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _load_yaml_from(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

def _parse_brand_table(doc: Any) -> Dict[str, float]:
    brands = doc.get("brands") if isinstance(doc, dict) else None
    if not isinstance(brands, dict):
        raise ValueError("brand table must be a mapping under 'brands'")
    out: Dict[str, float] = {}
    for brand, value in brands.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"strength for {brand!r} must be a number, got {value!r}")
        out[str(brand).strip()] = max(1.0, min(10.0, float(value)))
    return out

# -----------------------------------------------------------------------------
# Public loader API
# -----------------------------------------------------------------------------
@lru_cache(maxsize=8)
def _load_brand_defaults_at(path_str: str) -> Dict[str, float]:
    path = Path(path_str)
    if not path.exists():
        log.warning(f"[rules] {path.name} missing (looked at {path}); using built-in brand defaults.")
        return dict(BRAND_STRENGTH10_DEFAULTS)
    try:
        table = _parse_brand_table(_load_yaml_from(path))
    except ValueError as e:
        log.warning(f"[rules] {e}; using built-in brand defaults.")
        return dict(BRAND_STRENGTH10_DEFAULTS)
    log.info(f"[rules] loaded {len(table)} brand defaults from {path}")
    return table

def load_brand_defaults() -> Dict[str, float]:
    """
    Brand -> default strength10 table from the rules dir (MIX_RULES_DIR).
    Falls back to the built-in table when the file is missing or malformed.
    Cached per resolved path; returns a copy so callers can't poison the cache.
    """
    path = resolve_rules_file(BRAND_STRENGTH_FILE)
    return dict(_load_brand_defaults_at(str(path)))

def clear_rules_cache() -> None:
    _load_brand_defaults_at.cache_clear()
