# hookah_backend/app/services/data_stores/io_utils.py
from __future__ import annotations

import json, os, tempfile, shutil
from pathlib import Path
from typing import Any, List

def atomic_write(path: Path, text: str) -> None:
    """
    Atomic text write: temp file in the same dir, then replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=path.parent, encoding="utf-8") as tf:
        tf.write(text)
        tmp = Path(tf.name)
    try:
        os.replace(tmp, path)   # atomic where supported
    except OSError:
        shutil.move(str(tmp), str(path))

def read_json(path: Path, default: Any):
    """
    Safe JSON reader. Returns `default` if missing or invalid.
    """
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8")
        return json.loads(raw) if raw.strip() else default
    except (OSError, ValueError):
        return default

def read_json_list(path: Path) -> List[Any]:
    """
    Read a JSON array file; anything that is not a list reads as [].
    """
    data = read_json(path, default=[])
    return data if isinstance(data, list) else []

def write_json_list(path: Path, items: List[Any]) -> None:
    atomic_write(path, json.dumps(items, ensure_ascii=False, indent=2))
