from __future__ import annotations
import json
import pytest
from fastapi.testclient import TestClient
from hookah_backend.app.main import app
from hookah_backend.app.rules_loader import clear_rules_cache

# --- Data tree override: every test gets its own DATA_DIR ---
@pytest.fixture(autouse=True)
def tmp_data_tree(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    for name in ("FLAVORS_FILE", "GUEST_MIXES_FILE", "ADMIN_KEY", "BANNED_WORDS",
                 "GUEST_MIXES_LIMIT", "MIX_RULES_DIR"):
        monkeypatch.delenv(name, raising=False)
    clear_rules_cache()
    yield data
    clear_rules_cache()

@pytest.fixture
def client():
    return TestClient(app)

# --- A small catalog written straight to flavors.json ---
@pytest.fixture
def catalog():
    return [
        {"id": "darkside-pear", "brand": "Darkside", "name": "Pear Drop", "tags": ["fruit"]},
        {"id": "bonch-honey", "brand": "Bonch", "name": "Honey", "tags": ["sweet"]},
        {"id": "starline-ice", "brand": "Starline", "name": "Ледяная мята", "strength10": 2},
    ]

@pytest.fixture
def seeded_catalog(tmp_data_tree, catalog):
    (tmp_data_tree / "flavors.json").write_text(json.dumps(catalog, ensure_ascii=False), encoding="utf-8")
    return catalog
