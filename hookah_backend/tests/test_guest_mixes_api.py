# tests/test_guest_mixes_api.py
# Purpose:
# Gallery flow: submit -> derived attributes -> list -> like/unlike -> admin delete.
import pytest

def _submit(client, **overrides):
    body = {
        "title": "Sunny pear",
        "parts": [{"flavorId": "darkside-pear", "percent": 60}, {"flavorId": "bonch-honey", "percent": 40}],
        "notes": " chill ",
        "userName": "Ivan",
    }
    body.update(overrides)
    return client.post("/api/guest-mixes", json=body)

def test_submit_derives_taste_and_strength(client, seeded_catalog):
    r = _submit(client)
    assert r.status_code == 201
    mix = r.json()
    # 5*0.6 + 7*0.4
    assert mix["strength10"] == 5.8
    # fruit: tag 60 + "pear" name token 36; sweet: tag 40 + "honey" name token 24
    assert mix["taste"] == "фруктовый"
    assert mix["author"] == "Ivan"
    assert mix["notes"] == "chill"
    assert mix["likers"] == []
    assert mix["id"] and mix["createdAt"]

def test_submit_rejects_unscaled_percents(client, seeded_catalog):
    r = _submit(client, parts=[{"flavorId": "darkside-pear", "percent": 1}, {"flavorId": "bonch-honey", "percent": 2}])
    assert r.status_code == 422
    assert client.get("/api/guest-mixes").json() == []

def test_submit_requires_title_and_defaults_author(client, seeded_catalog):
    assert _submit(client, title="   ").status_code == 422
    r = _submit(client, userName=None)
    assert r.status_code == 201
    assert r.json()["author"] == "Гость"

@pytest.mark.parametrize("overrides", [
    {"parts": []},
    {"title": "ab"},
    {"parts": [{"flavorId": "darkside-pear", "percent": 0}]},
    {"parts": [{"flavorId": "darkside-pear", "percent": 150}, {"flavorId": "bonch-honey", "percent": -50}]},
    {"parts": [{"flavorId": "darkside-pear", "percent": 50}, {"flavorId": "darkside-pear", "percent": 50}]},
])
def test_invalid_mixes_rejected(client, seeded_catalog, overrides):
    assert _submit(client, **overrides).status_code == 422

def test_banned_words_rejected(client, seeded_catalog, monkeypatch):
    monkeypatch.setenv("BANNED_WORDS", "spam, Scam")
    r = _submit(client, notes="total SCAM mix")
    assert r.status_code == 400
    assert r.json()["detail"] == "banned_words"
    assert client.get("/api/guest-mixes").json() == []

def test_list_newest_first_and_delete(client, seeded_catalog):
    first = _submit(client, title="First").json()
    second = _submit(client, title="Second").json()
    titles = [m["title"] for m in client.get("/api/guest-mixes").json()]
    assert titles == ["Second", "First"]

    assert client.delete(f"/api/guest-mixes/{first['id']}").json() == {"ok": True, "deleted": True}
    ids = [m["id"] for m in client.get("/api/guest-mixes").json()]
    assert ids == [second["id"]]

def test_like_unlike_is_idempotent(client, seeded_catalog):
    mid = _submit(client).json()["id"]
    url = f"/api/guest-mixes/{mid}/like"
    assert client.post(url, json={"userId": "u1"}).json() == {"ok": True, "liked": True, "likes": 1}
    assert client.post(url, json={"userId": "u1"}).json()["likes"] == 1
    assert client.post(url, json={"userId": "u2"}).json()["likes"] == 2
    r = client.request("DELETE", url, json={"userId": "u1"})
    assert r.json() == {"ok": True, "liked": False, "likes": 1}

def test_like_unknown_mix_is_soft(client):
    r = client.post("/api/guest-mixes/nope/like", json={"userId": "u1"})
    assert r.status_code == 200
    assert r.json() == {"ok": True, "liked": False, "likes": 0}

def test_gallery_is_capped(client, seeded_catalog, monkeypatch):
    monkeypatch.setenv("GUEST_MIXES_LIMIT", "2")
    for title in ("One", "Two", "Three"):
        assert _submit(client, title=title).status_code == 201
    titles = [m["title"] for m in client.get("/api/guest-mixes").json()]
    assert titles == ["Three", "Two"]
