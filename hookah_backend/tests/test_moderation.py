# tests/test_moderation.py
import json

from hookah_backend.app.services.moderation import contains_banned_words, find_banned_words, load_banned_words

def test_explicit_word_list_is_case_insensitive():
    assert find_banned_words("Buy CHEAP stuff", None, words=["cheap", "free"]) == ["cheap"]
    assert contains_banned_words("nice mix", words=["cheap"]) is False
    assert find_banned_words(None, "", words=["cheap"]) == []

def test_words_from_env_and_data_file(tmp_data_tree, monkeypatch):
    monkeypatch.setenv("BANNED_WORDS", "Spam, ,scam")
    (tmp_data_tree / "banned_words.json").write_text(json.dumps(["casino", "SPAM"]), encoding="utf-8")
    assert load_banned_words() == ["spam", "scam", "casino"]
    assert contains_banned_words("best Casino mix")
