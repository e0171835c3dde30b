# tests/test_composition.py
# Purpose:
# Editing + submission rules for a mix's part list.
import pytest

from hookah_backend.app.mix import (
    add_part,
    clamp_percent_for_part,
    is_mix_valid,
    percent_sum,
    remove_part,
    update_percent,
)

def test_add_part_defaults_to_30_then_headroom():
    parts = add_part([], "a")
    assert parts == [{"flavorId": "a", "percent": 30}]
    parts = update_percent(parts, "a", 80)
    parts = add_part(parts, "b")
    # only 20 left under 100
    assert parts[-1] == {"flavorId": "b", "percent": 20}
    parts = update_percent(parts, "b", 20)
    parts = add_part(parts, "c")
    assert parts[-1]["percent"] == 0

def test_add_part_is_noop_for_duplicates_and_falsy_ids():
    parts = [{"flavorId": "a", "percent": 40}]
    assert add_part(parts, "a") == parts
    assert add_part(parts, "") == parts
    assert add_part(parts, None) == parts

def test_add_part_does_not_mutate_input():
    parts = [{"flavorId": "a", "percent": 40}]
    out = add_part(parts, "b")
    assert len(parts) == 1 and len(out) == 2
    assert out[0] is not parts[0]

def test_update_percent_clamps_to_headroom_and_leaves_others():
    parts = [{"flavorId": "a", "percent": 70}, {"flavorId": "b", "percent": 10}]
    out = update_percent(parts, "b", 90)
    assert out == [{"flavorId": "a", "percent": 70}, {"flavorId": "b", "percent": 30}]
    assert parts[1]["percent"] == 10

@pytest.mark.parametrize("value,expected", [
    (-5, 0), ("abc", 0), (None, 0), (float("nan"), 0), (float("inf"), 0), ("25", 25), (250, 60),
])
def test_update_percent_coerces_requests(value, expected):
    parts = [{"flavorId": "a", "percent": 40}, {"flavorId": "b", "percent": 0}]
    out = update_percent(parts, "b", value)
    assert out[1]["percent"] == expected

def test_clamp_matches_formula_for_other_sum():
    parts = [{"flavorId": "a", "percent": 55}, {"flavorId": "b", "percent": 5}, {"flavorId": "c", "percent": 1}]
    # other sum for c is 60
    assert clamp_percent_for_part(parts, "c", 75) == 40
    assert clamp_percent_for_part(parts, "c", 12) == 12

def test_sum_never_exceeds_100_over_an_edit_sequence():
    parts = []
    for i, fid in enumerate("abcdef"):
        parts = add_part(parts, fid)
        assert percent_sum(parts) <= 100
        parts = update_percent(parts, fid, 35 + i)
        assert percent_sum(parts) <= 100
    parts = update_percent(parts, "a", 100)
    assert percent_sum(parts) <= 100

def test_remove_part_absent_id_is_noop():
    parts = [{"flavorId": "a", "percent": 40}]
    assert remove_part(parts, "zzz") == parts
    assert remove_part(parts, "a") == []

def test_percent_sum_degrades_on_junk():
    assert percent_sum(None) == 0
    assert percent_sum("abc") == 0
    assert percent_sum([{"flavorId": "a"}, {"percent": "x"}, None, {"percent": 140}, {"percent": 5}]) == 105

def test_is_valid_boundaries():
    assert is_mix_valid([{"flavorId": "a", "percent": 100}], "Mix") is True
    assert is_mix_valid([{"flavorId": "a", "percent": 99}], "Mix") is False
    assert is_mix_valid([], "Mix") is False
    assert is_mix_valid([{"flavorId": "a", "percent": 100}], "Mi") is False
    assert is_mix_valid([{"flavorId": "a", "percent": 100}], "  Mi  ") is False

@pytest.mark.parametrize("fn", [add_part, remove_part])
def test_operations_never_raise_on_bad_containers(fn):
    for junk in (None, 42, "parts", {"a": 1}):
        assert fn(junk, "a") in ([], [{"flavorId": "a", "percent": 30}])
    assert update_percent(None, "a", 10) == []
    assert is_mix_valid(None, None) is False
    assert is_mix_valid({"flavorId": "a", "percent": 100}, "Mix") is False
