# tests/test_coercion.py
import math

from hookah_backend.app.mix.coercion import Coerced, coerce_number, safe_num, safe_percent

def test_coerce_number_tags_success_and_failure():
    assert coerce_number(12) == Coerced(True, 12.0)
    assert coerce_number(" 7.5 ") == Coerced(True, 7.5)
    assert coerce_number("") == Coerced(True, 0.0)
    for bad in (None, True, "x", math.nan, math.inf, -math.inf, [], {}):
        assert coerce_number(bad).ok is False

def test_safe_num_default_and_safe_percent_clamp():
    assert safe_num("oops", 3) == 3
    assert safe_num("4") == 4
    assert safe_percent(-1) == 0
    assert safe_percent(101) == 100
    assert safe_percent("55") == 55
