from passwright.common import CommonPasswordSet
from passwright.evaluator import StrengthEvaluator, StrengthVerdict
from passwright.suggestions import chars_needed_for, suggest_improvements


def test_suggest_for_common_password():
    ev = StrengthEvaluator(CommonPasswordSet(["password123"]))
    s = suggest_improvements("password123", ev)
    assert s["verdict"] == StrengthVerdict.COMMON
    joined = " ".join(s["suggestions"]).lower()
    assert "common" in joined
    assert "uppercase" in joined
    assert "special" in joined

def test_examples_produced():
    s = suggest_improvements("weak")
    assert s.get("examples")
    assert isinstance(s["examples"][0], str)
    assert s["examples"][0] != "weak"
    assert s["chars_needed"] > 0

def test_repeated_pattern_flagged():
    s = suggest_improvements("abcdefgabcdefg")
    assert any("repeated" in x.lower() for x in s["suggestions"])

def test_strong_password_needs_nothing():
    s = suggest_improvements("X7f!9Lq@2Vb#tR4sYp")
    assert s["chars_needed"] == 0
    assert any("meets" in x for x in s["suggestions"])

def test_chars_needed_for():
    # 26-char pool gives ~4.7 bits per char; 61 - 30 = 31 bits -> 7 chars
    assert chars_needed_for(30, 26, 60) == 7
    assert chars_needed_for(100, 94, 60) == 0
    # empty pool falls back to the full 94-char pool
    assert chars_needed_for(0, 0, 60) == 10

def test_bundled_list_used_without_evaluator():
    s = suggest_improvements("password")
    assert s["verdict"] == StrengthVerdict.COMMON
    assert any("common passwords" in x for x in s["suggestions"])
