import pytest
from wordler.engine import (
    Feedback, MalformedFeedbackError, Outcome, SOLVED_PATTERN, parse_outcomes, score, validate_guess,
)

# --- golden feedback tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level",".gyyy"),
    ("level","level","ggggg"),
    ("lemon","level","gg..."),
    ("cools","scoop","yyg.y"),
    ("scoop","scoop","ggggg"),
    ("crane","crane","ggggg"),
    ("raise","crane","yy..g"),
    ("stare","crane","..gyg"),
    ("AROSE","DRINK",".g..."),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")

def test_validate_guess():
    allowed = {"CRANE","RAISE","STARE"}
    assert validate_guess("crane", allowed) is True
    assert validate_guess("CRANE") is True
    assert validate_guess("slate", allowed) is False
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess(None) is False

def test_feedback_parse():
    fb = Feedback.parse("crane", ".g.g.")
    assert fb.word == "CRANE"
    assert fb.pattern == ".g.g."
    assert fb.outcomes[1] is Outcome.CORRECT
    assert fb.outcomes[0] is Outcome.ABSENT
    assert list(fb)[3] == ("N", Outcome.CORRECT)
    assert not fb.is_all_correct()
    assert Feedback.parse("crane", SOLVED_PATTERN).is_all_correct()

def test_feedback_accepts_outcome_sequence():
    codes = [Outcome.PRESENT, "g", Outcome.ABSENT, ".", "y"]
    assert Feedback.parse("AROSE", codes).pattern == "yg..y"
    assert parse_outcomes("gy.", N=3) == (Outcome.CORRECT, Outcome.PRESENT, Outcome.ABSENT)

@pytest.mark.parametrize("word,codes", [
    ("crane", "gg"),        # too short
    ("crane", "gggggg"),    # too long
    ("crane", ""),
    ("crane", "gx..."),     # unknown symbol
    ("crane", "G...."),     # symbols are lowercase
    ("cranes", "....."),
    ("cr4ne", "....."),
])
def test_feedback_malformed(word, codes):
    with pytest.raises(MalformedFeedbackError):
        Feedback.parse(word, codes)

def test_malformed_feedback_is_a_value_error():
    with pytest.raises(ValueError):
        Feedback.parse("crane", "q....")
