import math

import pytest
from wordler.engine import ConstraintModel
from wordler.solvers import (
    OPENING_WORD, GuessSelector, PositionalFreqSolver, create_solver, format_scores, get_solver_ids,
)
from wordler.solvers.positional_freq import count_duplicate_letters


def _selector(words):
    model = ConstraintModel(words)
    solver = create_solver("positional_freq", model)
    model.first_guess = False  # skip the opening word
    return model, solver


def test_registry():
    assert {"positional_freq", "random_consistent"} <= set(get_solver_ids())
    assert GuessSelector is PositionalFreqSolver
    with pytest.raises(ValueError):
        create_solver("nope", ConstraintModel({}))


@pytest.mark.parametrize("words", [{}, {"ZZZZZ": 1}, {"CRANE": 10, "SLATE": 8}])
def test_first_guess_is_opening_word(words):
    model = ConstraintModel(words)
    solver = create_solver("positional_freq", model)
    assert solver.next_guess() == OPENING_WORD == "AROSE"
    assert model.first_guess is False
    # second call scores the dictionary instead
    second = solver.next_guess()
    assert (second in words) if words else (second is None)


@pytest.mark.parametrize("word,expected", [
    ("CRANE", 0), ("SPEED", 2), ("ERROR", 3), ("LLAMA", 4), ("EERIE", 3),
])
def test_count_duplicate_letters(word, expected):
    assert count_duplicate_letters(word) == expected


def test_score_breakdown():
    # slot counts: S3 P3 E3 | E1 N2 | D2 T1  ->  raw SPEED 12, SPEND 13, SPENT 12
    _, solver = _selector({"SPEED": 1, "SPEND": 1, "SPENT": 1})
    scores = solver.score_candidates()

    assert [s.word for s in scores] == ["SPEND", "SPENT", "SPEED"]
    by_word = {s.word: s for s in scores}
    assert by_word["SPEND"].word_frequency == pytest.approx(1.0)
    assert by_word["SPENT"].word_frequency == pytest.approx(12 / 13)
    assert by_word["SPEED"].duplicate_penalty == pytest.approx(0.5)
    assert by_word["SPEED"].score == pytest.approx(12 / 13 - 0.5)
    assert all(s.rarity_adjustment == 0.0 for s in scores)
    assert all(0.0 <= s.word_frequency <= 1.0 for s in scores)


def test_next_guess_returns_top_word():
    _, solver = _selector({"SPEED": 1, "SPEND": 1, "SPENT": 1})
    assert solver.next_guess() == "SPEND"


def test_rarity_adjustment_is_bounded_and_never_positive():
    solver = PositionalFreqSolver(ConstraintModel({}))
    adj = solver.rarity_adjustment([0.0, 1e-4, 1.0, 1e6])
    assert all(a <= 0.0 for a in adj)
    assert math.isfinite(adj[0])
    assert adj[1] == pytest.approx(0.01 + 0.005 * math.log(1e-4))
    assert adj[2] == 0.0
    assert adj[3] == 0.0


def test_rare_word_loses_tie():
    # identical positional scores; CRANE is rare in the corpus
    _, solver = _selector({"CRANE": 1e-4, "TRACE": 1.0, "BRAKE": 1.0})
    scores = solver.score_candidates()
    assert scores[0].word == "TRACE"
    assert scores[-1].word == "CRANE"
    assert scores[-1].rarity_adjustment < 0


def test_ties_keep_dictionary_order():
    _, solver = _selector({"TRACE": 1.0, "CRANE": 1.0, "BRAKE": 1.0})
    assert [s.word for s in solver.score_candidates()] == ["TRACE", "CRANE", "BRAKE"]


def test_scratch_tables_are_rebuilt_each_call():
    model, solver = _selector({"CRANE": 1, "TRACE": 1, "BRAKE": 1})
    solver.score_candidates()
    solver.score_candidates()
    assert solver.slot_frequencies[1]["R"] == 3
    assert solver.slot_frequencies[0]["Z"] == 0

    model.apply("CRANE", ".gg.g")
    solver.score_candidates()
    assert set(solver.word_frequencies) == {"BRAKE"}
    assert solver.slot_frequencies[1]["R"] == 1


def test_no_candidates_after_contradiction():
    model = ConstraintModel({"CRANE": 10, "SLATE": 8})
    solver = create_solver("positional_freq", model)
    assert solver.next_guess() == "AROSE"
    model.apply("AROSE", ".....")
    assert len(model.remaining_candidates()) == 0
    assert solver.next_guess() is None
    assert solver.score_candidates() == []


def test_format_scores_limits_lines():
    _, solver = _selector({"SPEED": 1, "SPEND": 1, "SPENT": 1})
    text = format_scores(solver.score_candidates(), limit=2)
    lines = text.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("SPEND:")


def test_random_consistent_picks_a_candidate():
    model = ConstraintModel({"CRANE": 10, "SLATE": 8, "TRACE": 5})
    solver = create_solver("random_consistent", model, seed=7)
    assert solver.next_guess() in {"CRANE", "SLATE", "TRACE"}
    model.apply("AROSE", ".....")
    assert solver.next_guess() is None
