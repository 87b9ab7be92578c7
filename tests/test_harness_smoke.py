import csv
import json

import pytest
from wordler.engine import MalformedFeedbackError, SessionFinishedError, WordlerError
from wordler.harness import Session, SessionState, run_batch, run_case, summarize, write_csv, write_manifest

WORDS = {"CRANE": 5, "RAISE": 3, "STARE": 2, "TRACE": 1, "CARED": 1}


def test_run_case_smoke():
    r = run_case(WORDS, "crane", max_turns=6)
    assert r["success"] is True
    assert r["outcome"] == "solved"
    # AROSE -> "yg..g" leaves CRANE, TRACE; the tie goes to dictionary order
    assert [g for g, _ in r["history"]] == ["AROSE", "CRANE"]
    assert r["history"][-1][1] == "ggggg"
    assert r["guesses"] == 2


def test_random_consistent_smoke():
    r = run_case(WORDS, "cared", solver_id="random_consistent", seed=42)
    assert r["success"] is True
    assert r["guesses"] <= len(WORDS)


def test_answer_outside_dictionary_gives_up():
    r = run_case({"CRANE": 1}, "blond")
    assert r["success"] is False
    assert r["outcome"] == "given_up"
    assert r["guesses"] == 1


def test_run_batch_sample():
    results = run_batch(WORDS, list(WORDS), sample=3, seed=1)
    assert [r["answer"] for r in results] == ["CRANE", "RAISE", "STARE"]
    assert all(r["success"] for r in results)


def test_session_lifecycle():
    session = Session(WORDS)
    assert session.state is SessionState.NOT_STARTED
    assert session.next_guess() == "AROSE"
    assert session.state is SessionState.IN_PROGRESS
    # asking twice before feedback returns the same guess
    assert session.next_guess() == "AROSE"

    assert session.submit("yg..g") is SessionState.IN_PROGRESS
    assert session.next_guess() == "CRANE"
    assert session.submit("ggggg") is SessionState.SOLVED
    assert session.solution() == "CRANE"
    assert session.turn == 2
    with pytest.raises(SessionFinishedError):
        session.next_guess()


def test_empty_feedback_means_solved():
    session = Session(WORDS)
    session.next_guess()
    assert session.submit("") is SessionState.SOLVED
    assert session.solution() == "AROSE"
    assert session.history == [("AROSE", "ggggg")]


def test_turn_budget_exhausted():
    session = Session(WORDS, max_turns=1)
    session.next_guess()
    assert session.submit("yg..g") is SessionState.EXHAUSTED
    assert session.is_finished()
    with pytest.raises(SessionFinishedError):
        session.submit("ggggg")


def test_given_up_is_not_an_error():
    session = Session({"CRANE": 1})
    session.next_guess()
    session.submit(".....")
    assert session.next_guess() is None
    assert session.state is SessionState.GIVEN_UP


def test_malformed_feedback_leaves_session_untouched():
    session = Session(WORDS)
    session.next_guess()
    with pytest.raises(MalformedFeedbackError):
        session.submit("yg.")
    assert session.turn == 0
    assert session.pending == "AROSE"
    assert len(session.model.remaining_candidates()) == len(WORDS)


def test_submit_without_guess():
    with pytest.raises(WordlerError):
        Session(WORDS).submit("ggggg")


def test_invalid_turn_budget():
    with pytest.raises(ValueError):
        Session(WORDS, max_turns=0)


def test_sessions_share_source_safely():
    a = Session(WORDS)
    b = Session(WORDS)
    a.next_guess()
    a.submit(".....")
    assert len(a.model.remaining_candidates()) == 0
    assert len(b.model.remaining_candidates()) == len(WORDS)


def test_write_outputs(tmp_path):
    results = run_batch(WORDS, ["CRANE", "BLOND"])
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["CRANE", "BLOND"]
    assert rows[0]["guess_1"] == "AROSE"
    assert rows[0]["patt_2"] == "ggggg"
    assert rows[1]["outcome"] == "given_up"

    summary = summarize(results)
    assert summary["num_cases"] == 2 and summary["solved"] == 1 and summary["given_up"] == 1
    mpath = write_manifest({"solver_id": "positional_freq", **summary}, str(tmp_path / "m.json"))
    with open(mpath, encoding="utf-8") as f:
        assert json.load(f)["mean_guesses"] == 2.0
