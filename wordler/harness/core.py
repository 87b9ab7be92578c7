"""
Session lifecycle and experiment harness primitives.

- Session:   one game. Owns a ConstraintModel and the solver bound to it,
             enforces the turn budget and tracks the outcome.
- run_case:  play one simulated game against a known answer.
- run_batch: run many simulated games in sequence (optionally a sample prefix).

A session moves NOT_STARTED -> IN_PROGRESS -> {SOLVED | EXHAUSTED | GIVEN_UP}.
Running out of candidates (GIVEN_UP) and running out of turns (EXHAUSTED) are
outcomes, not errors. Nothing here reads the terminal or exits the process;
the driver owns the loop.
"""

from __future__ import annotations

import enum
import logging
import time
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from wordler.engine import (
    SOLVED_PATTERN,
    ConstraintModel,
    Feedback,
    SessionFinishedError,
    WordlerError,
    score,
)
from wordler.solvers import DEFAULT_SOLVER, create_solver

log = logging.getLogger(__name__)

# Default turn budget (Wordle rules). Sessions accept any positive budget.
WORDLE_MAX_TURNS = 6


class SessionState(enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    GIVEN_UP = "given_up"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.SOLVED, SessionState.EXHAUSTED, SessionState.GIVEN_UP)


class Session:
    """
    One game, driven from outside:

        session = Session(freqs)
        while not session.is_finished():
            guess = session.next_guess()
            if guess is None:
                break
            session.submit(ask_user(guess))   # e.g. "gy..y"

    Each session copies `source`, so many sessions can share one loaded
    dictionary. Do not share a Session between threads.
    """

    def __init__(
            self,
            source: Mapping[str, float],
            *,
            solver_id: str = DEFAULT_SOLVER,
            max_turns: int = WORDLE_MAX_TURNS,
            seed: int | None = None,
    ):
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive; got {max_turns}")
        self.model = ConstraintModel(source)
        self.solver = create_solver(solver_id, self.model, seed=seed)
        self.max_turns = max_turns
        self.state = SessionState.NOT_STARTED
        self.history: List[Tuple[str, str]] = []
        self.pending: Optional[str] = None

    @property
    def turn(self) -> int:
        """Number of guesses that have received feedback."""
        return len(self.history)

    def is_finished(self) -> bool:
        return self.state.is_terminal

    def next_guess(self) -> Optional[str]:
        """
        The guess to play this turn, or None if no candidates remain (the
        session is then GIVEN_UP). Asking again before `submit` returns the
        same pending guess.
        """
        if self.is_finished():
            raise SessionFinishedError(f"Session already {self.state.value}")
        if self.pending is not None:
            return self.pending

        self.state = SessionState.IN_PROGRESS
        guess = self.solver.next_guess()
        if guess is None:
            self.state = SessionState.GIVEN_UP
            log.info(f"Giving up after {self.turn} guesses: no candidates remain")
        self.pending = guess
        return guess

    def submit(self, codes) -> SessionState:
        """
        Feedback for the pending guess, e.g. "gy..y". An empty string (or all
        'g') means the guess was right. Malformed feedback raises
        MalformedFeedbackError and leaves the session untouched, so the
        driver can ask again.
        """
        if self.is_finished():
            raise SessionFinishedError(f"Session already {self.state.value}")
        if self.pending is None:
            raise WordlerError("No pending guess; call next_guess() first")

        guess = self.pending
        if isinstance(codes, str) and codes == "":
            # driver shorthand for all-correct
            codes = SOLVED_PATTERN
        feedback = Feedback.parse(guess, codes)

        self.model.apply(feedback)
        self.history.append((guess, feedback.pattern))
        self.pending = None

        if feedback.is_all_correct() or self.model.is_solved():
            self.state = SessionState.SOLVED
            log.info(f"Solved {self.solution()} in {self.turn} guesses")
        elif self.turn >= self.max_turns:
            self.state = SessionState.EXHAUSTED
            log.info(f"Ran out of guesses after {self.turn} turns")
        return self.state

    def solution(self) -> Optional[str]:
        """The word, once the session is SOLVED."""
        if self.state is not SessionState.SOLVED:
            return None
        return self.model.solution() or self.history[-1][0]


def run_case(
        source: Mapping[str, float],
        answer: str,
        *,
        solver_id: str = DEFAULT_SOLVER,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one simulated game until it is solved, the solver gives up, or
    the turn budget is exhausted. Feedback comes from `score(guess, answer)`.

    Args:
        source:     word -> frequency mapping (copied by the session)
        answer:     the hidden word for this case
        solver_id:  registered solver id
        max_turns:  turn budget
        seed:       RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            answer, solver_id, success (bool), outcome (str), guesses (int),
            time_ms (float), history (list[(guess, pattern)])
    """
    answer = answer.strip().upper()
    session = Session(source, solver_id=solver_id, max_turns=max_turns, seed=seed)

    t0 = time.perf_counter()
    while not session.is_finished():
        guess = session.next_guess()
        if guess is None:
            break
        session.submit(score(guess, answer))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "solver_id": solver_id,
        "success": session.state is SessionState.SOLVED,
        "outcome": session.state.value,
        "guesses": session.turn,
        "time_ms": dt,
        "history": list(session.history),
    }


def run_batch(
        source: Mapping[str, float],
        answers: Iterable[str],
        *,
        solver_id: str = DEFAULT_SOLVER,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = [a.strip().upper() for a in answers]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(source, ans, solver_id=solver_id, max_turns=max_turns, seed=case_seed))
    return out
