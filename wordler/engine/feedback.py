"""
Per-letter feedback for one guess.

Conventions (the external driver types these):
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = letter is in the word, but not at this position
  - '.' : grey   = letter absent (at this occurrence)

A `Feedback` pairs the guessed word with one `Outcome` per position. It is
built once by the driver, consumed once by `ConstraintModel.apply`, then
thrown away.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .errors import MalformedFeedbackError
from .validation import WORD_LENGTH, is_well_formed, normalize_word


class Outcome(enum.Enum):
    CORRECT = "g"
    PRESENT = "y"
    ABSENT = "."

    @classmethod
    def from_char(cls, char: str) -> "Outcome":
        """Map one feedback symbol to an Outcome. Unknown symbols are fatal."""
        try:
            return cls(char)
        except ValueError as e:
            raise MalformedFeedbackError(f"Invalid guess outcome: {char!r}") from e


OutcomeLike = Union[Outcome, str]

# The all-correct pattern, e.g. "ggggg" for five letters.
SOLVED_PATTERN = Outcome.CORRECT.value * WORD_LENGTH


def parse_outcomes(codes: Union[str, Iterable[OutcomeLike]], N: int = WORD_LENGTH) -> Tuple[Outcome, ...]:
    """
    Turn a code string like "gy..y" (or a sequence of Outcome / symbols)
    into a tuple of Outcomes. The length must be exactly N.
    """
    outcomes = tuple(c if isinstance(c, Outcome) else Outcome.from_char(c) for c in codes)
    if len(outcomes) != N:
        raise MalformedFeedbackError(
            f"Feedback must have exactly {N} outcomes; got {len(outcomes)}")
    return outcomes


@dataclass(frozen=True)
class Feedback:
    word: str
    outcomes: Tuple[Outcome, ...]

    def __post_init__(self):
        if not is_well_formed(self.word):
            raise MalformedFeedbackError(f"Not a {WORD_LENGTH}-letter word: {self.word!r}")
        # frozen dataclass: bypass __setattr__ to store the canonical forms
        object.__setattr__(self, "word", normalize_word(self.word))
        object.__setattr__(self, "outcomes", parse_outcomes(self.outcomes))

    @classmethod
    def parse(cls, word: str, codes: Union[str, Iterable[OutcomeLike]]) -> "Feedback":
        """Feedback.parse("crane", ".g.g.")"""
        return cls(word, parse_outcomes(codes))

    @property
    def pattern(self) -> str:
        return "".join(o.value for o in self.outcomes)

    def is_all_correct(self) -> bool:
        return all(o is Outcome.CORRECT for o in self.outcomes)

    def __iter__(self):
        return iter(zip(self.word, self.outcomes))
