"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Used by the simulation harness to play the role of the game: the solver never
sees the answer, only the pattern this module produces for it.

Conventions (same alphabet the driver types):
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = correct letter in the wrong position
  - '.' : grey   = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.
"""

from collections import Counter

from .feedback import Outcome
from .validation import normalize_word

GREEN = Outcome.CORRECT.value
YELLOW = Outcome.PRESENT.value
GREY = Outcome.ABSENT.value


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> ".gyyy"
      score("lemon", "level") -> "gg..."
    """
    guess = normalize_word(guess)
    answer = normalize_word(answer)
    if len(guess) != len(answer):
        raise ValueError(f"Guess and answer must be the same length: {guess!r} vs {answer!r}")

    pattern = [GREY] * len(guess)

    # Pass 1: greens, and leftover answer letters for pass 2
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's true multiplicity
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)
