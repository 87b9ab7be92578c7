"""
Constraint model of the secret word ("the board").

Tracks three things and narrows them as feedback arrives:
  - one Slot per letter position: either Open(letters still possible there)
    or Fixed(the confirmed letter)
  - included letters: confirmed in the word, placement not necessarily known
  - the candidate dictionary: word -> corpus frequency, only ever shrinks

After every update, words that no longer fit the board are dropped from the
dictionary for good. Solvers read the dictionary; only this module writes it.

Known gap: a grey letter is removed from every open slot, even if another
occurrence of the same letter was green or yellow in the same guess. Words
with repeated letters and mixed feedback can therefore be eliminated wrongly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple, Union

from .errors import DictionaryLoadError
from .feedback import Feedback, Outcome, OutcomeLike
from .validation import ALPHABET, WORD_LENGTH, is_well_formed, normalize_word

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Open:
    """Slot not solved yet; `letters` are the ones still possible here."""
    letters: FrozenSet[str]

    def allows(self, letter: str) -> bool:
        return letter in self.letters

    def without(self, letter: str) -> "Open":
        return Open(self.letters - {letter})


@dataclass(frozen=True)
class Fixed:
    """Slot solved; never reopens."""
    letter: str

    def allows(self, letter: str) -> bool:
        return letter == self.letter


Slot = Union[Open, Fixed]


class ConstraintModel:
    """
    Board + candidate dictionary for one session.

    Lifecycle: build (or `initialize`) once per session, `apply` once per
    round, throw away when the session ends. Never share one instance
    between concurrent sessions; the dictionary is narrowed in place.
    """

    def __init__(self, source: Optional[Mapping[str, float]] = None):
        self.slots: List[Slot] = [Open(ALPHABET) for _ in range(WORD_LENGTH)]
        self.included_letters: Set[str] = set()
        self.dictionary: Dict[str, float] = {}
        self.first_guess = True
        if source is not None:
            self.initialize(source)

    # ---- lifecycle ----

    def initialize(self, source: Mapping[str, float]) -> None:
        """
        Fresh board (every slot open to A-Z), a private copy of `source` as the
        candidate dictionary, no included letters, first_guess = True.

        Raises DictionaryLoadError if `source` is not a usable mapping.
        """
        if not isinstance(source, Mapping):
            raise DictionaryLoadError(
                f"Dictionary source must be a word -> frequency mapping; got {type(source).__name__}")

        dictionary: Dict[str, float] = {}
        skipped = 0
        for word, freq in source.items():
            if not is_well_formed(word):
                skipped += 1
                continue
            try:
                weight = float(freq)
            except (TypeError, ValueError) as e:
                raise DictionaryLoadError(f"Bad frequency for {word!r}: {freq!r}") from e
            if weight < 0:
                raise DictionaryLoadError(f"Negative frequency for {word!r}: {freq!r}")
            dictionary[normalize_word(word)] = weight

        if skipped:
            log.debug(f"Skipped {skipped} entries that are not {WORD_LENGTH}-letter words")

        self.slots = [Open(ALPHABET) for _ in range(WORD_LENGTH)]
        self.included_letters = set()
        self.dictionary = dictionary
        self.first_guess = True
        log.debug(f"Dictionary size: {len(self.dictionary)}")

    # ---- updates ----

    def apply(self, guess: Union[Feedback, str], codes: Union[str, Iterable[OutcomeLike], None] = None) -> int:
        """
        Fold one round of feedback into the board, then drop every candidate
        that no longer fits.

        Accepts a ready `Feedback`, or a word plus its codes:
            model.apply("crane", ".g.g.")

        Malformed input raises MalformedFeedbackError before anything changes.
        Returns the number of candidates removed.
        """
        feedback = guess if isinstance(guess, Feedback) else Feedback.parse(guess, codes if codes is not None else "")

        for i, (letter, outcome) in enumerate(feedback):
            if outcome is Outcome.CORRECT:
                self.slots[i] = Fixed(letter)
            elif outcome is Outcome.PRESENT:
                self.included_letters.add(letter)
                self._remove_letter(i, letter)
            else:
                for j in range(len(self.slots)):
                    self._remove_letter(j, letter)

        log.debug(f"Board after {feedback.word} {feedback.pattern}:\n{self.board_summary()}")
        removed = self.filter_candidates()
        log.debug(f"Dictionary size: {len(self.dictionary)} (-{removed})")
        return removed

    def _remove_letter(self, index: int, letter: str) -> None:
        slot = self.slots[index]
        # fixed slots are immutable
        if isinstance(slot, Open):
            self.slots[index] = slot.without(letter)

    def filter_candidates(self) -> int:
        """
        Permanently remove every word `is_valid_word` rejects.

        Idempotent: a second call without new feedback removes nothing.
        Returns the number of words removed.
        """
        invalid = [w for w in self.dictionary if not self.is_valid_word(w)]
        for w in invalid:
            del self.dictionary[w]
        return len(invalid)

    # ---- queries ----

    def word_includes_all_letters(self, word: str) -> bool:
        return all(letter in word for letter in self.included_letters)

    def word_matches_board(self, word: str) -> bool:
        if len(word) != len(self.slots):
            return False
        return all(slot.allows(letter) for slot, letter in zip(self.slots, word))

    def is_valid_word(self, word: str) -> bool:
        """A word survives iff it has every included letter and fits every slot."""
        word = normalize_word(word)
        return self.word_includes_all_letters(word) and self.word_matches_board(word)

    def is_solved(self) -> bool:
        return bool(self.slots) and all(isinstance(s, Fixed) for s in self.slots)

    def solution(self) -> Optional[str]:
        """The fixed word once every slot is solved, else None."""
        if not self.is_solved():
            return None
        return "".join(s.letter for s in self.slots)

    def remaining_candidates(self) -> Mapping[str, float]:
        """Read-only live view of word -> frequency."""
        return MappingProxyType(self.dictionary)

    def board(self) -> Tuple[Slot, ...]:
        return tuple(self.slots)

    def known_letters(self) -> FrozenSet[str]:
        return frozenset(self.included_letters)

    def board_summary(self) -> str:
        """
        One line per slot (fixed letter, or the sorted open letters), then the
        included letters. For logs only; the format is not stable.
        """
        lines = []
        for i, slot in enumerate(self.slots, start=1):
            if isinstance(slot, Fixed):
                lines.append(f"{i}: [{slot.letter}]")
            else:
                lines.append(f"{i}: {' '.join(sorted(slot.letters))}")
        lines.append(f"Included letters: {' '.join(sorted(self.included_letters))}")
        return "\n".join(lines)

    def __repr__(self):
        return (f"ConstraintModel(candidates={len(self.dictionary)}, "
                f"included={''.join(sorted(self.included_letters))!r}, solved={self.is_solved()})")
