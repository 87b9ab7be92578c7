"""
Positional Letter Frequency (PLF) guess selector.

Idea:
  Build per-position histograms from the CURRENT candidate set.
  Score each candidate by sum(counts[pos][word[pos]]) across positions,
  normalized by the best such sum into [0, 1].
  Penalize repeated letters (each position holding a letter that appears more
  than once costs DUPLICATE_PENALTY), and discount words that are rare in the
  corpus by a small log-frequency term that is capped at 0 (common words are
  never rewarded, rare ones only slightly discounted).

    score = word_frequency - duplicate_penalty + rarity_adjustment

The first call of a session skips all of this and plays OPENING_WORD.
Greedy and single-step: no lookahead over possible feedback.

Fast: O(|candidates|*N) to build + O(|candidates|*N) to score.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np

from .base import BaseSolver, OPENING_WORD, register

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordScore:
    word: str
    word_frequency: float     # normalized positional frequency, 0..1
    duplicate_penalty: float  # >= 0, subtracted
    rarity_adjustment: float  # <= 0, added
    score: float


def count_duplicate_letters(word: str) -> int:
    """
    Number of positions whose letter occurs more than once in the word.
    "SPEED" -> 2 (both E's), "ERROR" -> 3 (the R's).
    """
    counts = Counter(word)
    return sum(1 for ch in word if counts[ch] > 1)


def format_scores(scores: Iterable[WordScore], limit: int = 10) -> str:
    """Top-`limit` breakdown, one line per word. Diagnostic text only."""
    lines = []
    for i, s in enumerate(scores):
        if i >= limit:
            break
        lines.append(
            f"{s.word}: {s.word_frequency:.2g} - {s.duplicate_penalty:g} "
            f"+ {s.rarity_adjustment:.2g} = {s.score:.2g}"
        )
    return "\n".join(lines)


@register
class PositionalFreqSolver(BaseSolver):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "2.0.0"

    DUPLICATE_PENALTY = 0.25  # per position holding a repeated letter
    RARITY_BASE = 0.01
    RARITY_MULTIPLIER = 0.005
    RARITY_CAP = 0.0
    # Zero-frequency words are scored as if they had this weight (log(0) is -inf).
    MIN_FREQUENCY = 1e-12
    DIAGNOSTIC_LIMIT = 10

    def __init__(self, model, seed: Optional[int] = None):
        super().__init__(model, seed)
        # Scratch state, rebuilt from scratch on every scoring pass.
        self.slot_frequencies: List[Counter] = []
        self.word_frequencies: Dict[str, float] = {}

    def next_guess(self) -> Optional[str]:
        if self.model.first_guess:
            self.model.first_guess = False
            return OPENING_WORD

        scores = self.score_candidates()
        if not scores:
            log.info("No candidates remain")
            return None

        if log.isEnabledFor(logging.DEBUG):
            log.debug("Top candidates:\n" + format_scores(scores, self.DIAGNOSTIC_LIMIT))
        return scores[0].word

    # ---- scoring pipeline ----

    def _build_slot_frequencies(self, words: List[str]) -> List[Counter]:
        # Counter: an unseen letter counts 0
        counts = [Counter() for _ in range(len(self.model.slots))]
        for w in words:
            for i, ch in enumerate(w):
                counts[i][ch] += 1
        return counts

    def _build_word_frequencies(self, words: List[str]) -> Dict[str, float]:
        raw = np.array(
            [sum(self.slot_frequencies[i][ch] for i, ch in enumerate(w)) for w in words],
            dtype=float,
        )
        top = raw.max() if raw.size else 0.0
        if top > 0:
            raw = raw / top
        return dict(zip(words, raw.tolist()))

    def rarity_adjustment(self, frequencies) -> np.ndarray:
        """
        min(RARITY_BASE + RARITY_MULTIPLIER * ln(f), RARITY_CAP), elementwise.
        Never positive; bounded below through MIN_FREQUENCY.
        """
        f = np.maximum(np.asarray(frequencies, dtype=float), self.MIN_FREQUENCY)
        return np.minimum(self.RARITY_BASE + self.RARITY_MULTIPLIER * np.log(f), self.RARITY_CAP)

    def score_candidates(self) -> List[WordScore]:
        """
        Score every remaining candidate; best first. Equal scores keep the
        dictionary's iteration order (stable sort). Empty list if nothing
        remains.
        """
        candidates = self.model.remaining_candidates()
        words = list(candidates)
        if not words:
            self.slot_frequencies = []
            self.word_frequencies = {}
            return []

        self.slot_frequencies = self._build_slot_frequencies(words)
        self.word_frequencies = self._build_word_frequencies(words)

        word_freq = np.array([self.word_frequencies[w] for w in words], dtype=float)
        dup = np.array([count_duplicate_letters(w) for w in words], dtype=float) * self.DUPLICATE_PENALTY
        rarity = self.rarity_adjustment([candidates[w] for w in words])
        total = word_freq - dup + rarity

        order = np.argsort(-total, kind="stable")
        return [
            WordScore(words[i], float(word_freq[i]), float(dup[i]), float(rarity[i]), float(total[i]))
            for i in order
        ]


# The session's default guess selector.
GuessSelector = PositionalFreqSolver
