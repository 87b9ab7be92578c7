from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from wordler.engine import DictionaryLoadError, WORD_LENGTH
from wordler.engine.validation import is_well_formed

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises DictionaryLoadError if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.exists():
        raise DictionaryLoadError(f"Dictionary file not found: {p}")
    try:
        return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot read dictionary file {p}: {e}") from e


def parse_frequency_lines(lines: Iterable[str], length: int = WORD_LENGTH) -> Dict[str, float]:
    """
    Parse "word frequency" lines into an insertion ordered word -> frequency
    dict. Words of any other length, or with characters outside A-Z, are
    skipped; words are uppercased. Blank lines are ignored. A word whose
    frequency is missing, not a number or negative raises DictionaryLoadError
    (the same rules ConstraintModel.initialize enforces).
    """
    out: Dict[str, float] = {}
    for lineno, line in enumerate(lines, start=1):
        parts = line.split()
        if not parts:
            continue
        word = parts[0]
        if not is_well_formed(word, length):
            continue
        if len(parts) < 2:
            raise DictionaryLoadError(f"Line {lineno}: missing frequency for {word!r}")
        try:
            weight = float(parts[1])
        except ValueError as e:
            raise DictionaryLoadError(f"Line {lineno}: bad frequency {parts[1]!r} for {word!r}") from e
        if weight < 0:
            raise DictionaryLoadError(f"Line {lineno}: negative frequency {parts[1]!r} for {word!r}")
        out[word.upper()] = weight
    return out


def read_frequency_map(p: Path | str, length: int = WORD_LENGTH) -> Dict[str, float]:
    """
    Load a word -> frequency file (one "word frequency" pair per line),
    e.g. dict/dict-with-frequencies.txt. Raises DictionaryLoadError on failure.
    """
    freqs = parse_frequency_lines(read_lines(p), length)
    log.info(f"Loaded {len(freqs)} {length}-letter words from {p}")
    return freqs


def read_words(p: Path | str) -> List[str]:
    """One word per line (answer lists), uppercased, blanks dropped."""
    return [w.strip().upper() for w in read_lines(p) if w.strip()]
