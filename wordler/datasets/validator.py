"""
Dictionary validator for wordler.

What this module does:
- Validate a word -> frequency file (one "word frequency" pair per line).
- Count words of the requested length, skipped words of other lengths,
  malformed lines (non A-Z word, missing or non-numeric frequency) and
  negative weights; detect duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordler.datasets import validate_frequency_file, pretty_summary
    rep = validate_frequency_file("dict/dict-with-frequencies.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from wordler.engine import WORD_LENGTH
from wordler.engine.validation import is_well_formed


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FrequencyFileReport:
    """Per-file diagnostics and metadata."""
    path: str                # file path (as given)
    N: int                   # word length checked
    exists: bool             # did the file exist on disk?
    count: int = 0           # number of VALID words of length N
    unique_count: int = 0    # unique valid words
    other_length: int = 0    # lines holding a word of another length (skipped on load)
    invalid_lines: int = 0   # malformed lines
    negative_weights: int = 0
    sha256: str = ""         # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_line(line: str, N: int, rep: FrequencyFileReport, seen: set) -> None:
    parts = line.split()
    if not parts:
        return
    word = parts[0]
    if len(word) != N:
        rep.other_length += 1
        return
    if not is_well_formed(word, N) or len(parts) != 2:
        rep.invalid_lines += 1
        return
    try:
        weight = float(parts[1])
    except ValueError:
        rep.invalid_lines += 1
        return
    if weight < 0:
        rep.negative_weights += 1
    rep.count += 1
    seen.add(word.upper())


# -----------------------------
# Public API
# -----------------------------

def validate_frequency_file(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word -> frequency file for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see FrequencyFileReport) with counts,
        SHA-256, `passed` (strict: non-empty, no malformed lines, no negative
        weights, no duplicates) and `issues` (list of strings).
    """
    p = Path(path)
    rep = FrequencyFileReport(path=str(path), N=N, exists=p.exists())

    if not rep.exists:
        rep.issues.append(f"dictionary file not found: {path}")
        return asdict(rep)

    rep.sha256 = _sha256_file(p)

    seen: set = set()
    try:
        with p.open("r", encoding="utf-8") as f:
            for raw in f:
                _check_line(raw, N, rep, seen)
    except UnicodeDecodeError as e:
        rep.issues.append(f"dictionary is not valid UTF-8: {e}")
        return asdict(rep)

    rep.unique_count = len(seen)

    if rep.count == 0:
        rep.issues.append(f"dictionary contains 0 valid {N}-letter words")
    if rep.invalid_lines:
        rep.issues.append(f"dictionary has {rep.invalid_lines} invalid line(s)")
    if rep.negative_weights:
        rep.issues.append(f"dictionary has {rep.negative_weights} negative weight(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("dictionary contains duplicate words")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123...) | skipped=8123 | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| skipped={report['other_length']} | invalid={report['invalid_lines']} | {status}"
    )
