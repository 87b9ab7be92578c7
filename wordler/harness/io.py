"""Run outputs: per-game CSV rows, the JSON manifest and the outcome summary."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    One row per game: solver, answer, success, outcome, guesses, time_ms,
    then guess_i/patt_i pairs up to `max_turns` (blank past the last turn).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "outcome", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "outcome": r.get("outcome", ""),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # turns beyond max_turns never happen; missing turns stay blank
            history = list(r.get("history", []))[:max_turns]
            history += [("", "")] * (max_turns - len(history))
            for turn, (guess, pattern) in enumerate(history, start=1):
                row[f"guess_{turn}"] = guess
                row[f"patt_{turn}"] = pattern

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` as indented JSON, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Outcome counts and mean guesses over solved games."""
    solved = [r for r in results if r["success"]]
    counts = {"num_cases": len(results), "solved": len(solved), "given_up": 0, "exhausted": 0}
    for r in results:
        if r.get("outcome") in ("given_up", "exhausted"):
            counts[r["outcome"]] += 1
    counts["mean_guesses"] = (
        round(sum(r["guesses"] for r in solved) / len(solved), 3) if solved else None
    )
    return counts


def timestamp_id() -> str:
    """UTC run id for output file names, e.g. 20261016T091500Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash for the manifest, or 'unknown' outside a git checkout."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
