# apps/cli/run.py
"""
CLI entry point for wordler simulation runs.

This script:
  1) Validates the word -> frequency dictionary (prints counts + SHA).
  2) Loads it, picks the answers to play (an answers file, or the dictionary
     itself) and simulates one session per answer with the requested solver.
  3) Writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, dictionary hash, git commit, outcome counts
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordler.datasets import validate_frequency_file, pretty_summary, read_frequency_map, read_words
from wordler.engine import DictionaryLoadError, validate_guess
from wordler.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordler.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordler.solvers import DEFAULT_SOLVER, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordler: simulate solver sessions")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--dict", dest="dict_path", default="dict/dict-with-frequencies.txt",
                    help="word -> frequency file, one 'word frequency' pair per line")
    ap.add_argument("--answers",
                    help="answers to play, one per line (default: every dictionary word)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="DEBUG shows the board and top candidates every turn")
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_frequency_file(args.dict_path)
    print(pretty_summary(rep))

    # 2) Load (fatal on failure: nothing to play with)
    try:
        source = read_frequency_map(args.dict_path)
        answers = read_words(args.answers) if args.answers else list(source)
    except DictionaryLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # Answers the simulator cannot score are dropped, not fatal
    playable = [w for w in answers if validate_guess(w)]
    if len(playable) != len(answers):
        print(f"Skipped {len(answers) - len(playable)} malformed answer(s)")
    answers = playable

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(answers)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        results.append(run_case(source, ans, solver_id=args.solver,
                                max_turns=args.max_turns, seed=per_seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    summary = summarize(results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "solver_id": args.solver,
        **summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['num_cases']} "
          f"(mean guesses {summary['mean_guesses']}, gave up {summary['given_up']}, "
          f"out of turns {summary['exhausted']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
