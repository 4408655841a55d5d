# apps/cli/run.py
"""
CLI entry point for batch simulations of the advisor.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the words and instantiates the requested solver.
  3) Plays one simulated game per target word (all words, or a seeded sample),
     with a progress bar, and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, dictionary report, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from statistics import mean
from typing import List, Optional

from tqdm import tqdm

from packages.datasets import DEFAULT_DICT, load_dictionary, pretty_summary, validate_dictionary
from packages.engine import WORD_LENGTH
from packages.harness import WORDLE_MAX_TURNS, run_batch
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids

log = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    n = int(text)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {text}")
    return n


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="wordle-advisor: run solver simulations")
    ap.add_argument("--solver", default="letter_freq", choices=get_solver_ids(),
                    help="solver id (default: %(default)s)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length (e.g., 5 or 6)")
    ap.add_argument("--dict", default=DEFAULT_DICT, help="word list (default: %(default)s)")
    ap.add_argument("--sample", type=_positive_int,
                    help="play only this many targets (deterministic by seed)")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS,
                    help="turn budget per game; 0 for unlimited (default: %(default)s)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="log at INFO level")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch, and write outputs.
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    # Per-round pruning logs would drown the progress bar
    logging.getLogger("packages.engine").setLevel(logging.WARNING)

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(args.N, args.dict)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    # 2) Load words and instantiate the solver
    words = load_dictionary(args.dict, args.N)
    solver = create_solver(args.solver)
    max_turns = args.max_turns or None

    # 3) Choose targets (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample is not None and args.sample < len(words):
        cases = rng.sample(words, args.sample)
    else:
        cases = list(words)

    # 4) Play
    progress = tqdm(cases, ncols=80, desc="Running", unit="game", disable=args.no_progress)
    results = run_batch(solver, progress, words=words, N=args.N, max_turns=max_turns,
                        seed=args.seed)

    solved = [r for r in results if r["success"]]
    mean_guesses = mean(r["guesses"] for r in solved) if solved else None
    log.info("solved %d/%d", len(solved), len(results))

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=max_turns or 0)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "solved": len(solved),
        "mean_guesses": mean_guesses,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {len(solved)}/{len(results)}"
          + (f", {mean_guesses:.3f} guesses on average" if solved else ""))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
