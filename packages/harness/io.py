"""
I/O utilities for batch simulation runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, dictionary report and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, status, success, guesses, time_ms,
      guess_1, feedback_1, ..., guess_<max_turns>, feedback_<max_turns>

    `max_turns` is the number of guess/feedback column pairs; longer games
    (no turn budget) widen the table to their own length.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    width = max([max_turns] + [len(r.get("history", [])) for r in results])
    fields = ["solver", "answer", "status", "success", "guesses", "time_ms"]
    for i in range(1, width + 1):
        fields += [f"guess_{i}", f"feedback_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "status": r.get("status", ""),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, width + 1):
                if i <= len(hist):
                    g, fb = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"feedback_{i}"] = fb
                else:
                    row[f"guess_{i}"] = ""
                    row[f"feedback_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, N, dict, seed, sample, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - num_cases, solved, mean_guesses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
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
