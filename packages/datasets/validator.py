"""
Dictionary validator.

What this module does:
- Scan a word list (whitespace-delimited tokens) for a word length N.
- Count tokens, eligible words (A-Z only, exact length N) and unique words.
- Compute SHA-256 of the raw file for run manifests.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import is_eligible


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    tokens: int          # whitespace-delimited tokens read
    count: int           # eligible tokens (length N, letters only)
    unique_count: int    # eligible words after upper-casing and dedupe
    rejected: int        # tokens of another length or with non-letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(N: int, path: str) -> Dict:
    """
    Validate the word list at `path` for words of length N.

    `passed` requires the file to exist and hold at least one eligible word.
    Rejected tokens are normal for a general-purpose dictionary and are only
    reported, not failed on.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(N, path, False, 0, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    tokens = 0
    eligible: List[str] = []
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            for token in line.split():
                tokens += 1
                if is_eligible(token, N):
                    eligible.append(token.upper())

    unique = set(eligible)
    issues: List[str] = []
    if not eligible:
        issues.append(f"dictionary contains 0 valid {N}-letter words")
    if len(unique) != len(eligible):
        issues.append(f"dictionary has {len(eligible) - len(unique)} duplicate word(s) after upper-casing")

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        tokens=tokens,
        count=len(eligible),
        unique_count=len(unique),
        rejected=tokens - len(eligible),
        sha256=_sha256_file(p),
        passed=bool(eligible),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | dict=/usr/share/dict/words | words=6000 (uniq=5900, rejected=98000, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dict={report['path']} "
        f"| words={report['count']} (uniq={report['unique_count']}, "
        f"rejected={report['rejected']}, sha={sha}) | {status}"
    )
