from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from packages.engine.validation import WORD_LENGTH

log = logging.getLogger(__name__)

DEFAULT_DICT = "/usr/share/dict/words"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def is_eligible(token: str, N: int = WORD_LENGTH) -> bool:
    """Exactly N ASCII letters, checked before upper-casing ("ß" -> "SS")."""
    return len(token) == N and token.isascii() and token.isalpha()


def iter_words(lines: Iterable[str], N: int = WORD_LENGTH) -> Iterator[str]:
    """
    Yield eligible words from whitespace-delimited tokens, upper-cased.
    Duplicates are passed through; see load_dictionary.
    """
    for line in lines:
        for token in line.split():
            if is_eligible(token, N):
                yield token.upper()


def load_dictionary(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Load the N-letter words of a word list, upper-cased and de-duplicated
    (first occurrence order kept). Proper nouns are kept too ("Texas" ->
    "TEXAS"), like any other alphabetic token.
    """
    seen = set()
    out: List[str] = []
    for w in iter_words(read_lines(p), N):
        if w not in seen:
            seen.add(w)
            out.append(w)
    log.info("loaded %d %d-letter words from %s", len(out), N, p)
    return out
