"""
The candidate pool: dictionary words still consistent with every
constraint applied so far.

Built once from the dictionary, then only ever shrinks. The single mutator
is discard_failing(), which the pruning engine calls once per round.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Set

from .validation import WORD_LENGTH, normalize_word


class CandidatePool:

    def __init__(self, words: Iterable[str], N: int = WORD_LENGTH):
        self.N = int(N)
        self._words: Set[str] = {normalize_word(w, self.N) for w in words}

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        # Sorted so that callers see a stable order across interpreter runs
        return iter(sorted(self._words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"CandidatePool(N={self.N}, size={len(self)})"

    @property
    def is_empty(self) -> bool:
        return not self._words

    def words(self) -> List[str]:
        """Sorted snapshot of the current members."""
        return sorted(self._words)

    def discard_failing(self, keep: Callable[[str], bool]) -> List[str]:
        """
        Remove every word for which `keep(word)` is False.

        Returns the removed words (sorted).
        """
        removed = sorted(w for w in self._words if not keep(w))
        self._words.difference_update(removed)
        return removed
