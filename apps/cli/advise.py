# apps/cli/advise.py
"""
Interactive guess advisor.

Each round:
  1) Recommends the best guess from the words still possible.
  2) Asks for the feedback the puzzle gave, e.g. GYWWG
       G = right letter, right spot
       Y = right letter, wrong spot
       W = letter not in the word (beyond the G/Y copies)
  3) Prunes the candidate pool with the constraints that feedback implies.

Stops when the feedback is all G, or when no dictionary word fits anymore.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from packages.datasets import DEFAULT_DICT, load_dictionary, pretty_summary, validate_dictionary
from packages.engine import MalformedInputError, WORD_LENGTH, normalize_feedback
from packages.harness import AdvisorSession, SessionStatus
from packages.solvers import create_solver, get_solver_ids

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="wordle-advisor: suggest guesses from your feedback")
    ap.add_argument("dict", nargs="?", default=DEFAULT_DICT,
                    help="word list, one or more words per line (default: %(default)s)")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length (default: %(default)s)")
    ap.add_argument("--solver", default="letter_freq", choices=get_solver_ids(),
                    help="solver id (default: %(default)s)")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible tie-breaks")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="log pool sizes; repeat to log every derived constraint")
    return ap.parse_args(argv)


def _ask_feedback(session: AdvisorSession, ask: Callable[[str], str]) -> str:
    """Prompt until the reply is well-formed feedback for this word length."""
    example = "GYWWG" if session.N == 5 else "G" * session.N
    while True:
        reply = ask(f"Enter a response like {example}: ")
        try:
            return normalize_feedback(reply, session.N)
        except MalformedInputError as e:
            print(f"Sorry, I can't use that: {e}")


def play(session: AdvisorSession, ask: Optional[Callable[[str], str]] = None) -> SessionStatus:
    """
    Drive one interactive session to its end.

    `ask` prompts for one line of feedback (default: input).
    Returns the final status; ONGOING means the user gave up.
    """
    if ask is None:
        ask = input
    while True:
        if session.status is SessionStatus.EXHAUSTED:
            print("Either your word is not in my dictionary, or you made a mistake.")
            return session.status

        guess = session.recommend()
        print(f"You should guess {guess}")
        if len(session.pool) > 1:
            log.info("%d words still possible", len(session.pool))

        try:
            feedback = _ask_feedback(session, ask)
        except (KeyboardInterrupt, EOFError):
            print()
            print("Interrupted, giving up...")
            return session.status

        if session.record(guess, feedback) is SessionStatus.SOLVED:
            print(f"Yay, we got it in {session.turns} guesses!")
            return session.status


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_dictionary(args.N, args.dict)
    log.info(pretty_summary(rep))
    if not rep["exists"]:
        print(f"Cannot read dictionary {args.dict}", file=sys.stderr)
        return 2

    words = load_dictionary(args.dict, args.N)
    session = AdvisorSession(words, N=args.N, solver=create_solver(args.solver), seed=args.seed)
    status = play(session)
    return 0 if status is SessionStatus.SOLVED else 1


if __name__ == "__main__":
    sys.exit(main())
