import random
from collections import Counter

import pytest
from packages.engine import CandidatePool, EmptyPoolPrecondition
from packages.solvers import create_solver, get_solver_ids
from packages.solvers.letter_freq import best_words, letter_frequencies, recommend_guess, score_word


def test_frequencies_count_repeats_but_score_counts_distinct():
    freq = letter_frequencies(["EERIE"])
    assert freq == Counter({"E": 3, "R": 1, "I": 1})
    assert score_word("EERIE", freq) == 5

def test_recommend_prefers_common_distinct_letters():
    pool = CandidatePool(["SLATE", "SLEET", "STEEL"])
    # S3 L3 A1 T3 E5: SLATE=15, SLEET=STEEL=14
    assert best_words(pool) == ["SLATE"]
    assert recommend_guess(pool, random.Random(0)) == "SLATE"

def test_recommend_does_not_mutate_pool():
    pool = CandidatePool(["SLATE", "SLEET", "STEEL"])
    recommend_guess(pool, random.Random(1))
    assert pool.words() == ["SLATE", "SLEET", "STEEL"]

def test_tie_break_picks_every_tied_word():
    pool = CandidatePool(["ABCDE", "EDCBA", "FGHIJ"])
    assert best_words(pool) == ["ABCDE", "EDCBA"]
    rng = random.Random(2024)
    picks = Counter(recommend_guess(pool, rng) for _ in range(400))
    assert set(picks) == {"ABCDE", "EDCBA"}
    assert min(picks.values()) > 100

def test_same_seed_same_pick():
    words = ["ABCDE", "EDCBA", "DECAB", "BADCE"]
    a = [recommend_guess(CandidatePool(words), random.Random(7)) for _ in range(5)]
    b = [recommend_guess(CandidatePool(reversed(words)), random.Random(7)) for _ in range(5)]
    assert a == b

def test_empty_pool_is_a_caller_error():
    with pytest.raises(EmptyPoolPrecondition):
        recommend_guess(CandidatePool([]), random.Random(0))
    with pytest.raises(AssertionError):
        recommend_guess([])

def test_registry():
    assert get_solver_ids() == ["letter_freq", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("entropy")

@pytest.mark.parametrize("solver_id", ["letter_freq", "random_consistent"])
def test_solvers_pick_from_candidates(solver_id):
    solver = create_solver(solver_id)
    solver.reset(N=5, seed=3)
    pool = CandidatePool(["CRANE", "TRACE", "GRACE"])
    state = {"turn": 1, "history": [], "candidates": pool, "N": 5}
    assert solver.next_guess(state) in pool
    with pytest.raises(EmptyPoolPrecondition):
        solver.next_guess(dict(state, candidates=CandidatePool([])))
