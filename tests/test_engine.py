import pytest
from packages.engine import (
    MalformedInputError, score, normalize_word, normalize_feedback, validate_round, is_solved,
    PositionConstraint, LetterCountConstraint,
    derive_position_constraints, derive_letter_count_constraints, derive_constraints,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","WGYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GGWWW"),
    ("cools","scoop","YYGWY"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YYWWG"),
    ("stare","crane","WWGYG"),
    ("crane","trace","YGGWG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","WGGGYY"),
    ("little","letter","GWGGWY"),
    ("planet","palate","GYYWYY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_length_mismatch():
    with pytest.raises(MalformedInputError):
        score("crane", "cranes")

# --- input normalization ---
def test_normalize_word_and_feedback():
    assert normalize_word(" crane\n", 5) == "CRANE"
    assert normalize_feedback("gy-wG", 5) == "GYWWG"
    assert validate_round("speed", "wggww") == ("SPEED", "WGGWW")

@pytest.mark.parametrize("guess,feedback", [
    ("CRANE", "GGG"),       # length mismatch
    ("CR4NE", "GGGGG"),     # non-letter in guess
    ("CRANE", "GGXGG"),     # unknown feedback symbol
    ("", ""),
])
def test_validate_round_rejects_malformed(guess, feedback):
    with pytest.raises(MalformedInputError):
        validate_round(guess, feedback)

def test_malformed_error_is_a_value_error():
    with pytest.raises(ValueError):
        normalize_word("abc", 5)

def test_is_solved():
    assert is_solved("GGGGG")
    assert not is_solved("GGGGY")
    assert not is_solved("")

# --- constraint semantics ---
def test_position_constraint_semantics():
    assert PositionConstraint(0, "R", True).satisfies("ROBOT") is True
    assert PositionConstraint(0, "R", False).satisfies("ROBOT") is False
    assert PositionConstraint(2, "A", True).satisfies("CRANE") is True
    assert PositionConstraint(2, "R", True).satisfies("CRANE") is False

def test_letter_count_constraint_semantics():
    assert LetterCountConstraint(2, "O", True).satisfies("ROBOT")
    assert not LetterCountConstraint(3, "O", True).satisfies("ROBOT")
    assert LetterCountConstraint(2, "O", False).satisfies("ROBOT")
    assert not LetterCountConstraint(1, "O", False).satisfies("ROBOT")
    assert LetterCountConstraint(0, "Z", False).satisfies("ROBOT")

def test_constraints_are_values():
    assert PositionConstraint(1, "E", True) == PositionConstraint(1, "E", True)
    assert PositionConstraint(1, "E", True) != PositionConstraint(1, "E", False)
    assert len({LetterCountConstraint(1, "E", True), LetterCountConstraint(1, "E", True),
                LetterCountConstraint(1, "E", False)}) == 2
    with pytest.raises(AttributeError):
        PositionConstraint(1, "E", True).index = 2

@pytest.mark.parametrize("constraint,text", [
    (PositionConstraint(2, "R", True), "Position 2 must be a R."),
    (PositionConstraint(0, "C", False), "Position 0 may not be C."),
    (LetterCountConstraint(1, "E", True), "Word must contain at least 1 copy of E."),
    (LetterCountConstraint(2, "E", False), "Word must contain at most 2 copies of E."),
    (LetterCountConstraint(0, "N", False), "Word must contain at most 0 copies of N."),
])
def test_constraint_rendering(constraint, text):
    assert str(constraint) == text

# --- derivation ---
def test_derive_position_constraints():
    assert derive_position_constraints("CRANE", "YGGWG") == {
        PositionConstraint(0, "C", False),
        PositionConstraint(1, "R", True),
        PositionConstraint(2, "A", True),
        PositionConstraint(4, "E", True),
    }

def test_derive_counts_double_letter_one_exact_one_absent():
    # SPEED against a word with one E (at index 2), e.g. OPERA
    assert score("SPEED", "OPERA") == "WGGWW"
    positions, counts = derive_constraints("SPEED", "WGGWW")
    assert positions == {PositionConstraint(1, "P", True), PositionConstraint(2, "E", True)}
    assert counts == {
        LetterCountConstraint(0, "S", False),
        LetterCountConstraint(1, "P", True),
        LetterCountConstraint(1, "E", True),
        LetterCountConstraint(1, "E", False),
        LetterCountConstraint(0, "D", False),
    }
    assert all(c.satisfies("OPERA") for c in positions | counts)

def test_derive_counts_two_confirmed_copies():
    # Two E's confirmed, the third marked W: exactly two
    counts = derive_letter_count_constraints("GEESE", "WGYWW")
    assert LetterCountConstraint(2, "E", True) in counts
    assert LetterCountConstraint(2, "E", False) in counts   # the third E was W
    assert LetterCountConstraint(0, "G", False) in counts
    assert LetterCountConstraint(0, "S", False) in counts

def test_derive_counts_all_absent():
    counts = derive_letter_count_constraints("EERIE", "WWWWW")
    assert counts == {
        LetterCountConstraint(0, "E", False),
        LetterCountConstraint(0, "R", False),
        LetterCountConstraint(0, "I", False),
    }

def test_derive_all_exact():
    positions, counts = derive_constraints("EERIE", "GGGGG")
    assert len(positions) == 5
    assert counts == {LetterCountConstraint(3, "E", True), LetterCountConstraint(1, "R", True),
                      LetterCountConstraint(1, "I", True)}

def test_derive_rejects_malformed_round():
    with pytest.raises(MalformedInputError):
        derive_constraints("SPEED", "WGGW")
    with pytest.raises(MalformedInputError):
        derive_letter_count_constraints("SPEED", "WGGWQ")

def test_derive_rejects_round_of_wrong_length():
    with pytest.raises(MalformedInputError):
        derive_constraints("CRANES", "WWWWWG")
    with pytest.raises(MalformedInputError):
        derive_position_constraints("CRANES", "WWWWWG")
    positions, _ = derive_constraints("CRANES", "WWWWWG", N=6)
    assert positions == {PositionConstraint(5, "S", True)}

@pytest.mark.parametrize("make", [
    lambda: PositionConstraint(0, "r", True),
    lambda: PositionConstraint(-1, "R", True),
    lambda: PositionConstraint(0, "RR", True),
    lambda: LetterCountConstraint(1, "e", True),
    lambda: LetterCountConstraint(-1, "E", False),
])
def test_constraint_fields_are_checked(make):
    with pytest.raises(MalformedInputError):
        make()

def test_normalize_word_checks_before_upper_casing():
    with pytest.raises(MalformedInputError):
        normalize_word("straß", 6)
    with pytest.raises(MalformedInputError):
        normalize_word("naïve", 5)
