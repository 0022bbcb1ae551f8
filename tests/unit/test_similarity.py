import pytest

from player_search.services.similarity import (
    calculate_similarity,
    fuzzy_match,
    levenshtein_distance,
)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("", "", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("mohannad", "mohanad", 1),
        ("flaw", "lawn", 2),
        ("مهند", "مهند", 0),
    ],
)
def test_levenshtein_distance(first, second, expected):
    assert levenshtein_distance(first, second) == expected
    assert levenshtein_distance(second, first) == expected


def test_calculate_similarity_shortcuts():
    assert calculate_similarity("", "") == 1.0
    assert calculate_similarity("fares", "fares") == 1.0
    assert calculate_similarity("alnasser", "nasser") == 0.9
    assert calculate_similarity("al nasser", "nasser fc") == 0.8


def test_calculate_similarity_uses_edit_distance():
    assert calculate_similarity("mohannad", "mohanad") == pytest.approx(7 / 8)
    assert calculate_similarity("abcd", "wxyz") == 0.0


def test_fuzzy_match_normalized_substring():
    assert fuzzy_match("mohannad", "Mohannad")
    assert fuzzy_match("مهند", "مُهَنَّد")
    assert fuzzy_match("ارس", "فارس")


def test_fuzzy_match_word_containment():
    assert fuzzy_match("Nasser Al", "alnasser")


def test_fuzzy_match_tolerates_small_typos():
    assert fuzzy_match("Mohanad", "Mohannad")
    assert fuzzy_match("Muhanad", "Mohannad")
    assert not fuzzy_match("Xavier", "Mohannad")


def test_fuzzy_match_never_matches_empty():
    assert not fuzzy_match("", "Mohannad")
    assert not fuzzy_match("mohannad", "")
    assert not fuzzy_match("   ", "anything")
    assert not fuzzy_match("", "")


@pytest.mark.parametrize("value", ["مهند", "Mohannad", "#9", "team falcons", "José"])
@pytest.mark.parametrize("threshold", [0.0, 0.5, 0.7, 1.0])
def test_fuzzy_match_self(value, threshold):
    assert fuzzy_match(value, value, threshold)


@pytest.mark.parametrize(
    ("term", "field"),
    [("Mohanad", "Mohannad"), ("faris", "fares"), ("nasr", "nasser"), ("Xavier", "Mohannad")],
)
def test_fuzzy_match_is_monotone_in_threshold(term, field):
    thresholds = [1.0, 0.9, 0.8, 0.7, 0.5, 0.3, 0.0]
    results = [fuzzy_match(term, field, threshold) for threshold in thresholds]
    first_match = results.index(True) if True in results else len(results)
    assert all(results[first_match:])
