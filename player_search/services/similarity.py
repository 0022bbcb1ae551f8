"""Fuzzy string matching between a search term and a player field."""

from __future__ import annotations

from typing import List

from rapidfuzz.distance import Levenshtein

from player_search.services.normalizer import match_form

DEFAULT_THRESHOLD = 0.7
MIN_WORD_LENGTH = 2

WHOLE_CONTAINMENT_SIMILARITY = 0.9
WORD_CONTAINMENT_SIMILARITY = 0.8


def levenshtein_distance(first: str, second: str) -> int:
    """Single-character insert/delete/substitute edit distance."""
    return Levenshtein.distance(first, second)


def calculate_similarity(first: str, second: str) -> float:
    """Similarity in [0, 1] with containment shortcuts before edit distance."""
    longer, shorter = (first, second) if len(first) >= len(second) else (second, first)
    if not longer or first == second:
        return 1.0
    if shorter and shorter in longer:
        return WHOLE_CONTAINMENT_SIMILARITY

    longer_words = longer.split()
    for short_word in shorter.split():
        for long_word in longer_words:
            if short_word in long_word or long_word in short_word:
                return WORD_CONTAINMENT_SIMILARITY

    distance = levenshtein_distance(longer, shorter)
    return (len(longer) - distance) / len(longer)


def _words(value: str) -> List[str]:
    return [word for word in value.split() if len(word) >= MIN_WORD_LENGTH]


def fuzzy_match(term: str, field: str, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True when ``term`` matches ``field`` closely enough.

    Checks, in order: containment of the whole normalized term, word-level
    containment in either direction, then per-word similarity against
    ``threshold``. An empty term or field never matches.
    """
    search = match_form(term)
    text = match_form(field)
    if not search or not text:
        return False
    if search in text:
        return True

    search_words = _words(search)
    text_words = _words(text)
    for search_word in search_words:
        for text_word in text_words:
            if search_word in text_word or text_word in search_word:
                return True

    for search_word in search_words:
        for text_word in text_words:
            if calculate_similarity(search_word, text_word) >= threshold:
                return True
    return False
