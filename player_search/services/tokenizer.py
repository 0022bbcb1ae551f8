"""Turn a free-text player query into search terms."""

from __future__ import annotations

import re
from typing import List

from player_search.services.normalizer import normalize_arabic, normalize_latin_strict

_CONJUNCTIONS = "ولكبف"
_STANDALONE_CONJUNCTION_RE = re.compile(rf"(^|\s)[{_CONJUNCTIONS}](?=\s|$)")
# Clips the leading letter of any word starting with a conjunction letter,
# genuine names included ("فارس" -> "ارس").
_ATTACHED_CONJUNCTION_RE = re.compile(rf"(^|\s)[{_CONJUNCTIONS}](?=[\u0600-\u06FFa-zA-Z])")
_SEPARATORS_RE = re.compile(r"[\s,،.؛;:!؟?()\[\]{}]+")
_SPACE_RE = re.compile(r"\s+")

MIN_TERM_LENGTH = 2

_RAW_STOP_WORDS = (
    # search intent
    "اريد", "ابي", "ابغى", "ابغا", "عندك", "فيه", "موجود", "اعطني", "ورني", "شوف",
    "ابحث", "بحث",
    "show", "find", "search", "get", "give", "want", "need", "have",
    # gallery nouns
    "صور", "صورة", "صوره", "ألبوم", "البوم", "الالبوم",
    "photos", "photo", "album", "pictures", "picture", "images", "image",
    # function words
    "عن", "من", "في", "على", "الى", "إلى", "مع", "او", "لكن", "هل",
    "ما", "لا", "نعم", "اي", "كل", "بعض", "هذا", "ذلك", "هنا", "هناك",
    "ال", "لل", "بال", "كال", "فال",
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "from", "by", "is", "are", "was", "were", "be", "been",
    "me", "my", "i", "you", "he", "she", "it", "we", "they",
)

STOP_WORDS = frozenset(normalize_arabic(word) for word in _RAW_STOP_WORDS)


def remove_conjunctions(text: str) -> str:
    """Drop standalone and prefixed Arabic conjunctions (و ل ك ب ف)."""
    cleaned = _STANDALONE_CONJUNCTION_RE.sub(" ", text or "")
    cleaned = _ATTACHED_CONJUNCTION_RE.sub(r"\1", cleaned)
    return _SPACE_RE.sub(" ", cleaned).strip()


def is_stop_word(token: str) -> bool:
    return normalize_arabic(token) in STOP_WORDS or normalize_latin_strict(token) in STOP_WORDS


def extract_search_terms(query: str) -> List[str]:
    """Split ``query`` into search terms, query order and duplicates kept.

    Falls back to the cleaned query as a single term when every token is
    filtered out, so the result is never empty; a whitespace-only query
    yields ``[""]``.
    """
    cleaned = remove_conjunctions(query)
    terms: List[str] = []
    for token in _SEPARATORS_RE.split(cleaned):
        token = token.strip()
        if not token or is_stop_word(token):
            continue
        if len(token) >= MIN_TERM_LENGTH:
            terms.append(token)

    if not terms:
        return [cleaned]
    return terms
