"""Weighted bilingual ranking of player candidates against a query."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from player_search.services.similarity import DEFAULT_THRESHOLD, fuzzy_match
from player_search.services.tokenizer import extract_search_terms


@dataclass(frozen=True)
class Candidate:
    id: int
    name_arabic: str = ""
    name_english: str = ""
    alternative_names: Tuple[str, ...] = ()
    team_name: str = ""
    keywords: Tuple[str, ...] = ()
    position: str = ""
    description: str = ""
    created_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return self.name_arabic or self.name_english


@dataclass(frozen=True)
class FieldWeights:
    name: int = 10
    alias: int = 8
    keyword: int = 7
    team: int = 5


DEFAULT_WEIGHTS = FieldWeights()


@dataclass(frozen=True)
class SearchField:
    name: str
    text: str
    weight: int


@dataclass(frozen=True)
class RankedCandidate:
    candidate: Candidate
    score: int


def searchable_fields(
    candidate: Candidate,
    weights: FieldWeights = DEFAULT_WEIGHTS,
) -> List[SearchField]:
    """Weighted text fields of a candidate; every keyword is its own field."""
    fields = [
        SearchField("name_arabic", candidate.name_arabic, weights.name),
        SearchField("name_english", candidate.name_english, weights.name),
        SearchField("alternative_names", " ".join(candidate.alternative_names), weights.alias),
        SearchField("team_name", candidate.team_name, weights.team),
    ]
    fields.extend(
        SearchField("keyword", keyword, weights.keyword) for keyword in candidate.keywords
    )
    return fields


def score_candidate(
    candidate: Candidate,
    terms: Iterable[str],
    weights: FieldWeights = DEFAULT_WEIGHTS,
    threshold: float = DEFAULT_THRESHOLD,
) -> int:
    """Sum the weight of every field each term fuzzily matches.

    A field scores once per matching term.
    """
    fields = searchable_fields(candidate, weights)
    total = 0
    for term in terms:
        for field in fields:
            if fuzzy_match(term, field.text, threshold):
                total += field.weight
    return total


def score_candidates(
    query: str,
    candidates: Sequence[Candidate],
    weights: FieldWeights = DEFAULT_WEIGHTS,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[RankedCandidate]:
    """Score, filter and stably sort ``candidates`` for ``query``.

    A blank query returns every candidate with score 0 in input order.
    """
    if not query or not query.strip():
        return [RankedCandidate(candidate, 0) for candidate in candidates]

    terms = extract_search_terms(query)
    if not any(term.strip() for term in terms):
        return []

    scored = [
        RankedCandidate(candidate, score_candidate(candidate, terms, weights, threshold))
        for candidate in candidates
    ]
    matched = [item for item in scored if item.score > 0]
    return sorted(matched, key=lambda item: item.score, reverse=True)


def rank_candidates(
    query: str,
    candidates: Sequence[Candidate],
    weights: FieldWeights = DEFAULT_WEIGHTS,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[Candidate]:
    """Candidates matching ``query``, best first, input order on ties."""
    return [item.candidate for item in score_candidates(query, candidates, weights, threshold)]
