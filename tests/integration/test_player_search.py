from pathlib import Path

import pytest

from player_search.catalog import load_catalog
from player_search.services.search import PlayerSearchService

SAMPLE_CATALOG = Path(__file__).resolve().parents[2] / "players.yaml"


@pytest.fixture
def service() -> PlayerSearchService:
    return PlayerSearchService(load_catalog(SAMPLE_CATALOG))


def _ids(results):
    return [item.candidate.id for item in results]


def test_arabic_name_query(service):
    results = service.search_scored("مهند")
    assert _ids(results) == [1]
    assert results[0].score >= 10


def test_arabic_name_with_tashkeel(service):
    assert _ids(service.search_scored("مُهَنَّد")) == [1]


def test_english_name_query(service):
    results = service.search_scored("mohannad")
    assert _ids(results) == [1]
    assert results[0].score >= 10


def test_empty_query_returns_catalog_in_recency_order(service):
    players = service.search("")
    assert [player.id for player in players] == [1, 2, 3]


def test_stop_word_only_query_matches_nothing(service):
    assert service.search("صور له") == []


def test_conjunction_query_returns_both_players(service):
    results = service.search_scored("فارس و ناصر")
    assert set(_ids(results)) == {2, 3}
    scores = [item.score for item in results]
    assert scores == sorted(scores, reverse=True)


def test_misspelled_latin_name(service):
    assert _ids(service.search_scored("Mohanad")) == [1]
    assert _ids(service.search_scored("Muhanad")) == [1]
    assert service.search("Xavier") == []


def test_natural_language_query(service):
    results = service.search_scored("show me photos of Nasser")
    assert _ids(results) == [3]


def test_keyword_query(service):
    assert _ids(service.search_scored("playmaker")) == [2]
