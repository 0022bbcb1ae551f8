"""Player search service with result caching used by the CLI and callers."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from cachetools import TTLCache

from player_search.catalog import PlayerCatalog
from player_search.config import settings
from player_search.services.ranking import (
    Candidate,
    FieldWeights,
    RankedCandidate,
    score_candidates,
)
from player_search.services.tokenizer import extract_search_terms

logger = logging.getLogger(__name__)


class PlayerSearchService:
    def __init__(
        self,
        catalog: PlayerCatalog,
        *,
        weights: Optional[FieldWeights] = None,
        threshold: Optional[float] = None,
        cache_ttl: Optional[int] = None,
        cache_size: Optional[int] = None,
    ) -> None:
        self.catalog = catalog
        self.weights = weights or settings.field_weights()
        self.threshold = settings.fuzzy_threshold if threshold is None else threshold
        self._results_cache: TTLCache[str, List[RankedCandidate]] = TTLCache(
            maxsize=max(1, cache_size or settings.search_cache_size),
            ttl=max(1, cache_ttl or settings.search_cache_ttl_seconds),
        )
        self._cache_revision = catalog.revision

    def search_scored(self, query: str) -> List[RankedCandidate]:
        if self.catalog.revision != self._cache_revision:
            # catalog was reloaded since these results were ranked
            self._results_cache.clear()
            self._cache_revision = self.catalog.revision

        cache_key = (query or "").strip()
        if cache_key in self._results_cache:
            logger.debug("player_search cache hit", extra={"query": cache_key})
            return list(self._results_cache[cache_key])

        ranked = score_candidates(cache_key, self.catalog.list(), self.weights, self.threshold)
        logger.info(
            f"player_search matches={len(ranked)}",
            extra={
                "query": cache_key,
                "terms": extract_search_terms(cache_key),
                "match_count": len(ranked),
            },
        )
        self._results_cache[cache_key] = ranked
        return list(ranked)

    def search(self, query: str) -> List[Candidate]:
        """Ranked players for ``query``; a blank query lists every player."""
        return [item.candidate for item in self.search_scored(query)]

    def get_player(self, player_id: int) -> Candidate:
        return self.catalog.get(player_id)

    def list_players(self, limit: int = 20, offset: int = 0) -> Dict[str, Any]:
        return self.catalog.paginate(limit=limit, offset=offset)
