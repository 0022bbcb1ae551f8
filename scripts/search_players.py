"""Search the player catalog from the command line."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from player_search.catalog import load_catalog
from player_search.config import settings
from player_search.logging import configure_logging
from player_search.services.search import PlayerSearchService
from player_search.services.tokenizer import extract_search_terms


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query", help="Free-text query, Arabic or English")
    parser.add_argument("--catalog", type=Path, default=None, help="Path to a players YAML file")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument(
        "--terms",
        action="store_true",
        help="Print the extracted search terms instead of results",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(settings.log_level)

    if args.terms:
        print(json.dumps(extract_search_terms(args.query), ensure_ascii=False))
        return

    service = PlayerSearchService(load_catalog(args.catalog))
    results: List[Dict[str, Any]] = [
        {
            "id": item.candidate.id,
            "name_arabic": item.candidate.name_arabic,
            "name_english": item.candidate.name_english,
            "team_name": item.candidate.team_name,
            "score": item.score,
        }
        for item in service.search_scored(args.query)[: max(1, args.limit)]
    ]
    print(json.dumps(results, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
