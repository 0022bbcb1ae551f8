"""Player catalog that supplies search candidates."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from player_search.config import settings
from player_search.errors import CatalogConfigError, PlayerNotFoundError
from player_search.services.normalizer import normalize
from player_search.services.ranking import Candidate

SortOption = Literal["name-asc", "name-desc", "date-asc", "date-desc"]

MAX_PAGE_SIZE = 100


def parse_string_list(raw: Any, *, allow_plain_text: bool = False) -> Tuple[str, ...]:
    """Coerce a list or a JSON-encoded array into a tuple of strings.

    Anything else becomes an empty tuple, except a non-JSON string when
    ``allow_plain_text`` is set, which is kept as a single entry.
    """
    value = raw
    if isinstance(raw, str):
        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            text = raw.strip()
            return (text,) if allow_plain_text and text else ()
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(item).strip() for item in value if item is not None and str(item).strip())


class PlayerRecord(BaseModel):
    """One raw player entry, as stored by the data store or a catalog file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name_arabic: str = Field(default="", alias="nameArabic")
    name_english: str = Field(default="", alias="nameEnglish")
    alternative_names: Tuple[str, ...] = Field(default=(), alias="alternativeNames")
    team_name: str = Field(default="", alias="teamName")
    keywords: Tuple[str, ...] = ()
    position: str = ""
    description: str = ""
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @field_validator(
        "name_arabic", "name_english", "team_name", "position", "description", mode="before"
    )
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("alternative_names", mode="before")
    @classmethod
    def _parse_alternative_names(cls, value: Any) -> Tuple[str, ...]:
        return parse_string_list(value, allow_plain_text=True)

    @field_validator("keywords", mode="before")
    @classmethod
    def _parse_keywords(cls, value: Any) -> Tuple[str, ...]:
        return parse_string_list(value)

    def to_candidate(self) -> Candidate:
        return Candidate(
            id=self.id,
            name_arabic=self.name_arabic,
            name_english=self.name_english,
            alternative_names=self.alternative_names,
            team_name=self.team_name,
            keywords=self.keywords,
            position=self.position,
            description=self.description,
            created_at=self.created_at,
        )


def _recency_key(candidate: Candidate) -> Tuple[bool, float]:
    if candidate.created_at is None:
        return (True, 0.0)
    return (False, -candidate.created_at.timestamp())


def sort_players(players: Sequence[Candidate], sort_by: SortOption) -> List[Candidate]:
    if sort_by in ("name-asc", "name-desc"):
        return sorted(
            players,
            key=lambda player: normalize(player.display_name),
            reverse=sort_by == "name-desc",
        )
    if sort_by in ("date-asc", "date-desc"):
        dated = [player for player in players if player.created_at is not None]
        undated = [player for player in players if player.created_at is None]
        ordered = sorted(
            dated,
            key=lambda player: player.created_at.timestamp(),  # type: ignore[union-attr]
            reverse=sort_by == "date-desc",
        )
        return ordered + undated if sort_by == "date-desc" else undated + ordered
    return list(players)


def filter_by_keyword(players: Sequence[Candidate], keyword: str) -> List[Candidate]:
    needle = normalize(keyword)
    if not needle:
        return list(players)
    return [
        player
        for player in players
        if any(needle in normalize(item) for item in player.keywords)
    ]


class PlayerCatalog:
    def __init__(self, catalog_path: Path) -> None:
        self.catalog_path = catalog_path
        self._players: Dict[int, Candidate] = {}
        self._ordered: List[Candidate] = []
        self.revision = 0

    @classmethod
    def from_records(cls, records: Sequence[Dict[str, Any]]) -> "PlayerCatalog":
        catalog = cls(Path("<memory>"))
        catalog._index(records)
        return catalog

    def load(self) -> None:
        if not self.catalog_path.exists():
            raise CatalogConfigError(f"Player catalog not found: {self.catalog_path}")

        try:
            raw = yaml.safe_load(self.catalog_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise CatalogConfigError(
                f"Player catalog is not valid YAML: {self.catalog_path}"
            ) from exc
        players = raw.get("players", []) if isinstance(raw, dict) else []
        self._index(players or [])

    def _index(self, records: Sequence[Any]) -> None:
        parsed: Dict[int, Candidate] = {}
        for entry in records:
            try:
                candidate = PlayerRecord.model_validate(entry).to_candidate()
            except ValidationError as exc:
                raise CatalogConfigError(f"Invalid player definition: {entry}") from exc
            if candidate.id in parsed:
                raise CatalogConfigError(f"Duplicate player id={candidate.id}")
            parsed[candidate.id] = candidate

        self._players = parsed
        self._ordered = sorted(parsed.values(), key=_recency_key)
        self.revision += 1

    def get(self, player_id: int) -> Candidate:
        if player_id not in self._players:
            raise PlayerNotFoundError(f"Unknown player id={player_id}")
        return self._players[player_id]

    def list(self) -> List[Candidate]:
        """Players newest first; undated players keep file order at the end."""
        return list(self._ordered)

    def paginate(self, limit: int = 20, offset: int = 0) -> Dict[str, Any]:
        limit = max(1, min(limit, MAX_PAGE_SIZE))
        offset = max(0, offset)
        page = self._ordered[offset : offset + limit]
        total = len(self._ordered)
        return {"players": page, "total": total, "has_more": offset + limit < total}

    def __len__(self) -> int:
        return len(self._ordered)


def load_catalog(catalog_path: Path | None = None) -> PlayerCatalog:
    catalog = PlayerCatalog(catalog_path or settings.catalog_path)
    catalog.load()
    return catalog
