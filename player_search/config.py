"""Typed configuration for player search."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from player_search.services.ranking import FieldWeights


class Settings(BaseSettings):
    catalog_path: Path = Field(default=Path("players.yaml"), alias="PLAYER_SEARCH_CATALOG")
    fuzzy_threshold: float = Field(default=0.7, ge=0.0, le=1.0, alias="PLAYER_SEARCH_THRESHOLD")
    name_weight: int = Field(default=10, gt=0, alias="PLAYER_SEARCH_NAME_WEIGHT")
    alias_weight: int = Field(default=8, gt=0, alias="PLAYER_SEARCH_ALIAS_WEIGHT")
    keyword_weight: int = Field(default=7, gt=0, alias="PLAYER_SEARCH_KEYWORD_WEIGHT")
    team_weight: int = Field(default=5, gt=0, alias="PLAYER_SEARCH_TEAM_WEIGHT")
    search_cache_ttl_seconds: int = Field(default=600, alias="PLAYER_SEARCH_CACHE_TTL_SECONDS")
    search_cache_size: int = Field(default=1024, alias="PLAYER_SEARCH_CACHE_SIZE")
    log_level: str = Field(default="INFO", alias="PLAYER_SEARCH_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        populate_by_name=True,
    )

    def field_weights(self) -> FieldWeights:
        return FieldWeights(
            name=self.name_weight,
            alias=self.alias_weight,
            keyword=self.keyword_weight,
            team=self.team_weight,
        )


settings = Settings()
