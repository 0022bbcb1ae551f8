"""Shared error types for the player catalog."""

from __future__ import annotations


class CatalogConfigError(Exception):
    """Raised when the player catalog file is missing or invalid."""


class PlayerNotFoundError(LookupError):
    """Raised when a player id is not present in the catalog."""
