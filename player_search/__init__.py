"""Bilingual (Arabic/English) fuzzy player search."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("player-search")
except PackageNotFoundError:
    __version__ = "0.0.0"
