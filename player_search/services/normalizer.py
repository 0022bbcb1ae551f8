"""Arabic and Latin text normalization for player matching."""

from __future__ import annotations

import re
import unicodedata

_ARABIC_DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0670]")
_ALEF_RE = re.compile(r"[\u0622\u0623\u0625\u0671\u0627]")
_YAA_RE = re.compile(r"[ىي]")
# Hamza carriers are deleted, not substituted.
_HAMZA_RE = re.compile(r"[ؤئء]")
_NON_LATIN_RE = re.compile(r"[^a-z0-9\s]")
_SPACE_RE = re.compile(r"\s+")

_TAA_MARBUTA = "ة"
_HAA = "ه"
_TATWEEL = "ـ"


def _collapse(value: str) -> str:
    return _SPACE_RE.sub(" ", value).strip()


def normalize_arabic(text: str | None) -> str:
    """Canonicalize Arabic letter variants and strip tashkeel."""
    if not text:
        return ""
    normalized = _ARABIC_DIACRITICS_RE.sub("", text)
    normalized = _ALEF_RE.sub("ا", normalized)
    normalized = normalized.replace(_TAA_MARBUTA, _HAA)
    normalized = _YAA_RE.sub("ي", normalized)
    normalized = _HAMZA_RE.sub("", normalized)
    normalized = normalized.replace(_TATWEEL, "")
    return _collapse(normalized).lower()


def normalize_latin(text: str | None) -> str:
    """Lowercase and drop accents, e.g. ``"José"`` -> ``"jose"``."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _collapse(stripped.lower())


def normalize_latin_strict(text: str | None) -> str:
    """Latin normalization restricted to ``[a-z0-9 ]``."""
    return _collapse(_NON_LATIN_RE.sub(" ", normalize_latin(text)))


def normalize(text: str | None) -> str:
    """Single canonical form used for sorting and keyword filtering."""
    return normalize_arabic(normalize_latin(normalize_arabic(text)))


def match_form(text: str | None) -> str:
    """Arabic form and strict Latin form of ``text`` joined for fuzzy matching.

    ``"Mohannad"`` yields ``"mohannad"`` (both forms agree), ``"مُهنّد"`` yields
    ``"مهند"`` (the strict Latin form is empty), ``"José"`` yields
    ``"josé jose"``.
    """
    forms: list[str] = []
    for form in (normalize_arabic(text), normalize_latin_strict(text)):
        if form and form not in forms:
            forms.append(form)
    return " ".join(forms)
