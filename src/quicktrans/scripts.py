"""Unicode script classification for dictionary words."""

from __future__ import annotations

import enum
from typing import Dict, Set, Tuple

import regex

# Scripts whose words are conventionally separated by spaces or punctuation.
BOUNDARY_SCRIPTS: Tuple[str, ...] = (
    "Latin",
    "Cyrillic",
    "Greek",
    "Armenian",
    "Georgian",
    "Arabic",
    "Hebrew",
    "Devanagari",
    "Bengali",
    "Gujarati",
    "Gurmukhi",
    "Kannada",
    "Malayalam",
    "Oriya",
    "Tamil",
    "Telugu",
    "Thai",
    "Lao",
)

_BOUNDARY_RE = regex.compile(
    "[" + "".join(rf"\p{{{name}}}" for name in BOUNDARY_SCRIPTS) + "]"
)

# Character sets reported by dictionary statistics, keyed by display name.
CHARACTER_SETS: Dict[str, "regex.Pattern[str]"] = {
    "Latin": regex.compile(r"\p{Latin}"),
    "Cyrillic": regex.compile(r"\p{Cyrillic}"),
    "Chinese": regex.compile(r"\p{Han}"),
    "Japanese": regex.compile(r"[\p{Hiragana}\p{Katakana}]"),
    "Arabic": regex.compile(r"\p{Arabic}"),
    "Hebrew": regex.compile(r"\p{Hebrew}"),
    "Devanagari": regex.compile(r"\p{Devanagari}"),
}


class ScriptClass(enum.Enum):
    BOUNDARY = "boundary"
    NO_BOUNDARY = "no-boundary"


def uses_word_boundaries(word: str) -> bool:
    """Return ``True`` if any character of ``word`` belongs to a space-separated script."""

    return _BOUNDARY_RE.search(word) is not None


def classify(word: str) -> ScriptClass:
    if uses_word_boundaries(word):
        return ScriptClass.BOUNDARY
    return ScriptClass.NO_BOUNDARY


def detect_character_sets(word: str) -> Set[str]:
    return {name for name, pattern in CHARACTER_SETS.items() if pattern.search(word)}
