"""Whole-word matchers for dictionary source words."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterator, List, Tuple

import regex

from .scripts import ScriptClass, classify

# A word in a space-separated script must not touch another letter, mark or number.
_ADJACENT_BEFORE = r"(?<![\p{L}\p{M}\p{N}])"
_ADJACENT_AFTER = r"(?![\p{L}\p{M}\p{N}])"

# Scripts without spacing need the word isolated by whitespace, punctuation or the text edges.
_ISOLATED_BEFORE = r"(?<=^|[\s\p{P}\p{Z}])"
_ISOLATED_AFTER = r"(?=[\s\p{P}\p{Z}]|$)"

MATCH_FLAGS = regex.IGNORECASE | regex.UNICODE

_DESCRIPTIONS = {
    ScriptClass.BOUNDARY: "not preceded or followed by a letter, mark or number",
    ScriptClass.NO_BOUNDARY: "preceded and followed by whitespace, punctuation or the text edge",
}


def pattern_source(word: str, script_class: ScriptClass) -> str:
    escaped = regex.escape(word)
    if script_class is ScriptClass.BOUNDARY:
        return f"{_ADJACENT_BEFORE}{escaped}{_ADJACENT_AFTER}"
    return f"{_ISOLATED_BEFORE}{escaped}{_ISOLATED_AFTER}"


@dataclass(frozen=True)
class Matcher:
    """Compiled case-insensitive whole-word pattern for one source word."""

    word: str
    script_class: ScriptClass
    pattern: "regex.Pattern[str]" = field(repr=False)

    @property
    def source(self) -> str:
        return self.pattern.pattern

    @property
    def description(self) -> str:
        return f"{self.script_class.value} script, {_DESCRIPTIONS[self.script_class]}: /{self.source}/ui"

    def finditer(self, text: str) -> Iterator["regex.Match[str]"]:
        return self.pattern.finditer(text)

    def sub(self, replacement: str, text: str) -> str:
        # A callable keeps backslashes in the target from being read as group references.
        return self.pattern.sub(lambda _match: replacement, text)


@lru_cache(maxsize=4096)
def build_matcher(word: str) -> Matcher:
    script_class = classify(word)
    compiled = regex.compile(pattern_source(word, script_class), MATCH_FLAGS)
    return Matcher(word=word, script_class=script_class, pattern=compiled)


@dataclass(slots=True)
class BoundaryTestResult:
    matches: List[Tuple[str, int]]
    count: int
    pattern: str
    script_class: ScriptClass

    def to_dict(self) -> dict:
        return {
            "matches": [list(item) for item in self.matches],
            "count": self.count,
            "pattern": self.pattern,
            "script_class": self.script_class.value,
        }


def check_boundary(word: str, sample_text: str) -> BoundaryTestResult:
    """List every whole-word match of ``word`` in ``sample_text`` without replacing anything."""

    matcher = build_matcher(word)
    matches = [(match.group(0), match.start()) for match in matcher.finditer(sample_text)]
    return BoundaryTestResult(
        matches=matches,
        count=len(matches),
        pattern=matcher.description,
        script_class=matcher.script_class,
    )
