"""Interpretation of raw dictionary targets.

A target starting with ``+`` appends its text after the matched word, one
starting with ``-`` prepends it. Anything else replaces the word verbatim.
The stored dictionary keeps the marker, so parsing happens per translation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

APPEND_MARKER = "+"
PREPEND_MARKER = "-"


@dataclass(frozen=True, slots=True)
class Replace:
    text: str

    def render(self, word: str) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class AppendTo:
    text: str

    def render(self, word: str) -> str:
        return f"{word} {self.text}"


@dataclass(frozen=True, slots=True)
class PrependTo:
    text: str

    def render(self, word: str) -> str:
        return f"{self.text} {word}"


Directive = Union[Replace, AppendTo, PrependTo]


def parse_directive(raw_target: str) -> Directive:
    if raw_target.startswith(APPEND_MARKER):
        return AppendTo(raw_target.lstrip(APPEND_MARKER))
    if raw_target.startswith(PREPEND_MARKER):
        return PrependTo(raw_target.lstrip(PREPEND_MARKER))
    return Replace(raw_target)


def effective_replacement(word: str, raw_target: str) -> str:
    """Return the text that replaces a match of ``word`` for ``raw_target``."""

    return parse_directive(raw_target).render(word)
