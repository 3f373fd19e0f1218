from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.markup import escape

from .boundary import BoundaryTestResult
from .directives import AppendTo, PrependTo, parse_directive
from .stats import DictionaryStats


def describe_target(raw_target: str) -> str:
    directive = parse_directive(raw_target)
    if isinstance(directive, AppendTo):
        return f"append {directive.text!r}"
    if isinstance(directive, PrependTo):
        return f"prepend {directive.text!r}"
    if not directive.text:
        return "delete"
    return f"replace with {directive.text!r}"


def print_stats(console: Console, stats: DictionaryStats) -> None:
    console.print("#### DICTIONARY STATS")
    console.print(f"words: {stats.word_count}")
    console.print(f"character sets: {', '.join(stats.character_sets) or 'none'}")
    console.print(f"average word length: {stats.avg_word_length:.2f}")
    console.print(f"encoding: {stats.encoding}")


def print_dictionary(console: Console, mapping: Mapping[str, str]) -> None:
    console.print("#### DICTIONARY RULES (application order)")
    for index, (word, raw_target) in enumerate(mapping.items(), start=1):
        console.print(f"{index}: {escape(word)} -> {escape(describe_target(raw_target))}")


def print_boundary_result(console: Console, word: str, result: BoundaryTestResult) -> None:
    console.print(f"#### BOUNDARY TEST: {escape(word)}")
    console.print(f"rule: {escape(result.pattern)}")
    console.print(f"matches: {result.count}")
    for matched, offset in result.matches:
        console.print(f"  {offset}: {escape(matched)}")
