from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Mapping

from .scripts import CHARACTER_SETS, detect_character_sets


@dataclass(slots=True)
class DictionaryStats:
    word_count: int
    encoding: str
    character_sets: List[str] = field(default_factory=list)
    avg_word_length: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


def compute_stats(mapping: Mapping[str, str], encoding: str) -> DictionaryStats:
    """Summarize the source words of ``mapping``.

    Character sets are listed in a fixed order and word length counts code points.
    """

    stats = DictionaryStats(word_count=len(mapping), encoding=encoding)
    if not mapping:
        return stats

    found = set()
    total_length = 0
    for word in mapping:
        total_length += len(word)
        found |= detect_character_sets(word)

    stats.character_sets = [name for name in CHARACTER_SETS if name in found]
    stats.avg_word_length = total_length / len(mapping)
    return stats
