from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import regex

from .boundary import BoundaryTestResult, build_matcher, check_boundary
from .dictionary import load_dictionary, normalize_key, normalize_mapping
from .directives import effective_replacement
from .encoding import DEFAULT_ENCODING, canonical_encoding, ensure_text
from .stats import DictionaryStats, compute_stats

_WHITESPACE_RUN = regex.compile(r"[\s\p{Z}]+")

logger = logging.getLogger("quicktrans.translator")


def collapse_whitespace(text: str) -> str:
    """Replace every run of Unicode whitespace with one space and trim the result."""

    return _WHITESPACE_RUN.sub(" ", text).strip(" ")


class QuickTranslator:
    """Whole-word dictionary substitution over an ordered rule mapping.

    Rules are applied one after another in mapping order, so a rule sees the
    text produced by every rule before it: with ``{"a": "b", "b": "c"}`` the
    input ``"a"`` becomes ``"c"``. Dictionary authors should order entries
    with that chaining in mind.
    """

    def __init__(
        self,
        dictionary_path: Optional[Union[str, Path]] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._encoding = canonical_encoding(encoding)
        self.dictionary_path = Path(dictionary_path).expanduser() if dictionary_path is not None else None
        self._dictionary: Dict[str, str] = {}
        if self.dictionary_path is not None:
            self.reload()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], encoding: str = DEFAULT_ENCODING) -> "QuickTranslator":
        translator = cls(encoding=encoding)
        translator.set_dictionary(mapping)
        return translator

    def reload(self) -> None:
        if self.dictionary_path is None:
            raise ValueError("No dictionary path configured")
        self._dictionary = load_dictionary(self.dictionary_path, self._encoding)

    def translate(self, text: Union[str, bytes]) -> str:
        working = ensure_text(text, self._encoding)
        for word, raw_target in self._dictionary.items():
            matcher = build_matcher(word)
            working = matcher.sub(effective_replacement(word, raw_target), working)
        return collapse_whitespace(working)

    def test_boundary(self, word: str, sample_text: str) -> BoundaryTestResult:
        return check_boundary(word, sample_text)

    def get_dictionary(self) -> Dict[str, str]:
        return dict(self._dictionary)

    def set_dictionary(self, mapping: Mapping[str, str]) -> None:
        self._dictionary = normalize_mapping(mapping)

    dictionary = property(get_dictionary, set_dictionary)

    def get_encoding(self) -> str:
        return self._encoding

    def set_encoding(self, encoding: str) -> None:
        self._encoding = canonical_encoding(encoding)

    encoding = property(
        get_encoding,
        set_encoding,
        doc="Python codec name of the configured encoding; \"UTF-8\" reads back as \"utf-8\".",
    )

    def add_translation(self, source: str, target: str) -> None:
        """Add or overwrite a rule; the rule always moves to the end of the order."""

        key = normalize_key(source)
        if not key:
            raise ValueError("Source word must not be empty")
        self._dictionary.pop(key, None)
        self._dictionary[key] = target.strip()
        logger.debug("Added translation %r -> %r", key, self._dictionary[key])

    def remove_translation(self, source: str) -> None:
        """Remove a rule; ``source`` is trimmed and NFC-normalized like in :meth:`add_translation`."""

        self._dictionary.pop(normalize_key(source), None)

    def get_dictionary_stats(self) -> DictionaryStats:
        return compute_stats(self._dictionary, self._encoding)

    def __len__(self) -> int:
        return len(self._dictionary)

    def __contains__(self, word: object) -> bool:
        return word in self._dictionary
