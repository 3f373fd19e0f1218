from __future__ import annotations

import logging
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .encoding import DEFAULT_ENCODING, DICTIONARY_CANDIDATES, ensure_text
from .errors import DictionaryNotFoundError, DictionaryReadError

COMMENT_PREFIXES: Tuple[str, ...] = ("#", "//")
TARGET_SEPARATOR = ":"
SOURCE_SEPARATOR = ","
BYTE_ORDER_MARK = "\ufeff"

logger = logging.getLogger("quicktrans.dictionary")


def normalize_nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def normalize_key(word: str) -> str:
    return normalize_nfc(word.strip())


def split_lines(content: str) -> Iterable[Tuple[int, str]]:
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    for number, line in enumerate(content.split("\n"), start=1):
        line = line.strip()
        if line:
            yield number, line


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_PREFIXES)


def parse_dictionary(content: str) -> Dict[str, str]:
    """Parse ``word1, word2: target`` lines into an ordered mapping.

    Comments and lines without source words are skipped. A word listed on
    several lines keeps the target of its last line.
    """

    mapping: Dict[str, str] = {}
    for number, line in split_lines(content):
        if is_comment(line):
            continue
        sources, _, target = line.partition(TARGET_SEPARATOR)
        sources = sources.strip()
        if not sources:
            logger.debug("Skipping line %d without source words: %r", number, line)
            continue
        target = normalize_nfc(target.strip())
        for word in sources.split(SOURCE_SEPARATOR):
            word = word.strip()
            if word:
                mapping[normalize_nfc(word)] = target
    return mapping


def read_dictionary_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    if not path.exists():
        raise DictionaryNotFoundError(f"Translation map file '{path}' not found.")
    try:
        raw = path.read_bytes()
    except OSError as error:
        raise DictionaryReadError(f"Unable to read translation map file '{path}'.") from error
    # Editors on Windows often save UTF-8 with a leading BOM.
    return ensure_text(raw, encoding, candidates=DICTIONARY_CANDIDATES).removeprefix(BYTE_ORDER_MARK)


def load_dictionary(path: Optional[Union[str, Path]], encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """Load word mappings from a translation map file."""

    if path is None:
        return {}

    path = Path(path).expanduser()
    mapping = parse_dictionary(read_dictionary_text(path, encoding))
    logger.info("Loaded %d dictionary entries from %s", len(mapping), path)
    return mapping


def normalize_mapping(mapping: Mapping[str, str]) -> Dict[str, str]:
    """Copy ``mapping`` with trimmed NFC keys, dropping entries whose key is empty."""

    normalized: Dict[str, str] = {}
    for word, target in mapping.items():
        key = normalize_key(str(word))
        if key:
            normalized[key] = "" if target is None else str(target)
    return normalized
