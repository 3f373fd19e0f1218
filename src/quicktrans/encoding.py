"""Validation, detection and conversion of byte input."""

from __future__ import annotations

import codecs
import logging
from typing import Optional, Sequence, Union

import chardet

from .errors import UnknownEncodingError

DEFAULT_ENCODING = "utf-8"
DICTIONARY_CANDIDATES: tuple[str, ...] = ("utf-8", "iso-8859-1", "windows-1252")
MIN_DETECTION_CONFIDENCE = 0.5

logger = logging.getLogger("quicktrans.encoding")


def canonical_encoding(name: str) -> str:
    """Return Python's canonical codec name for ``name``."""

    try:
        return codecs.lookup(name).name
    except LookupError as error:
        raise UnknownEncodingError(f"Unknown encoding: {name!r}") from error


def is_valid_encoding(data: bytes, encoding: str) -> bool:
    try:
        data.decode(encoding, errors="strict")
    except UnicodeDecodeError:
        return False
    except LookupError as error:
        raise UnknownEncodingError(f"Unknown encoding: {encoding!r}") from error
    return True


def detect_encoding(data: bytes, candidates: Optional[Sequence[str]] = None) -> Optional[str]:
    """Guess the encoding of ``data``.

    With ``candidates`` the first one that decodes cleanly wins. Without them
    the guess comes from chardet and is discarded below a minimum confidence.
    """

    if candidates:
        for candidate in candidates:
            try:
                if is_valid_encoding(data, candidate):
                    return candidate
            except UnknownEncodingError:
                continue
        return None

    detection = chardet.detect(data)
    encoding = detection.get("encoding")
    confidence = detection.get("confidence") or 0.0
    if not encoding or confidence < MIN_DETECTION_CONFIDENCE:
        return None
    return encoding


def convert_encoding(data: bytes, source: str, target: str) -> bytes:
    return data.decode(source).encode(target)


def ensure_text(
    data: Union[str, bytes],
    encoding: str = DEFAULT_ENCODING,
    candidates: Optional[Sequence[str]] = None,
) -> str:
    """Decode ``data`` leniently.

    Valid input is decoded with ``encoding``. Otherwise a detected encoding is
    used, and as a last resort undecodable bytes become U+FFFD.
    """

    if isinstance(data, str):
        return data
    if is_valid_encoding(data, encoding):
        return data.decode(encoding)

    detected = detect_encoding(data, candidates)
    if detected is not None:
        try:
            converted = convert_encoding(data, detected, encoding)
            logger.debug("Converted input from %s to %s", detected, encoding)
            return converted.decode(encoding)
        except (UnicodeError, LookupError) as error:
            logger.warning("Conversion from %s failed: %s", detected, error)

    logger.warning("Input is not valid %s; undecodable bytes were replaced", encoding)
    return data.decode(encoding, errors="replace")
