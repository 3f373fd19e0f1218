"""Exception types raised by quicktrans."""

from __future__ import annotations


class QuickTranslatorError(Exception):
    """Base class for every error raised by the package."""


class DictionaryNotFoundError(QuickTranslatorError, FileNotFoundError):
    """The dictionary file does not exist."""


class DictionaryReadError(QuickTranslatorError, OSError):
    """The dictionary file exists but its content could not be read."""


class UnknownEncodingError(QuickTranslatorError, LookupError):
    """The requested encoding has no Python codec."""


class ConfigError(QuickTranslatorError, ValueError):
    """Runtime configuration is incomplete or invalid."""
