from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .encoding import DEFAULT_ENCODING, canonical_encoding
from .errors import ConfigError, DictionaryNotFoundError

DEFAULT_LOG_FILE = "quicktrans.log"
ENV_PREFIX = "QUICKTRANS_"


@dataclass(slots=True)
class AppConfig:
    """Container for user configurable runtime options."""

    dictionary_path: Path
    encoding: str
    log_file: Optional[Path]
    verbose: bool


def load_environment() -> None:
    """Load environment variables from .env files if present."""

    load_dotenv(override=False)


def load_config_file(path: Optional[Path]) -> Dict[str, Any]:
    """Read a YAML config file; a missing path yields an empty mapping."""

    if path is None:
        return {}
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return data


def _setting(args, name: str, file_values: Dict[str, Any], default: Any = None) -> Any:
    value = getattr(args, name, None)
    if value is not None:
        return value
    value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
    if value:
        return value
    value = file_values.get(name)
    if value is not None:
        return value
    return default


def build_config(args) -> AppConfig:
    """Create an :class:`AppConfig` from CLI arguments, environment and config file."""

    load_environment()
    config_path = getattr(args, "config", None) or os.getenv(f"{ENV_PREFIX}CONFIG")
    file_values = load_config_file(Path(config_path).expanduser() if config_path else None)

    dictionary = _setting(args, "dictionary", file_values)
    if not dictionary:
        raise ConfigError(
            "No dictionary configured. Pass --dictionary, set QUICKTRANS_DICTIONARY or add it to the config file."
        )
    dictionary_path = Path(str(dictionary)).expanduser()
    if not dictionary_path.exists():
        raise DictionaryNotFoundError(f"Dictionary file not found: {dictionary_path}")

    encoding = canonical_encoding(str(_setting(args, "encoding", file_values, DEFAULT_ENCODING)))

    log_file: Optional[Path] = None
    log_value = _setting(args, "log_file", file_values, DEFAULT_LOG_FILE)
    if log_value:
        log_file = Path(str(log_value)).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)

    return AppConfig(
        dictionary_path=dictionary_path,
        encoding=encoding,
        log_file=log_file,
        verbose=bool(getattr(args, "verbose", False)),
    )
