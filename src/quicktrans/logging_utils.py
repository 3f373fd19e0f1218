from __future__ import annotations

import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel


def _stderr_console() -> Console:
    return Console(file=sys.stderr)


@dataclass(slots=True)
class RichLogger:
    """Status panels on the console, mirrored as timestamped lines in a log file."""

    log_file: Optional[Path] = None
    console: Console = field(default_factory=_stderr_console)

    def record(self, message: str) -> None:
        """Write ``message`` to the log file only."""

        self._write_line(message)

    def log_panel(self, message: str, title: str, style: str) -> None:
        panel = Panel(message, border_style=style, title=title)
        self.console.print(panel)
        self._write_line(f"{title}: {message}")

    def log_exception(self, error: Exception) -> None:
        self.log_panel(str(error), "ERROR", "red")
        tb = traceback.format_exc()
        self._write_line(tb)

    def _write_line(self, message: str) -> None:
        if self.log_file is None:
            return
        timestamp = datetime.now().isoformat(timespec="seconds")
        with self.log_file.open("a", encoding="utf-8") as handle:
            handle.write(f"{timestamp} - {message}\n")


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route the package loggers through Rich; repeated calls only update the level."""

    package_logger = logging.getLogger("quicktrans")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        handler = RichHandler(console=console or _stderr_console(), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.addHandler(handler)
    return package_logger
