"""Log handlers for console output."""

from __future__ import annotations

import logging
import sys
from typing import IO

from rich.console import Console
from rich.text import Text


class RichConsoleHandler(logging.Handler):
    """Log handler that writes level-coloured lines to a Rich console."""

    LEVEL_STYLES = {
        "DEBUG": "dim",
        "INFO": "blue",
        "WARNING": "yellow",
        "ERROR": "red bold",
        "CRITICAL": "red bold reverse",
    }

    def __init__(self, console: Console | None = None, show_path: bool = False) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.show_path = show_path

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = Text()
            text.append(
                f"[{record.levelname:8}]", style=self.LEVEL_STYLES.get(record.levelname, "")
            )
            text.append(" ")
            # Plain append: vendor text may contain square brackets
            text.append(self.format(record))
            if self.show_path:
                text.append(f" ({record.filename}:{record.lineno})", style="dim")
            self.console.print(text)
        except Exception:
            self.handleError(record)


class StreamHandlerWithFlush(logging.StreamHandler):
    """StreamHandler that always flushes after each emit."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        super().__init__(stream or sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            super().emit(record)
            self.flush()
        except Exception:
            self.handleError(record)
