"""Logging setup for the connpane CLI.

The TUI owns the terminal, so log records never go to stderr: they are sent
to the Textual devtools console and, when debugging, to a log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

from .store import CONFIG_DIR

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Attach handlers to the ``connpane`` logger.

    Args:
        debug: Log at DEBUG level and also write to ``log_file``.
        log_file: File for debug logs (default: ``CONFIG_DIR / "connpane.log"``).

    Returns:
        The configured package logger.
    """
    root = logging.getLogger("connpane")
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    root.addHandler(TextualHandler())
    if debug:
        path = log_file or CONFIG_DIR / "connpane.log"
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
    root.propagate = False
    return root
