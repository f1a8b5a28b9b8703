"""Logging configuration for the CLI and the full-screen TUI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


class _ConsoleNoiseFilter(logging.Filter):
    """Only our own records reach the console; third-party noise needs ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskterm"):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: Optional[Path] = None,
    console_level: Optional[int] = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure the root logger once, early.

    - File handler (when log_file is given): everything at file_level.
    - Console handler on stderr (unless console_level is None). The TUI passes
      None because anything written to the terminal would corrupt the screen.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console_level is not None:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        ch.addFilter(_ConsoleNoiseFilter())
        root.addHandler(ch)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError as exc:
            logging.getLogger("taskterm.cli").warning("File logging disabled: %s", exc)
        else:
            fh.setLevel(file_level)
            fh.setFormatter(fmt)
            root.addHandler(fh)

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    logging.captureWarnings(True)


__all__ = ["setup_logging"]
