#!/usr/bin/env python3
"""
taskterm: terminal task tracker (TUI plus a small scripting CLI).

All tasks live in one JSON document (~/.taskterm/tasks.json by default).

This is a thin facade that wires the parser, logging and the command modules.
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from types import SimpleNamespace
from typing import List, Optional

from config import get_log_path
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.logging_setup import setup_logging

from .cli_commands import (
    EXIT_FAILED,
    cmd_add,
    cmd_done,
    cmd_due,
    cmd_edit,
    cmd_lang,
    cmd_list,
    cmd_path,
    cmd_priority,
    cmd_reset,
    cmd_rm,
    cmd_tags,
)
from .tui_app import TaskTrackerTUI, cmd_tui
from .tui_themes import DEFAULT_THEME, THEMES

logger = logging.getLogger("taskterm.cli")

COMMANDS = SimpleNamespace(
    cmd_tui=cmd_tui,
    cmd_list=cmd_list,
    cmd_add=cmd_add,
    cmd_done=cmd_done,
    cmd_rm=cmd_rm,
    cmd_edit=cmd_edit,
    cmd_priority=cmd_priority,
    cmd_due=cmd_due,
    cmd_tags=cmd_tags,
    cmd_path=cmd_path,
    cmd_lang=cmd_lang,
    cmd_reset=cmd_reset,
)


def build_parser() -> argparse.ArgumentParser:
    return build_cli_parser(COMMANDS, THEMES, DEFAULT_THEME)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("taskterm"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None):
        args.command = "tui"
        args.theme = None
        args.func = cmd_tui
    interactive = args.command == "tui"
    # The full-screen TUI owns the terminal, so it only logs to the file.
    setup_logging(log_file=get_log_path(), console_level=None if interactive else logging.WARNING)
    try:
        return args.func(args)
    except OSError as exc:
        logger.error("%s failed: %s", args.command, exc)
        if interactive:
            print(f"taskterm: {exc}", file=sys.stderr)
        return EXIT_FAILED


__all__ = ["main", "build_parser", "COMMANDS", "TaskTrackerTUI", "THEMES", "DEFAULT_THEME"]


if __name__ == "__main__":
    sys.exit(main())
