"""CLI parser construction for taskterm CLI/TUI."""

import argparse
from typing import Any, Mapping

from core import FilterMode, SortMode


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskterm",
        description="taskterm: terminal task tracker (no command starts the TUI)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--store", metavar="PATH", help="task file to use instead of ~/.taskterm/tasks.json")
    parser.add_argument("--version", action="store_true", help="print version and exit")
    parser.add_argument("--json", action="store_true", help="machine-readable output for non-interactive commands")

    def add_task_id(sp):
        sp.add_argument("task_id", type=int, help="task id as printed by `list`")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Start the TUI")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"palette (default: {default_theme})")
    tui_p.set_defaults(func=commands.cmd_tui)

    # list
    lp = sub.add_parser("list", help="List tasks")
    lp.add_argument("--filter", choices=[m.value for m in FilterMode], default=FilterMode.ALL.value)
    lp.add_argument("--sort", choices=[m.value for m in SortMode], default=SortMode.DEFAULT.value)
    lp.add_argument("--search", default="", help="case-insensitive description substring")
    lp.set_defaults(func=commands.cmd_list)

    # add
    ap = sub.add_parser("add", help="Add a task")
    ap.add_argument("text", nargs="+")
    ap.set_defaults(func=commands.cmd_add)

    # done
    dp = add_task_id(sub.add_parser("done", help="Toggle completion"))
    dp.set_defaults(func=commands.cmd_done)

    # rm
    rp = add_task_id(sub.add_parser("rm", help="Delete a task"))
    rp.set_defaults(func=commands.cmd_rm)

    # edit
    ep = add_task_id(sub.add_parser("edit", help="Replace the description"))
    ep.add_argument("text", nargs="+")
    ep.set_defaults(func=commands.cmd_edit)

    # priority
    pp = add_task_id(sub.add_parser("priority", help="Cycle priority (low → medium → high → low)"))
    pp.set_defaults(func=commands.cmd_priority)

    # due
    up = add_task_id(sub.add_parser("due", help="Set due date (YYYY-MM-DD); omit to clear"))
    up.add_argument("date", nargs="?", default="")
    up.set_defaults(func=commands.cmd_due)

    # tags
    tp = add_task_id(sub.add_parser("tags", help="Replace tags (comma-separated); omit to clear"))
    tp.add_argument("tags", nargs="?", default="")
    tp.set_defaults(func=commands.cmd_tags)

    # path
    sub.add_parser("path", help="Print the task file location").set_defaults(func=commands.cmd_path)

    # lang
    gp = sub.add_parser("lang", help="Show or set the interface language (en, ru)")
    gp.add_argument("code", nargs="?", default="")
    gp.set_defaults(func=commands.cmd_lang)

    # reset
    xp = sub.add_parser("reset", help="Erase all tasks (an unreadable file is backed up first)")
    xp.add_argument("--yes", "-y", action="store_true", help="do not ask for confirmation")
    xp.set_defaults(func=commands.cmd_reset)

    return parser


__all__ = ["build_parser"]
