"""Non-interactive commands: one store mutation or query per invocation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from prompt_toolkit.shortcuts import confirm

from application.ports import CorruptStoreError
from core import FilterMode, SortMode, Task, ViewSettings
from core.desktop.devtools.application.task_store import (
    ERR_NOOP,
    ERR_NOT_FOUND,
    ERR_REJECTED,
    MutationResult,
    TaskStore,
)
from core.desktop.devtools.interface.cli_io import structured_error, structured_response
from config import set_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK
from core.desktop.devtools.interface.i18n import effective_lang, normalize_lang, translate
from core.desktop.devtools.interface.tui_render import task_row_fragments
from infrastructure.file_repository import JsonTaskRepository
from infrastructure.task_codec import TaskRecordCodec

logger = logging.getLogger("taskterm.cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CORRUPT = 2


def build_repository(args: argparse.Namespace) -> JsonTaskRepository:
    store = getattr(args, "store", None)
    return JsonTaskRepository(Path(store) if store else None)


def _ask(message: str) -> bool:
    if not sys.stdin.isatty():
        return False
    return bool(confirm(message))


def open_store(args: argparse.Namespace, *, interactive: bool = False) -> Optional[TaskStore]:
    """Load the store; a corrupt file is reported and, interactively, backed up and reinitialized."""
    repository = build_repository(args)
    try:
        return TaskStore.open(repository)
    except CorruptStoreError as exc:
        logger.error("Corrupt task store: %s", exc)
        print(translate("ERR_CORRUPT_STORE", path=exc.path, reason=exc.reason), file=sys.stderr)
        if interactive and _ask(translate("PROMPT_REINIT")):
            backup = repository.backup_corrupt()
            if backup is not None:
                print(translate("CORRUPT_BACKED_UP", path=backup), file=sys.stderr)
            store = TaskStore(repository)
            store.reset()
            return store
        print(translate("ERR_CORRUPT_HINT"), file=sys.stderr)
        return None


def format_task_line(task: Task) -> str:
    text = "".join(fragment for _, fragment in task_row_fragments(task))
    return f"{task.id}  {text}"


def _report(args: argparse.Namespace, command: str, result: MutationResult, success_key: str, **extra) -> int:
    as_json = bool(getattr(args, "json", False))
    task_id = getattr(args, "task_id", None)
    if result.ok:
        task = result.task
        message = translate(success_key, id=task.id, description=task.description, **extra)
        return structured_response(command, message=message, payload={"task": TaskRecordCodec.to_record(task)}, as_json=as_json)
    if result.error == ERR_NOT_FOUND:
        return structured_error(command, translate("ERR_NOT_FOUND", id=task_id), as_json=as_json)
    if result.error == ERR_NOOP:
        return structured_response(command, as_json=as_json)
    if result.error == ERR_REJECTED and command == "due":
        return structured_error(command, translate("ERR_DUE_INVALID", value=args.date), as_json=as_json)
    return structured_error(command, translate("ERR_EMPTY_DESCRIPTION"), as_json=as_json)


def _with_store(args: argparse.Namespace, action: Callable[[TaskStore], int]) -> int:
    store = open_store(args)
    if store is None:
        return EXIT_CORRUPT
    return action(store)


def cmd_list(args: argparse.Namespace) -> int:
    def _list(store: TaskStore) -> int:
        settings = ViewSettings(
            filter_mode=FilterMode.from_string(args.filter),
            sort_mode=SortMode.from_string(args.sort),
            search=args.search or "",
        )
        rows = store.view(settings)
        if getattr(args, "json", False):
            total, completed = store.counts()
            payload = {
                "total": total,
                "completed": completed,
                "tasks": [TaskRecordCodec.to_record(row.task) for row in rows],
            }
            return structured_response("list", payload=payload, as_json=True)
        if not rows:
            print(translate("CLI_NO_TASKS"))
            return EXIT_OK
        for row in rows:
            print(format_task_line(row.task))
        return EXIT_OK

    return _with_store(args, _list)


def cmd_add(args: argparse.Namespace) -> int:
    return _with_store(args, lambda store: _report(args, "add", store.add(" ".join(args.text)), "CLI_ADDED"))


def cmd_done(args: argparse.Namespace) -> int:
    def _done(store: TaskStore) -> int:
        result = store.toggle_complete(args.task_id)
        key = "CLI_TOGGLED_DONE" if result.ok and result.task.completed else "CLI_TOGGLED_OPEN"
        return _report(args, "done", result, key)

    return _with_store(args, _done)


def cmd_rm(args: argparse.Namespace) -> int:
    return _with_store(args, lambda store: _report(args, "rm", store.delete(args.task_id), "CLI_DELETED"))


def cmd_edit(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    return _with_store(args, lambda store: _report(args, "edit", store.edit_description(args.task_id, text), "CLI_UPDATED"))


def cmd_priority(args: argparse.Namespace) -> int:
    def _priority(store: TaskStore) -> int:
        result = store.cycle_priority(args.task_id)
        code = result.task.priority.code if result.ok else ""
        return _report(args, "priority", result, "CLI_PRIORITY", priority=code)

    return _with_store(args, _priority)


def cmd_due(args: argparse.Namespace) -> int:
    return _with_store(args, lambda store: _report(args, "due", store.set_due_date(args.task_id, args.date or ""), "CLI_UPDATED"))


def cmd_tags(args: argparse.Namespace) -> int:
    return _with_store(args, lambda store: _report(args, "tags", store.set_tags(args.task_id, args.tags or ""), "CLI_UPDATED"))


def cmd_path(args: argparse.Namespace) -> int:
    print(build_repository(args).path)
    return EXIT_OK


def cmd_lang(args: argparse.Namespace) -> int:
    """Show the interface language, or persist a new one to config.yaml."""
    as_json = bool(getattr(args, "json", False))
    if args.code:
        code = normalize_lang(args.code)
        if not code:
            choices = ", ".join(sorted(LANG_PACK))
            return structured_error("lang", translate("ERR_LANG_UNKNOWN", value=args.code, choices=choices), as_json=as_json)
        set_user_lang(code)
        logger.info("Interface language set to %s", code)
        return structured_response("lang", message=code, payload={"lang": code}, as_json=as_json)
    current = effective_lang()
    return structured_response("lang", message=current, payload={"lang": current}, as_json=as_json)


def cmd_reset(args: argparse.Namespace) -> int:
    repository = build_repository(args)
    if not args.yes and not _ask(translate("CLI_RESET_CONFIRM", path=repository.path)):
        print(translate("CLI_ABORTED"), file=sys.stderr)
        return EXIT_FAILED
    try:
        store = TaskStore.open(repository)
    except CorruptStoreError as exc:
        logger.warning("Resetting unreadable store: %s", exc)
        backup = repository.backup_corrupt()
        if backup is not None:
            print(translate("CORRUPT_BACKED_UP", path=backup))
        store = TaskStore(repository)
    store.reset()
    print(translate("CLI_RESET_DONE", path=repository.path))
    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_FAILED",
    "EXIT_CORRUPT",
    "build_repository",
    "open_store",
    "format_task_line",
    "cmd_list",
    "cmd_add",
    "cmd_done",
    "cmd_rm",
    "cmd_edit",
    "cmd_priority",
    "cmd_due",
    "cmd_tags",
    "cmd_path",
    "cmd_lang",
    "cmd_reset",
]
