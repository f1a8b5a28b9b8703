"""Small helpers to keep TaskTrackerTUI.save_edit slim."""

from typing import Optional

from core.desktop.devtools.application.task_store import ERR_NOT_FOUND, ERR_REJECTED


def _report_failure(tui, error: str, rejected_key: Optional[str] = None) -> None:
    if error == ERR_NOT_FOUND:
        tui.set_status_message(tui._t("MSG_NOT_FOUND"))
    elif error == ERR_REJECTED and rejected_key:
        tui.set_status_message(tui._t(rejected_key))


def handle_add(tui, new_value: str) -> bool:
    if tui.edit_context != "add":
        return False
    result = tui.run_mutation(lambda store: store.add(new_value))
    if result is not None and result.ok:
        tui.select_task(result.task.id)
        tui.set_status_message(tui._t("MSG_ADDED"))
    tui.cancel_edit()
    return True


def handle_edit(tui, new_value: str) -> bool:
    if tui.edit_context != "edit":
        return False
    task_id = tui.edit_target_id
    result = tui.run_mutation(lambda store: store.edit_description(task_id, new_value))
    if result is not None:
        if result.ok:
            tui.set_status_message(tui._t("MSG_UPDATED"))
        else:
            _report_failure(tui, result.error, "MSG_EMPTY_DESCRIPTION")
    tui.cancel_edit()
    return True


def handle_due_date(tui, new_value: str) -> bool:
    if tui.edit_context != "due_date":
        return False
    task_id = tui.edit_target_id
    result = tui.run_mutation(lambda store: store.set_due_date(task_id, new_value))
    if result is not None:
        if result.ok:
            key = "MSG_DUE_UPDATED" if result.task.due_date else "MSG_DUE_CLEARED"
            tui.set_status_message(tui._t(key))
        else:
            _report_failure(tui, result.error, "MSG_DUE_INVALID")
    tui.cancel_edit()
    return True


def handle_tags(tui, new_value: str) -> bool:
    if tui.edit_context != "tags":
        return False
    task_id = tui.edit_target_id
    result = tui.run_mutation(lambda store: store.set_tags(task_id, new_value))
    if result is not None:
        if result.ok:
            tui.set_status_message(tui._t("MSG_TAGS_UPDATED"))
        else:
            _report_failure(tui, result.error)
    tui.cancel_edit()
    return True


def handle_search(tui, new_value: str) -> bool:
    if tui.edit_context != "search":
        return False
    tui.set_search(new_value)
    if not new_value:
        tui.set_status_message(tui._t("MSG_SEARCH_CLEARED"))
    tui.cancel_edit()
    return True


EDIT_HANDLERS = (handle_add, handle_edit, handle_due_date, handle_tags, handle_search)


__all__ = [
    "EDIT_HANDLERS",
    "handle_add",
    "handle_edit",
    "handle_due_date",
    "handle_tags",
    "handle_search",
]
