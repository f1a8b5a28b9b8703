"""Rendering helpers for TaskTrackerTUI to keep the class slim."""

from typing import List, Optional

from prompt_toolkit.formatted_text import FormattedText

from core import Task
from core.desktop.devtools.interface.tui_display import Fragment


def _merge_style(selected_style: Optional[str], fragment_style: str) -> str:
    if not selected_style:
        return fragment_style
    return f"{selected_style} {fragment_style}".strip()


def task_row_fragments(task: Task) -> List[Fragment]:
    """Checkbox, description, then the optional priority, due date and tags."""
    parts: List[Fragment] = []
    if task.completed:
        parts.append(("class:check", "[✓] "))
        parts.append(("class:text.done", task.description))
    else:
        parts.append(("class:text", "[ ] "))
        parts.append(("class:text", task.description))
    if task.priority is not None:
        parts.append((f"class:{task.priority.style}", f" ({task.priority.label})"))
    if task.due_date:
        parts.append(("class:due", f" (due: {task.due_date})"))
    if task.tags:
        parts.append(("class:tag", " " + " ".join(f"#{tag}" for tag in task.tags)))
    return parts


def render_task_list_text(tui) -> FormattedText:
    """Visible window of task rows, the selected one highlighted."""
    width = max(10, tui.get_terminal_width() - 4)
    rows = tui.rows
    if not rows:
        key = "EMPTY_VIEW" if len(tui.store) else "EMPTY_LIST"
        return FormattedText([("class:text.dim", tui._t(key))])

    limit = tui._visible_row_limit()
    start = tui.list_view_offset
    result: List[Fragment] = []
    for offset, row in enumerate(rows[start:start + limit]):
        idx = start + offset
        fragments = tui._fit_fragments(task_row_fragments(row.task), width)
        if idx == tui.selected_index:
            selected = "class:selected"
            fragments = [(_merge_style(selected, style), text) for style, text in fragments]
            used = tui._fragments_width(fragments)
            if used < width:
                fragments.append((selected, " " * (width - used)))
        result.extend(fragments)
        result.append(("", "\n"))
    if result:
        result.pop()
    return FormattedText(result)


def render_help_text(tui) -> FormattedText:
    return FormattedText([("class:text", tui._t("HELP_BODY"))])


__all__ = ["task_row_fragments", "render_task_list_text", "render_help_text"]
