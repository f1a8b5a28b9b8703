"""Status bar builder for TaskTrackerTUI."""

import time
from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText


def active_status_message(tui) -> str:
    """Return the transient message while it is still live, expiring it otherwise."""
    message = getattr(tui, "status_message", "")
    if message and time.time() < getattr(tui, "status_message_expires", 0):
        return message
    if message:
        tui.status_message = ""
    return ""


def build_status_text(tui) -> FormattedText:
    message = active_status_message(tui)
    if message:
        return FormattedText([("class:status.message", f" {message}")])

    total, completed = tui.store.counts()
    parts: List[Tuple[str, str]] = [
        (
            "class:status",
            " " + tui._t(
                "STATUS_LINE",
                total=total,
                completed=completed,
                filter=tui.settings.filter_mode.value,
                sort=tui.settings.sort_mode.value,
            ),
        )
    ]
    term = tui.settings.search
    if term:
        preview = (term[:24] + "…") if len(term) > 25 else term
        parts.append(("class:status", " | " + tui._t("STATUS_SEARCH", term=preview)))
    return FormattedText(parts)


__all__ = ["active_status_message", "build_status_text"]
