#!/usr/bin/env python3
"""TUI application - TaskTrackerTUI class and cmd_tui command."""

import logging
import os
import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import ConditionalContainer, Float, FloatContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

from config import get_user_theme
from core import Task, ViewRow, ViewSettings, cycle_filter, cycle_sort
from core.desktop.devtools.application.task_store import ERR_NOT_FOUND, MutationResult, TaskStore
from core.desktop.devtools.interface.constants import STATUS_MESSAGE_TTL
from core.desktop.devtools.interface.i18n import effective_lang as _effective_lang, translate
from core.desktop.devtools.interface.tui_footer import build_footer_text
from core.desktop.devtools.interface.tui_navigation import clamp_selection, move_vertical_selection
from core.desktop.devtools.interface.tui_render import render_help_text, render_task_list_text
from core.desktop.devtools.interface.tui_status import build_status_text

from .tui_display import DisplayMixin
from .tui_editing import EditingMixin
from .tui_themes import DEFAULT_THEME, THEMES, build_style, get_theme_palette

logger = logging.getLogger("taskterm.tui")

# Rows taken by everything except the task list: list frame borders (2),
# input frame (3), instructions (1), status bar (1).
CHROME_HEIGHT = 7


class TaskTrackerTUI(EditingMixin, DisplayMixin):
    @staticmethod
    def get_theme_palette(theme: str) -> Dict[str, str]:
        return get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(self, store: TaskStore, theme: str = DEFAULT_THEME, settings: Optional[ViewSettings] = None):
        self.store = store
        self.settings = settings or ViewSettings()
        self.rows: List[ViewRow] = []
        self.selected_index = 0
        self.list_view_offset = 0
        self.theme_name = theme if theme in THEMES else DEFAULT_THEME
        self.status_message: str = ""
        self.status_message_expires: float = 0.0
        self.help_visible: bool = False
        self.language = _effective_lang()
        self.app: Optional[Application] = None

        # Editing mode
        self.editing_mode = False
        self.edit_context: Optional[str] = None
        self.edit_target_id: Optional[int] = None
        self.edit_field = TextArea(multiline=False, focusable=True, accept_handler=self._accept_edit)
        self.edit_buffer = self.edit_field.buffer

        self.refresh()

        self.style = self.build_style(self.theme_name)

        kb = KeyBindings()
        kb.timeout = 0
        not_editing = Condition(lambda: not self.editing_mode)
        list_active = not_editing & Condition(lambda: not self.help_visible)

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add("escape", eager=True)
        def _(event):
            if self.help_visible:
                self.help_visible = False
                self.force_render()
            elif self.editing_mode:
                self.cancel_edit()
            else:
                event.app.exit()

        @kb.add("q", filter=not_editing)
        @kb.add("й", filter=not_editing)
        def _(event):
            event.app.exit()

        @kb.add("h", filter=not_editing)
        @kb.add("р", filter=not_editing)
        def _(event):
            self.toggle_help()

        @kb.add("down", filter=list_active)
        @kb.add("j", filter=list_active)
        @kb.add("о", filter=list_active)
        def _(event):
            move_vertical_selection(self, 1)

        @kb.add("up", filter=list_active)
        @kb.add("k", filter=list_active)
        @kb.add("л", filter=list_active)
        def _(event):
            move_vertical_selection(self, -1)

        @kb.add("a", filter=list_active)
        @kb.add("ф", filter=list_active)
        def _(event):
            self.open_add_dialog()

        @kb.add("e", filter=list_active)
        @kb.add("у", filter=list_active)
        def _(event):
            self.open_edit_dialog()

        @kb.add("c", filter=list_active)
        @kb.add("с", filter=list_active)
        def _(event):
            self.toggle_selected()

        @kb.add("d", filter=list_active)
        @kb.add("в", filter=list_active)
        def _(event):
            self.delete_selected()

        @kb.add("f", filter=list_active)
        @kb.add("а", filter=list_active)
        def _(event):
            self.cycle_filter_mode()

        @kb.add("s", filter=list_active)
        @kb.add("ы", filter=list_active)
        def _(event):
            self.cycle_sort_mode()

        @kb.add("p", filter=list_active)
        @kb.add("з", filter=list_active)
        def _(event):
            self.cycle_priority_selected()

        @kb.add("u", filter=list_active)
        @kb.add("г", filter=list_active)
        def _(event):
            self.open_due_date_dialog()

        @kb.add("t", filter=list_active)
        @kb.add("е", filter=list_active)
        def _(event):
            self.open_tags_dialog()

        @kb.add("/", filter=list_active)
        @kb.add(".", filter=list_active)
        def _(event):
            self.open_search_dialog()

        self.task_list = Window(
            content=FormattedTextControl(self.get_task_list_text, focusable=True, show_cursor=False),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.main_window = self.task_list
        self.instructions = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)
        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True, style="class:status")
        self.help_window = Window(content=FormattedTextControl(self.get_help_text), always_hide_cursor=True, wrap_lines=True)

        body = HSplit(
            [
                Frame(self.task_list, title=lambda: self._t("LIST_LABEL"), style="class:border.list"),
                Frame(self.edit_field, title=lambda: self._t(self.edit_title_key()), style="class:border.input", height=Dimension.exact(3)),
                self.instructions,
                self.status_bar,
            ]
        )
        help_float = Float(
            content=ConditionalContainer(
                Frame(self.help_window, title=lambda: self._t("HELP_TITLE"), style="class:border.help", width=Dimension(preferred=60)),
                filter=Condition(lambda: self.help_visible),
            )
        )
        root = FloatContainer(content=body, floats=[help_float])

        self.app = Application(
            layout=Layout(root, focused_element=self.task_list),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=0.5,
        )
        # Make Esc responsive: prompt_toolkit defaults ttimeoutlen=0.5s to disambiguate
        # between a standalone Escape and ANSI key sequences (arrows, etc.).
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TASKTERM_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def _t(self, key: str, **kwargs) -> str:
        return translate(key, lang=getattr(self, "language", "en"), **kwargs)

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    # ------------------------------------------------------------ view state
    def refresh(self) -> None:
        """Recompute visible rows from the store and clamp the selection."""
        self.rows = self.store.view(self.settings)
        clamp_selection(self)
        self.force_render()

    def _visible_row_limit(self) -> int:
        return max(1, self.get_terminal_height() - CHROME_HEIGHT)

    def _ensure_selection_visible(self) -> None:
        limit = self._visible_row_limit()
        if self.selected_index < self.list_view_offset:
            self.list_view_offset = self.selected_index
        elif self.selected_index >= self.list_view_offset + limit:
            self.list_view_offset = self.selected_index - limit + 1
        max_offset = max(0, len(self.rows) - limit)
        self.list_view_offset = max(0, min(self.list_view_offset, max_offset))

    def select_task(self, task_id: int) -> None:
        for idx, row in enumerate(self.rows):
            if row.task.id == task_id:
                self.selected_index = idx
                self._ensure_selection_visible()
                return

    def selected_task(self) -> Optional[Task]:
        """Task under the cursor, resolved through the store's canonical list."""
        if not self.rows or not (0 <= self.selected_index < len(self.rows)):
            return None
        row = self.rows[self.selected_index]
        try:
            task = self.store.task_at(row.index)
        except IndexError:
            task = None
        if task is None or task.id != row.task.id:
            logger.warning("Stale row %s for task %s; refreshing view", row.index, row.task.id)
            self.refresh()
            return None
        return task

    def set_search(self, term: str) -> None:
        self.settings = replace(self.settings, search=term)
        self.selected_index = 0
        self.refresh()

    # -------------------------------------------------------------- mutations
    def run_mutation(self, operation: Callable[[TaskStore], MutationResult]) -> Optional[MutationResult]:
        """Apply a store mutation, then rebuild the view before the next key is handled."""
        try:
            result = operation(self.store)
        except OSError as exc:
            logger.error("Saving tasks failed: %s", exc)
            self.set_status_message(self._t("MSG_SAVE_FAILED", error=exc), ttl=STATUS_MESSAGE_TTL * 2)
            self.refresh()
            return None
        self.refresh()
        return result

    def _mutate_selected(self, operation: Callable[[TaskStore, int], MutationResult]) -> Optional[MutationResult]:
        task = self.selected_task()
        if task is None:
            return None
        result = self.run_mutation(lambda store: operation(store, task.id))
        if result is not None and not result.ok and result.error == ERR_NOT_FOUND:
            self.set_status_message(self._t("MSG_NOT_FOUND"))
            return None
        return result

    def toggle_selected(self) -> None:
        result = self._mutate_selected(lambda store, task_id: store.toggle_complete(task_id))
        if result is not None and result.ok:
            self.set_status_message(self._t("MSG_COMPLETED" if result.task.completed else "MSG_UNCOMPLETED"))

    def delete_selected(self) -> None:
        result = self._mutate_selected(lambda store, task_id: store.delete(task_id))
        if result is not None and result.ok:
            self.set_status_message(self._t("MSG_DELETED"))

    def cycle_priority_selected(self) -> None:
        result = self._mutate_selected(lambda store, task_id: store.cycle_priority(task_id))
        if result is not None and result.ok:
            self.set_status_message(self._t("MSG_PRIORITY", priority=result.task.priority.code))

    def cycle_filter_mode(self) -> None:
        self.settings = replace(self.settings, filter_mode=cycle_filter(self.settings.filter_mode))
        self.refresh()
        self.set_status_message(self._t("MSG_FILTER", mode=self.settings.filter_mode.value))

    def cycle_sort_mode(self) -> None:
        self.settings = replace(self.settings, sort_mode=cycle_sort(self.settings.sort_mode))
        self.refresh()
        self.set_status_message(self._t("MSG_SORT", mode=self.settings.sort_mode.value))

    # ---------------------------------------------------------------- dialogs
    def open_add_dialog(self) -> None:
        self.start_editing("add", "")

    def open_edit_dialog(self) -> None:
        task = self.selected_task()
        if task is not None:
            self.start_editing("edit", task.description, task.id)

    def open_due_date_dialog(self) -> None:
        task = self.selected_task()
        if task is not None:
            self.start_editing("due_date", task.due_date or "", task.id)

    def open_tags_dialog(self) -> None:
        task = self.selected_task()
        if task is not None:
            self.start_editing("tags", ",".join(task.tags or []), task.id)

    def open_search_dialog(self) -> None:
        self.start_editing("search", self.settings.search)

    def _accept_edit(self, _buffer) -> bool:
        self.save_edit()
        return True

    def toggle_help(self) -> None:
        self.help_visible = not self.help_visible
        self.force_render()

    # ---------------------------------------------------------------- render
    def set_status_message(self, message: str, ttl: float = STATUS_MESSAGE_TTL) -> None:
        self.status_message = message
        self.status_message_expires = time.time() + ttl
        self.force_render()

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def get_task_list_text(self) -> FormattedText:
        return render_task_list_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def get_help_text(self) -> FormattedText:
        return render_help_text(self)

    def run(self):
        self.app.run()


def cmd_tui(args) -> int:
    from core.desktop.devtools.interface.cli_commands import open_store

    store = open_store(args, interactive=True)
    if store is None:
        return 2
    theme = getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME
    tui = TaskTrackerTUI(store, theme=theme)
    tui.run()
    return 0


__all__ = ["TaskTrackerTUI", "cmd_tui"]
