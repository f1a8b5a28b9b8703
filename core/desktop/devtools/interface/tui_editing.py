"""Editing mode mixin for TUI."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from prompt_toolkit.application import Application
    from prompt_toolkit.buffer import Buffer
    from prompt_toolkit.layout import Container


DIALOG_TITLES = {
    "add": "DIALOG_ADD",
    "edit": "DIALOG_EDIT",
    "due_date": "DIALOG_DUE",
    "tags": "DIALOG_TAGS",
    "search": "DIALOG_SEARCH",
}


class EditingMixin:
    """Mixin providing the single-line input dialog for TUI."""

    editing_mode: bool
    edit_context: Optional[str]
    edit_target_id: Optional[int]
    edit_buffer: "Buffer"
    edit_field: "Container"
    main_window: "Container"
    app: Optional["Application"]

    def start_editing(self, context: str, current_value: str, target_id: Optional[int] = None) -> None:
        """Open the input dialog.

        Args:
            context: What is being edited ('add', 'edit', 'due_date', 'tags', 'search')
            current_value: Prefilled text
            target_id: Id of the task the dialog was opened for
        """
        self.editing_mode = True
        self.edit_context = context
        self.edit_target_id = target_id
        self.edit_buffer.text = current_value
        self.edit_buffer.cursor_position = len(current_value)
        if hasattr(self, "app") and self.app:
            self.app.layout.focus(self.edit_field)

    def save_edit(self) -> None:
        """Submit the dialog and dispatch to the handler for its context."""
        from core.desktop.devtools.interface.edit_handlers import EDIT_HANDLERS

        if not self.editing_mode:
            return

        new_value = self.edit_buffer.text.strip()
        # Empty input still reaches the handlers: it clears a due date, tags or the search.
        for handler in EDIT_HANDLERS:
            if handler(self, new_value):
                return
        self.cancel_edit()

    def cancel_edit(self) -> None:
        """Close the dialog and restore focus."""
        self.editing_mode = False
        self.edit_context = None
        self.edit_target_id = None
        self.edit_buffer.text = ""
        if hasattr(self, "app") and self.app:
            self.app.layout.focus(self.main_window)

    def edit_title_key(self) -> str:
        return DIALOG_TITLES.get(self.edit_context or "add", "DIALOG_ADD")


__all__ = ["EditingMixin", "DIALOG_TITLES"]
