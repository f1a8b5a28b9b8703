"""Navigation helpers for TaskTrackerTUI to keep tui_app slim."""


def clamp_selection(tui) -> None:
    """Keep selected_index inside the current rows after a view change."""
    total = len(tui.rows)
    if total <= 0:
        tui.selected_index = 0
        tui.list_view_offset = 0
        return
    tui.selected_index = max(0, min(tui.selected_index, total - 1))
    tui._ensure_selection_visible()


def move_vertical_selection(tui, delta: int) -> None:
    """
    Move selected row pointer by `delta`, clamping to available rows.

    Help and input dialogs block navigation.
    """
    if getattr(tui, "help_visible", False) or getattr(tui, "editing_mode", False):
        return
    total = len(tui.rows)
    if total <= 0:
        tui.selected_index = 0
        return
    tui.selected_index = max(0, min(tui.selected_index + delta, total - 1))
    tui._ensure_selection_visible()
    tui.force_render()


__all__ = ["clamp_selection", "move_vertical_selection"]
