"""Footer renderer for TaskTrackerTUI."""

from prompt_toolkit.formatted_text import FormattedText


def build_footer_text(tui) -> FormattedText:
    # The dialog hint replaces the key list while input is open
    if getattr(tui, "editing_mode", False):
        return FormattedText([("class:instructions", tui._t("DIALOG_HINT"))])
    text = tui._ellipsize(tui._t("INSTRUCTIONS"), max(10, tui.get_terminal_width()))
    return FormattedText([("class:instructions", text)])


__all__ = ["build_footer_text"]
