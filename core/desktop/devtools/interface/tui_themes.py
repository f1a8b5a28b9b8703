#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.done": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "border.list": "#9ad974",
        "border.input": "#e5c07b",
        "border.help": "#56b6c2",
        "status": "bg:#264f78 #ffffff",
        "status.message": "bg:#264f78 #ffffff bold",
        "instructions": "#d7dfe6",
        "priority.high": "#e06c75 bold",
        "priority.medium": "#e5c07b bold",
        "priority.low": "#9ad974 bold",
        "due": "#56b6c2",
        "tag": "#c678dd",
        "check": "#9ad974 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.done": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "border.list": "#b8f171",
        "border.input": "#f0c674",
        "border.help": "#66d9ef",
        "status": "bg:#1f4e8c #ffffff",
        "status.message": "bg:#1f4e8c #ffffff bold",
        "instructions": "#e8eaec",
        "priority.high": "#ff6b6b bold",
        "priority.medium": "#f0c674 bold",
        "priority.low": "#b8f171 bold",
        "due": "#66d9ef",
        "tag": "#d6a4ff",
        "check": "#b8f171 bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
