"""UI string lookup over constants.LANG_PACK with English fallback."""

import os
from collections import ChainMap
from typing import Mapping, Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"


def normalize_lang(value: Optional[str]) -> str:
    """Reduce 'ru', 'RU', 'ru_RU.UTF-8' or 'ru-RU' to a LANG_PACK key; '' when unknown."""
    token = (value or "").strip().lower().replace("-", "_").split(".")[0].split("_")[0]
    return token if token in LANG_PACK else ""


def effective_lang(preferred: Optional[str] = None) -> str:
    """TASKTERM_LANG wins, pytest forces English, then the caller's choice, then config."""
    forced = normalize_lang(os.getenv("TASKTERM_LANG"))
    if forced:
        return forced
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    return normalize_lang(preferred) or normalize_lang(get_user_lang()) or BASE_LANG


def messages(lang: Optional[str] = None) -> Mapping[str, str]:
    active = effective_lang(lang)
    return ChainMap(LANG_PACK.get(active, {}), LANG_PACK[BASE_LANG])


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = messages(lang).get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["BASE_LANG", "normalize_lang", "effective_lang", "messages", "translate"]
