from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

APP_DIRNAME = ".taskterm"
STORE_FILENAME = "tasks.json"
CONFIG_FILENAME = "config.yaml"
LOG_FILENAME = "taskterm.log"


def get_home_dir() -> Path:
    """Per-user data directory (~/.taskterm, or TASKTERM_HOME when set)."""
    env_home = os.environ.get("TASKTERM_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / APP_DIRNAME


def user_config_path() -> Path:
    return get_home_dir() / CONFIG_FILENAME


def _load_config() -> Dict[str, Any]:
    path = user_config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    path = user_config_path()
    if not data:
        if path.exists():
            path.unlink()
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def get_store_path() -> Path:
    configured = str(_load_config().get("store_path", "") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return get_home_dir() / STORE_FILENAME


def get_log_path() -> Path:
    return get_home_dir() / LOG_FILENAME


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["lang"] = value
    else:
        data.pop("lang", None)
    _save_config(data)
