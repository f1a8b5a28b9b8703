import re
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .priority import Priority


DUE_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass
class Task:
    id: int
    description: str
    completed: bool = False
    created_at: str = ""
    priority: Optional[Priority] = None
    due_date: Optional[str] = None  # YYYY-MM-DD, no calendar check
    tags: Optional[List[str]] = None  # None = never set, [] = cleared

    def copy(self, **changes) -> "Task":
        """Return a detached copy; the tag list is never shared between copies."""
        if "tags" not in changes and self.tags is not None:
            changes["tags"] = list(self.tags)
        return replace(self, **changes)

    @property
    def has_tags(self) -> bool:
        return bool(self.tags)


def current_timestamp() -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a stored created_at value; naive values are taken as UTC."""
    text = (value or "").strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_description(text: Optional[str]) -> str:
    return (text or "").strip()


def is_valid_due_date(text: str) -> bool:
    return DUE_DATE_RE.fullmatch(text or "") is not None


def parse_tags(text: Optional[str]) -> List[str]:
    """Split comma-separated input into trimmed, non-empty tags."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def next_task_id(existing: Iterable[int], now_ms: Optional[int] = None) -> int:
    """Timestamp-based id, bumped past the largest existing id on collision."""
    candidate = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    ids = list(existing)
    if ids:
        candidate = max(candidate, max(ids) + 1)
    return candidate


__all__ = [
    "Task",
    "DUE_DATE_RE",
    "current_timestamp",
    "parse_timestamp",
    "normalize_description",
    "is_valid_due_date",
    "parse_tags",
    "next_task_id",
]
