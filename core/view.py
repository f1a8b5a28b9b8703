"""Derived task views: filter, search and sort over the canonical collection.

Everything here is pure. The canonical list is never reordered; each derived
row carries the position of its task in the canonical list at the moment the
view was computed, so callers must recompute after any mutation.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, List, NamedTuple, Sequence, Tuple

from .priority import priority_rank
from .task import Task, parse_timestamp


class FilterMode(Enum):
    ALL = "all"
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"

    @classmethod
    def from_string(cls, value: str) -> "FilterMode":
        token = (value or "").strip().lower()
        for mode in cls:
            if mode.value == token:
                return mode
        raise ValueError(f"Invalid filter mode: {value!r}")


class SortMode(Enum):
    DEFAULT = "default"
    PRIORITY = "priority"
    DUE_DATE = "dueDate"
    CREATED = "created"

    @classmethod
    def from_string(cls, value: str) -> "SortMode":
        token = (value or "").strip().lower().replace("_", "").replace("-", "")
        for mode in cls:
            if mode.value.lower() == token:
                return mode
        raise ValueError(f"Invalid sort mode: {value!r}")


_FILTER_ORDER: Tuple[FilterMode, ...] = (FilterMode.ALL, FilterMode.COMPLETED, FilterMode.UNCOMPLETED)
_SORT_ORDER: Tuple[SortMode, ...] = (SortMode.DEFAULT, SortMode.PRIORITY, SortMode.DUE_DATE, SortMode.CREATED)


@dataclass(frozen=True)
class ViewSettings:
    filter_mode: FilterMode = FilterMode.ALL
    sort_mode: SortMode = SortMode.DEFAULT
    search: str = ""


class ViewRow(NamedTuple):
    task: Task
    index: int  # position in the canonical collection


def cycle_filter(mode: FilterMode) -> FilterMode:
    return _FILTER_ORDER[(_FILTER_ORDER.index(mode) + 1) % len(_FILTER_ORDER)]


def cycle_sort(mode: SortMode) -> SortMode:
    return _SORT_ORDER[(_SORT_ORDER.index(mode) + 1) % len(_SORT_ORDER)]


def matches_filter(task: Task, mode: FilterMode) -> bool:
    if mode is FilterMode.COMPLETED:
        return task.completed
    if mode is FilterMode.UNCOMPLETED:
        return not task.completed
    return True


def matches_search(task: Task, search: str) -> bool:
    needle = (search or "").strip().lower()
    if not needle:
        return True
    return needle in task.description.lower()


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _due_date_key(task: Task) -> Tuple[int, str]:
    if not task.due_date:
        return (1, "")
    return (0, task.due_date)


def _created_key(task: Task) -> Tuple[int, datetime]:
    parsed = parse_timestamp(task.created_at)
    if parsed is None:
        return (1, _EPOCH)
    return (0, parsed)


_SORT_KEYS: Dict[SortMode, Callable[[Task], object]] = {
    SortMode.PRIORITY: lambda task: priority_rank(task.priority),
    SortMode.DUE_DATE: _due_date_key,
    SortMode.CREATED: _created_key,
}


def derive_view(tasks: Sequence[Task], settings: ViewSettings = ViewSettings()) -> List[ViewRow]:
    """Return the visible rows for ``settings``.

    Filter and search run first; the sort (stable, so ties keep canonical
    order) runs last over the surviving subset.
    """
    positions = {task.id: idx for idx, task in enumerate(tasks)}
    rows = [
        ViewRow(task, positions[task.id])
        for task in tasks
        if matches_filter(task, settings.filter_mode) and matches_search(task, settings.search)
    ]
    key = _SORT_KEYS.get(settings.sort_mode)
    if key is not None:
        rows.sort(key=lambda row: key(row.task))
    return rows


def view_counts(tasks: Sequence[Task]) -> Tuple[int, int]:
    """(total, completed) over the canonical collection."""
    return len(tasks), sum(1 for t in tasks if t.completed)


__all__ = [
    "FilterMode",
    "SortMode",
    "ViewSettings",
    "ViewRow",
    "cycle_filter",
    "cycle_sort",
    "matches_filter",
    "matches_search",
    "derive_view",
    "view_counts",
]
