from .priority import Priority, DEFAULT_PRIORITY, priority_rank, next_priority
from .task import (
    Task,
    current_timestamp,
    parse_timestamp,
    normalize_description,
    is_valid_due_date,
    parse_tags,
    next_task_id,
)
from .view import (
    FilterMode,
    SortMode,
    ViewSettings,
    ViewRow,
    cycle_filter,
    cycle_sort,
    derive_view,
    view_counts,
)

__all__ = [
    "Priority",
    "DEFAULT_PRIORITY",
    "priority_rank",
    "next_priority",
    "Task",
    "current_timestamp",
    "parse_timestamp",
    "normalize_description",
    "is_valid_due_date",
    "parse_tags",
    "next_task_id",
    # View
    "FilterMode",
    "SortMode",
    "ViewSettings",
    "ViewRow",
    "cycle_filter",
    "cycle_sort",
    "derive_view",
    "view_counts",
]
