"""Application-level task store: canonical collection plus persisted mutations."""

from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from application.ports import TaskRepository
from core import (
    DEFAULT_PRIORITY,
    Task,
    ViewRow,
    ViewSettings,
    current_timestamp,
    derive_view,
    is_valid_due_date,
    next_priority,
    next_task_id,
    normalize_description,
    parse_tags,
    view_counts,
)


logger = logging.getLogger("taskterm.store")

ERR_NOT_FOUND = "not_found"
ERR_REJECTED = "rejected"
ERR_NOOP = "noop"


class MutationResult(NamedTuple):
    ok: bool
    error: Optional[str]
    task: Optional[Task]


def _failed(code: str) -> MutationResult:
    return MutationResult(False, code, None)


class TaskStore:
    """Owns the canonical, insertion-ordered task list.

    Every successful mutation is written through the repository before the
    call returns. Mutations are built on a copy of the list and swapped in
    only after the save succeeded, so a failed save leaves memory untouched.
    """

    def __init__(self, repository: TaskRepository, tasks: Optional[Sequence[Task]] = None, clock: Callable[[], str] = current_timestamp):
        self.repository = repository
        self._tasks: List[Task] = list(tasks or [])
        self._clock = clock

    @classmethod
    def open(cls, repository: TaskRepository, **kwargs) -> "TaskStore":
        """Load the persisted collection (raises CorruptStoreError)."""
        return cls(repository, repository.load(), **kwargs)

    # ------------------------------------------------------------------ reads
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def task_at(self, index: int) -> Task:
        return self._tasks[index]

    def view(self, settings: ViewSettings = ViewSettings()) -> List[ViewRow]:
        return derive_view(self._tasks, settings)

    def counts(self) -> Tuple[int, int]:
        return view_counts(self._tasks)

    def _index_of(self, task_id: int) -> Optional[int]:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return None

    # ---------------------------------------------------------------- commit
    def _commit(self, new_tasks: List[Task]) -> None:
        self.repository.save(new_tasks)
        self._tasks = new_tasks

    def _replace(self, task_id: int, action: str, **changes) -> MutationResult:
        idx = self._index_of(task_id)
        if idx is None:
            logger.warning("%s: task %s not found (stale selection?)", action, task_id)
            return _failed(ERR_NOT_FOUND)
        updated = self._tasks[idx].copy(**changes)
        new_tasks = list(self._tasks)
        new_tasks[idx] = updated
        self._commit(new_tasks)
        logger.debug("%s: task %s updated", action, task_id)
        return MutationResult(True, None, updated)

    # ------------------------------------------------------------- mutations
    def add(self, description: str) -> MutationResult:
        text = normalize_description(description)
        if not text:
            return _failed(ERR_NOOP)
        task = Task(
            id=next_task_id(t.id for t in self._tasks),
            description=text,
            completed=False,
            created_at=self._clock(),
            priority=DEFAULT_PRIORITY,
        )
        self._commit(self._tasks + [task])
        logger.debug("add: task %s created", task.id)
        return MutationResult(True, None, task)

    def toggle_complete(self, task_id: int) -> MutationResult:
        current = self.get(task_id)
        if current is None:
            logger.warning("toggle_complete: task %s not found (stale selection?)", task_id)
            return _failed(ERR_NOT_FOUND)
        return self._replace(task_id, "toggle_complete", completed=not current.completed)

    def delete(self, task_id: int) -> MutationResult:
        idx = self._index_of(task_id)
        if idx is None:
            logger.warning("delete: task %s not found (stale selection?)", task_id)
            return _failed(ERR_NOT_FOUND)
        removed = self._tasks[idx]
        self._commit(self._tasks[:idx] + self._tasks[idx + 1:])
        logger.debug("delete: task %s removed", task_id)
        return MutationResult(True, None, removed)

    def edit_description(self, task_id: int, text: str) -> MutationResult:
        if self.get(task_id) is None:
            logger.warning("edit_description: task %s not found (stale selection?)", task_id)
            return _failed(ERR_NOT_FOUND)
        description = normalize_description(text)
        if not description:
            return _failed(ERR_REJECTED)
        return self._replace(task_id, "edit_description", description=description)

    def cycle_priority(self, task_id: int) -> MutationResult:
        current = self.get(task_id)
        if current is None:
            logger.warning("cycle_priority: task %s not found (stale selection?)", task_id)
            return _failed(ERR_NOT_FOUND)
        return self._replace(task_id, "cycle_priority", priority=next_priority(current.priority))

    def set_due_date(self, task_id: int, text: str) -> MutationResult:
        if self.get(task_id) is None:
            logger.warning("set_due_date: task %s not found (stale selection?)", task_id)
            return _failed(ERR_NOT_FOUND)
        value = (text or "").strip()
        if not value:
            return self._replace(task_id, "set_due_date", due_date=None)
        if not is_valid_due_date(value):
            return _failed(ERR_REJECTED)
        return self._replace(task_id, "set_due_date", due_date=value)

    def set_tags(self, task_id: int, text: str) -> MutationResult:
        return self._replace(task_id, "set_tags", tags=parse_tags(text))

    def reset(self) -> None:
        """Replace the collection with an empty one (corrupt-store recovery)."""
        self._commit([])
        logger.info("Store reset to an empty collection")


__all__ = ["TaskStore", "MutationResult", "ERR_NOT_FOUND", "ERR_REJECTED", "ERR_NOOP"]
