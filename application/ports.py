from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from core import Task


class CorruptStoreError(Exception):
    """The persisted task document exists but cannot be read back as tasks."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        where = str(path) if path else "<store>"
        super().__init__(f"{where}: {reason}")


class TaskRepository(Protocol):
    def load(self) -> List[Task]:
        ...

    def save(self, tasks: Sequence[Task]) -> None:
        ...
