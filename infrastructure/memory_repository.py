from typing import List, Optional, Sequence

from core import Task
from application.ports import CorruptStoreError, TaskRepository
from infrastructure.task_codec import RecordError, TaskRecordCodec


class InMemoryTaskRepository(TaskRepository):
    """
    Keeps the serialized document in memory.
    Records go through the same codec as the JSON file so tests see the
    exact persisted shape without touching disk.
    """

    def __init__(self, tasks: Optional[Sequence[Task]] = None):
        self.document: List[dict] = TaskRecordCodec.encode_document(tasks or [])
        self.save_count = 0

    def load(self) -> List[Task]:
        try:
            return TaskRecordCodec.decode_document(self.document)
        except RecordError as exc:
            raise CorruptStoreError(None, str(exc)) from exc

    def save(self, tasks: Sequence[Task]) -> None:
        self.document = TaskRecordCodec.encode_document(tasks)
        self.save_count += 1
