from typing import Any, Dict, List, Sequence

from core import Priority, Task


class RecordError(ValueError):
    """A single stored record does not describe a valid task."""


class TaskRecordCodec:
    """JSON record <-> Task.

    Optional fields are written only when present so a loaded document
    re-serializes to the same shape.
    """

    REQUIRED_FIELDS = ("id", "description", "completed", "created_at")

    @staticmethod
    def to_record(task: Task) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": task.id,
            "description": task.description,
            "completed": task.completed,
            "created_at": task.created_at,
        }
        if task.priority is not None:
            record["priority"] = task.priority.code
        if task.due_date is not None:
            record["due_date"] = task.due_date
        if task.tags is not None:
            record["tags"] = list(task.tags)
        return record

    @classmethod
    def from_record(cls, raw: Any, position: int = 0) -> Task:
        if not isinstance(raw, dict):
            raise RecordError(f"record #{position} is not an object")
        missing = [name for name in cls.REQUIRED_FIELDS if name not in raw]
        if missing:
            raise RecordError(f"record #{position} is missing {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise RecordError(f"record #{position}: id must be an integer")
        if not isinstance(raw["description"], str):
            raise RecordError(f"record #{position}: description must be a string")
        if not raw["description"].strip():
            raise RecordError(f"record #{position}: description is empty")
        if not isinstance(raw["completed"], bool):
            raise RecordError(f"record #{position}: completed must be a boolean")
        if not isinstance(raw["created_at"], str):
            raise RecordError(f"record #{position}: created_at must be a string")

        priority_raw = raw.get("priority")
        if priority_raw is not None and not isinstance(priority_raw, str):
            raise RecordError(f"record #{position}: priority must be a string")
        try:
            priority = Priority.from_string(priority_raw)
        except ValueError as exc:
            raise RecordError(f"record #{position}: {exc}") from exc

        due_date = raw.get("due_date")
        if due_date is not None and not isinstance(due_date, str):
            raise RecordError(f"record #{position}: due_date must be a string")

        tags = raw.get("tags")
        if tags is not None:
            if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
                raise RecordError(f"record #{position}: tags must be a list of strings")
            if not all(t.strip() for t in tags):
                raise RecordError(f"record #{position}: tags must not be empty")
            tags = list(tags)

        return Task(
            id=task_id,
            description=raw["description"],
            completed=raw["completed"],
            created_at=raw["created_at"],
            priority=priority,
            due_date=due_date,
            tags=tags,
        )

    @classmethod
    def decode_document(cls, data: Any) -> List[Task]:
        if not isinstance(data, list):
            raise RecordError("top-level document is not an array")
        tasks = [cls.from_record(raw, position) for position, raw in enumerate(data)]
        seen = set()
        for task in tasks:
            if task.id in seen:
                raise RecordError(f"duplicate task id {task.id}")
            seen.add(task.id)
        return tasks

    @classmethod
    def encode_document(cls, tasks: Sequence[Task]) -> List[Dict[str, Any]]:
        return [cls.to_record(task) for task in tasks]
