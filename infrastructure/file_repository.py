import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from core import Task
from application.ports import CorruptStoreError, TaskRepository
from infrastructure.task_codec import RecordError, TaskRecordCodec


logger = logging.getLogger("taskterm.repository")


class JsonTaskRepository(TaskRepository):
    """Whole-collection JSON document on disk (one array, rewritten on every save)."""

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            from config import get_store_path

            path = get_store_path()
        self.path = Path(path).expanduser()

    def load(self) -> List[Task]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(self.path, f"not valid UTF-8 ({exc.reason})") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(self.path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
        try:
            tasks = TaskRecordCodec.decode_document(data)
        except RecordError as exc:
            raise CorruptStoreError(self.path, str(exc)) from exc
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps(TaskRecordCodec.encode_document(tasks), indent=2, ensure_ascii=False)
        root = self.path.parent
        root.mkdir(parents=True, exist_ok=True)
        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(root),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(self.path))
        finally:
            if tmp_path is not None and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_path)
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)

    def backup_corrupt(self, now: Optional[datetime] = None) -> Optional[Path]:
        """Move an unreadable store aside; returns the backup path (None if no file)."""
        if not self.path.exists():
            return None
        stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
        target = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        counter = 1
        while target.exists():
            target = self.path.with_name(f"{self.path.name}.corrupt-{stamp}-{counter}")
            counter += 1
        os.replace(str(self.path), str(target))
        logger.warning("Moved unreadable store %s to %s", self.path, target)
        return target
