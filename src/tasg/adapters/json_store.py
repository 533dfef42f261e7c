"""JSON file implementation of TaskRepository."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from tasg.exceptions import NotFoundError, SerializationError, StorageError
from tasg.models import Task, TaskList, local_now
from tasg.repositories import TaskRepository

logger = logging.getLogger(__name__)


class JsonTaskRepository(TaskRepository):
    """Task store backed by a single JSON array on disk.

    Each public operation loads the whole file, applies its change in memory
    and writes the whole file back. Nothing is cached between calls.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _load(self) -> list[Task]:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(exc) from exc
        try:
            tasks = TaskList.validate_json(data)
        except ValidationError as exc:
            raise SerializationError(exc) from exc
        logger.debug("loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def _save(self, tasks: list[Task]) -> None:
        try:
            data = TaskList.dump_json(tasks, indent=2)
        except PydanticSerializationError as exc:
            raise SerializationError(exc) from exc

        # Write next to the real target and rename over it, so a crash mid-write
        # never leaves a truncated tasks file behind. Symlinks stay symlinks and
        # the existing file mode carries over.
        target = self._path.resolve()
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(exc) from exc
        logger.debug("saved %d task(s) to %s", len(tasks), self._path)

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    # ---- public API ----

    def add(self, task: Task) -> None:
        tasks = self._load()
        tasks.append(task)
        self._save(tasks)
        logger.info("task added id=%s", task.id)

    def list_all(self, show_all: bool = False) -> list[Task]:
        tasks = self._load()
        if show_all:
            return tasks
        return [t for t in tasks if not t.completed]

    def complete(self, task_id: int) -> None:
        tasks = self._load()
        self._find(tasks, task_id).completed = True
        self._save(tasks)
        logger.info("task completed id=%s", task_id)

    def delete(self, task_id: int) -> None:
        tasks = self._load()
        remaining = [t for t in tasks if t.id != task_id]
        if len(remaining) == len(tasks):
            raise NotFoundError(task_id)
        self._save(remaining)
        logger.info("task deleted id=%s removed=%d", task_id, len(tasks) - len(remaining))

    def edit(self, task_id: int, description: str | None = None) -> None:
        tasks = self._load()
        task = self._find(tasks, task_id)
        if description is not None:
            task.description = description
        task.updated_at = local_now()
        self._save(tasks)
        logger.info("task edited id=%s description_changed=%s", task_id, description is not None)
