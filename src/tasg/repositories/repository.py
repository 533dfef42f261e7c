"""Repository abstraction for task persistence.

The service layer talks to storage only through ``TaskRepository`` so the
rules for ids and validation stay independent of the file format.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from tasg.models import Task


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Every mutating operation either takes full effect or leaves the stored
    collection untouched.
    """

    @property
    @abstractmethod
    def path(self) -> Path:
        """Location of the backing store."""
        raise NotImplementedError("TaskRepository.path must be implemented by adapter")

    @abstractmethod
    def add(self, task: Task) -> None:
        """Append a task to the end of the collection.

        Args:
            task: A fully constructed Task. Its id is not checked for duplicates.

        Raises:
            StorageError: If the backing store cannot be read or written
            SerializationError: If the stored data is corrupt
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def list_all(self, show_all: bool = False) -> list[Task]:
        """List tasks in insertion order.

        Args:
            show_all: Include completed tasks when True

        Returns:
            List of Task objects, possibly empty
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def complete(self, task_id: int) -> None:
        """Mark the first task with ``task_id`` as completed.

        Raises:
            NotFoundError: If no task has that id
        """
        raise NotImplementedError(
            "TaskRepository.complete() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Remove every task with ``task_id``.

        Raises:
            NotFoundError: If nothing was removed
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    def edit(self, task_id: int, description: str | None = None) -> None:
        """Update the first task with ``task_id`` and refresh its updated_at.

        Args:
            task_id: Id of the task to edit
            description: New text, or None to keep the current one

        Raises:
            NotFoundError: If no task has that id
        """
        raise NotImplementedError("TaskRepository.edit() must be implemented by adapter")
