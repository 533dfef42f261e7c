"""Task service - Business logic for task operations.

This service layer sits between commands and the repository: it validates
user input, assigns ids to new tasks and removes the tasks file on nuke.
"""

from __future__ import annotations

import logging

from tasg.adapters import JsonTaskRepository
from tasg.config import ensure_tasks_file, load_settings
from tasg.exceptions import InvalidInputError, StorageError
from tasg.models import Task
from tasg.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def next_task_id(self) -> int:
        """Id for the next new task: one past the highest id in use.

        Equals ``count + 1`` for any history without deletions, and never hands
        out an id that a live task still holds.
        """
        tasks = self.repository.list_all(show_all=True)
        return max((t.id for t in tasks), default=0) + 1

    def add_task(self, description: str) -> Task:
        """Create a new task.

        Args:
            description: Task text; surrounding whitespace is stripped

        Returns:
            The Task that was stored

        Raises:
            InvalidInputError: If the description is empty
        """
        description = description.strip()
        if not description:
            raise InvalidInputError("Description cannot be empty")
        task = Task.new(self.next_task_id(), description)
        self.repository.add(task)
        return task

    def list_tasks(self, show_all: bool = False) -> list[Task]:
        """List open tasks, or every task when ``show_all`` is set."""
        return self.repository.list_all(show_all=show_all)

    def complete_task(self, task_id: int) -> None:
        self.repository.complete(task_id)

    def delete_task(self, task_id: int) -> None:
        self.repository.delete(task_id)

    def edit_task(self, task_id: int, description: str | None = None) -> None:
        """Edit a task's description and refresh its updated_at timestamp.

        Raises:
            InvalidInputError: If a description is given but blank
            NotFoundError: If no task has that id
        """
        if description is not None:
            description = description.strip()
            if not description:
                raise InvalidInputError("Description cannot be empty")
        self.repository.edit(task_id, description)

    def nuke(self) -> None:
        """Delete the whole tasks file. A missing file counts as success."""
        path = self.repository.path
        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("nuke: %s already absent", path)
            return
        except OSError as exc:
            raise StorageError(exc) from exc
        logger.info("nuke: removed %s", path)


def get_task_service() -> TaskService:
    """Build a TaskService for the configured tasks file, creating it on first run."""
    settings = load_settings()
    ensure_tasks_file(settings.tasks_file)
    return TaskService(JsonTaskRepository(settings.tasks_file))
