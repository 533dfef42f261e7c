"""Domain models for tasg."""

from .task import Task, TaskList, local_now

__all__ = ["Task", "TaskList", "local_now"]
