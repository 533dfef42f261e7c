"""Task data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, TypeAdapter


def local_now() -> datetime:
    """Current time in the local time zone, with its UTC offset attached."""
    return datetime.now().astimezone()


class Task(BaseModel):
    """A single to-do item as stored in the tasks file."""

    id: int
    description: str
    created_at: datetime
    updated_at: datetime
    completed: bool = False

    @classmethod
    def new(cls, task_id: int, description: str) -> Task:
        """Build an open task stamped with the current local time.

        No validation is done here; callers reject empty descriptions first.
        """
        now = local_now()
        return cls(
            id=task_id,
            description=description,
            created_at=now,
            updated_at=now,
        )


# Whole-file codec: the tasks file is a JSON array of Task objects.
TaskList = TypeAdapter(list[Task])
