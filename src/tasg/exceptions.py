"""Error types raised by the task store and service layer."""

from __future__ import annotations

from tasg.utils.exit_codes import (
    ERROR_DATA,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
)


class TaskError(Exception):
    """Base class for all tasg errors, carrying the process exit code."""

    exit_code: int = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class NotFoundError(TaskError):
    """No task matches the given id."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class StorageError(TaskError):
    """Reading, writing or removing the tasks file failed."""

    def __init__(self, cause: OSError):
        exit_code = (
            ERROR_PERMISSION_DENIED
            if isinstance(cause, PermissionError)
            else ERROR_GENERAL
        )
        super().__init__(f"I/O error - {cause}", exit_code=exit_code)
        self.cause = cause


class SerializationError(TaskError):
    """The tasks file is not a JSON array of tasks, or could not be encoded."""

    exit_code = ERROR_DATA

    def __init__(self, cause: Exception):
        super().__init__(f"Serialization error - {cause}")
        self.cause = cause


class InvalidInputError(TaskError):
    """Caller-supplied data failed a precondition."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, reason: str):
        super().__init__(f"Invalid input - {reason}")
        self.reason = reason
