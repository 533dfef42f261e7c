"""Configuration for tasg: where the tasks file lives."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, Field

from tasg.exceptions import StorageError

APP_NAME = "tasg"
TASKS_FILE_ENV = "TASG_FILE"
TASKS_FILE_NAME = "tasks.json"


def default_tasks_file() -> Path:
    """Default tasks file inside the per-user configuration directory."""
    return Path(user_config_dir(APP_NAME)) / TASKS_FILE_NAME


class Settings(BaseModel):
    """Runtime settings."""

    tasks_file: Path = Field(default_factory=default_tasks_file)


def load_settings() -> Settings:
    """Build settings, letting ``TASG_FILE`` override the tasks file path."""
    raw = os.getenv(TASKS_FILE_ENV)
    if raw is None or raw.strip() == "":
        return Settings()
    return Settings(tasks_file=Path(raw).expanduser())


def ensure_tasks_file(path: Path) -> None:
    """Create the parent directory and an empty ``[]`` tasks file if missing."""
    if path.exists():
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("[]", encoding="utf-8")
    except OSError as exc:
        raise StorageError(exc) from exc
