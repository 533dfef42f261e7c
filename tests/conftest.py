"""Shared test fixtures and configuration.

Every test gets its own tasks file and log directory under *tmp_path*, so
nothing touches the real user config or log locations.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from tasg.adapters import JsonTaskRepository
from tasg.config import TASKS_FILE_ENV


@pytest.fixture(autouse=True)
def isolate_logging(tmp_path):
    """Send the application log into *tmp_path* and reset the logger singleton."""
    import tasg.utils.logger as logger_mod

    def _reset():
        logger_mod._logger = None
        app_logger = logging.getLogger(logger_mod.APP_LOGGER_NAME)
        for handler in list(app_logger.handlers):
            if not isinstance(handler, logging.handlers.RotatingFileHandler):
                continue
            handler.close()
            app_logger.removeHandler(handler)

    _reset()
    log_dir = tmp_path / "logs"
    with patch("tasg.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _reset()


@pytest.fixture(autouse=True)
def tasks_file(tmp_path, monkeypatch):
    """Point TASG_FILE at a fresh path; the file itself is not created."""
    path = tmp_path / "data" / "tasks.json"
    monkeypatch.setenv(TASKS_FILE_ENV, str(path))
    return path


@pytest.fixture()
def repo(tasks_file) -> JsonTaskRepository:
    """A JSON store over the per-test tasks file."""
    tasks_file.parent.mkdir(parents=True, exist_ok=True)
    return JsonTaskRepository(tasks_file)
