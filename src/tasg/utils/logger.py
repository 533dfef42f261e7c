"""Rotating log file for tasg, kept under platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; their records propagate
to the ``tasg`` logger configured here. Nothing is written until
``get_logger()`` has been called once, which the command wrapper does.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "tasg"
LOG_LEVEL_ENV = "TASG_LOG_LEVEL"

_LOG_FILE = "tasg.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    raw = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.DEBUG
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the application logger, attaching the file handler on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(APP_LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(_level_from_env())
    # Other handlers (e.g. test capture) may already be attached; only the
    # rotating file handler is ours.
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(handler)
    else:
        handler.close()
    # File only; the CLI prints its own errors.
    logger.propagate = False

    _logger = logger
    return _logger
