from __future__ import annotations

import logging
import os
from logging.config import dictConfig
from typing import Any


def _default_logging_dict(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def configure_logging(level_name: str | int | None = None) -> None:
    """Configure logging for the application.

    - A string like 'info' is upper-cased and resolved to the numeric level;
      unknown names fall back to INFO.
    - If None, tries `LOG_LEVEL` env var, otherwise defaults to INFO.
    Handlers log at DEBUG so the root logger alone controls the output level.
    """
    if level_name is None:
        level_name = os.getenv("LOG_LEVEL", "INFO")

    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    else:
        level = level_name

    dictConfig(_default_logging_dict(logging.getLevelName(level)))
    logging.getLogger().setLevel(level)
