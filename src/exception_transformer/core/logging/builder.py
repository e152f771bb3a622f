"""
Logging builder: create and apply a dictConfig logging configuration from Settings.

The library itself only ever calls `logging.getLogger(__name__)`; applications
that want the bundled formatters and filters call `setup_logging(settings)` once
at start-up. Nothing here runs on import.

Configuration knobs (on the Settings object):
 - LOG_LEVEL, LOG_FORMAT ("json" | "text"), ENV
 - LOG_TO_STDOUT: console + error console when True, console + rotating files otherwise
 - LOG_DIR, LOG_MAX_BYTES, LOG_BACKUP_COUNT: rotating file handlers
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from exception_transformer.config.settings import Settings
from exception_transformer.utils.logging import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import ExceptionTypeFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

LIBRARY_LOGGER = "exception_transformer"


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color/dev or plain) and "json"
      - filters: "exception_type", "redact"
      - handlers: console, plus file/error_file OR error_console depending on LOG_TO_STDOUT
      - loggers: root and the library logger
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(exception_type)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "exception_type": {"()": ExceptionTypeFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
            },
            LIBRARY_LOGGER: {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging from settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Register an ExceptionTypeFilter on the root logger as a safety net for
         handlers added later by the host application.
    """
    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    logging.getLogger().addFilter(ExceptionTypeFilter())
