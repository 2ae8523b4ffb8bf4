from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from lightset.config.models import LoggingSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_MARKER = "_lightset_handler"


def _remove_installed_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARKER, True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def init_logging(settings: LoggingSettings) -> None:
    """
    Configure the root logger from settings.

    Installs a stderr handler and, when ``settings.file`` is set, a daily rotating file handler.
    Calling it again replaces the handlers installed by the previous call and leaves other handlers
    alone.
    """
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {settings.level}")

    root = logging.getLogger()
    _remove_installed_handlers(root)
    root.setLevel(level)
    root.addHandler(_mark(logging.StreamHandler(sys.stderr)))

    if settings.file is not None:
        log_path = Path(settings.file.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_path,
            when="midnight",
            backupCount=settings.file.rotation.backup_count,
            encoding="utf-8",
        )
        root.addHandler(_mark(file_handler))

    logging.getLogger(__name__).debug("Logging initialized. level=%s file=%s", settings.level, settings.file)
