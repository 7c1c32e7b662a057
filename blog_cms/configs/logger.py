"""File logging shared by every module logger."""

from functools import cache
from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from blog_cms.configs.settings import settings

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


@cache
def _file_handler() -> RotatingFileHandler:
    """Build the single rotating JSON handler all loggers write through."""
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / settings.LOG_FILE_NAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(INFO)
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"),
    )
    return handler


def file_logger(logger: Logger) -> Logger:
    """
    Attach the rotating JSON file handler to ``logger``.

    Console output is left to the root handler configured by the middleware
    module. When ``LOG_TO_FILE`` is disabled the logger is returned untouched.

    Args:
        logger: Logger to extend, usually ``getLogger(__name__)``.

    Returns:
        The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    handler = _file_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    return logger
