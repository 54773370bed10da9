import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from todos.env import Settings, get_settings


_LOG_FILE_NAME = "todos.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _build_handlers(settings: Settings, log_level: int) -> list[logging.Handler]:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    file_handler = RotatingFileHandler(
        settings.log_dir / _LOG_FILE_NAME,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_BACKUP_COUNT,
    )
    for handler in (stream_handler, file_handler):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
    return [stream_handler, file_handler]


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Log to stdout and a rotating file in ``settings.log_dir``.

    Calling it again only adjusts the level.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todos_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in _build_handlers(settings, log_level):
        root_logger.addHandler(handler)
    root_logger._todos_logging_configured = True
