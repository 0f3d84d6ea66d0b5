import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_FILE_NAME = "todo.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_HANDLER_PREFIX = "todo."
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(_HANDLER_PREFIX)]


def _named(handler: logging.Handler, name: str, level: int) -> logging.Handler:
    handler.set_name(_HANDLER_PREFIX + name)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def setup_logging(debug: bool | None = None, log_dir: str | Path | None = None) -> None:
    """Route root logging to stdout and a rotating todo.log.

    Safe to call repeatedly: handlers installed by an earlier call are
    replaced, anything else on the root logger is left alone.
    """
    if debug is None:
        debug = os.getenv("TODO_DEBUG") == "1"
    level = logging.DEBUG if debug else logging.INFO

    log_dir = Path(log_dir or os.getenv("TODO_LOG_DIR") or "./data/logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in _own_handlers(root_logger):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(level)
    root_logger.addHandler(_named(logging.StreamHandler(sys.stdout), "stdout", level))
    root_logger.addHandler(
        _named(
            RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT),
            "file",
            level,
        )
    )
