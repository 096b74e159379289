import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textwriter.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "TEXTWRITER_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "TEXTWRITER_LOG_TO_FILE"
DEFAULT_LOG_SUBDIR = Path(".textwriter") / "logs"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_file_for(name: str) -> Path:
    """Return the rotating log file for logger ``name``, creating its directory."""

    configured = os.getenv(LOG_DIR_ENV_VAR)
    directory = (
        Path(configured).expanduser() if configured else Path.home() / DEFAULT_LOG_SUBDIR
    )
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{_sanitize_logger_name(name)}.log"


def _sanitize_logger_name(name: str) -> str:
    """Convert a logger name to a filesystem-friendly filename."""

    sanitized = name.replace("/", "_").replace(os.sep, "_")
    sanitized = sanitized.replace("..", ".")
    return sanitized.replace(".", "_") or "root"


def _handlers_for(name: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if _env_flag(LOG_TO_FILE_ENV_VAR, default=True):
        handlers.append(
            RotatingFileHandler(
                _log_file_for(name),
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
            )
        )
    return handlers


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and, unless disabled, a rotating file."""

    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Loggers configured elsewhere keep their handlers.
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _handlers_for(name):
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
