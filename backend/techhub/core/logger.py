import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from techhub.core.config import settings

# Include the function name so handler failures are easy to trace
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"


def _level(level: int = None) -> int:
    return level or logging.getLevelName(settings.LOG_LEVEL.upper())


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Logger for one service or module: stdout at INFO, and unless LOG_TO_FILE is
    off, `<name>.log` at DEBUG plus `<name>_error.log` at ERROR under LOG_DIR.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level(level))
    # Handlers are ours alone, don't repeat records through the root logger
    logger.propagate = False

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    if not settings.LOG_TO_FILE:
        return logger

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    stem = name.replace('.', '_')
    logger.addHandler(_rotating_handler(log_dir / f"{stem}.log", logging.DEBUG, formatter))
    logger.addHandler(_rotating_handler(log_dir / f"{stem}_error.log", logging.ERROR, formatter))

    return logger
