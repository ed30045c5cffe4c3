import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

# one handler per log file, several loggers rotating the same file lose data
_file_handlers = {}


def resolve_level(level):
    """
    Turn a level name ("INFO", "debug", ...) or number into a logging level.

    Raises:
        ValueError: unknown level name
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def _file_handler(log_dir, log_name):
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    filename = (log_path / f"{log_name}.log").resolve()

    handler = _file_handlers.get(filename)
    if handler is None:
        # rotate daily, keep 30 days
        handler = TimedRotatingFileHandler(
            filename=filename,
            when='midnight',
            interval=1,
            backupCount=30,
            encoding='utf-8'
        )
        handler.setFormatter(logging.Formatter(
            '%(asctime)s|%(levelname)s|%(name)s|%(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        _file_handlers[filename] = handler
    return handler


def setup_logger(name="ubiregi", level=logging.INFO, log_dir=None, log_name="ubiregi"):
    """
    Configure a logger for the sample client.

    Args:
        name: logger name, "ubiregi" covers the driver modules
        level: logging level, int or name ("INFO", "DEBUG", ...)
        log_dir: directory for daily rotated log files; None logs to stderr only
        log_name: log file name prefix; loggers sharing it share one file handler

    Returns:
        logging.Logger

    Raises:
        ValueError: unknown level name
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # avoid adding handlers twice
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        logger.addHandler(console)

    if log_dir:
        handler = _file_handler(log_dir, log_name)
        if handler not in logger.handlers:
            logger.addHandler(handler)

    return logger
