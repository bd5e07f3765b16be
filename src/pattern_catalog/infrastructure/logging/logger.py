"""Logging setup for the catalog.

Narration goes to stdout, so log records are only ever written to stderr
or to a log file.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from pattern_catalog.config.schemas.logging_schema import LoggingConfig

ROOT_LOGGER_NAME = "pattern_catalog"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to the record."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Get a logger, nested under the package logger."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(config: Optional["LoggingConfig"] = None) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        The configured package logger.
    """
    if config is None:
        from pattern_catalog.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, config.level.upper()))
    root_logger.propagate = False

    formatter = DetailedFormatter(config.format or DEFAULT_FORMAT)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        # "stdout" names the console destination; records still go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    root_logger.debug(
        "Logging configured: level=%s destination=%s", config.level, config.destination
    )
    return root_logger
