import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from orgstats.config.defaults import LogDestination
from orgstats.config.schemas import LoggingConfig


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to every record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging section of the application configuration.
               If None, schema defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.file.max_size_mb * 1024 * 1024,
            backupCount=config.file.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        # "stdout" names the console destination; records go to stderr
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("orgstats")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
